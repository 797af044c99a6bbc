from .booking_status import BookingStatus
from .employee import Employee, EmployeeRole, EmployeeStatus
from .hotel import Hotel, HotelStatus, RoomType
from .vehicle import Vehicle, VehicleStatus, VehicleType
from .custom_package import ItemModel, OptionCategory, PackageOption
from .custom_booking import CustomPackageBooking
from .package import PackageBooking, PackageStatus, TourPackage

__all__ = [
    "BookingStatus",
    "Employee",
    "EmployeeRole",
    "EmployeeStatus",
    "Hotel",
    "HotelStatus",
    "RoomType",
    "Vehicle",
    "VehicleStatus",
    "VehicleType",
    "ItemModel",
    "OptionCategory",
    "PackageOption",
    "CustomPackageBooking",
    "PackageBooking",
    "PackageStatus",
    "TourPackage",
]
