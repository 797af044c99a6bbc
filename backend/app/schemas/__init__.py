from .employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from .hotel import HotelCreate, HotelUpdate, HotelResponse
from .vehicle import VehicleCreate, VehicleUpdate, VehicleResponse
from .custom_package import (
    AvailableItemsResponse,
    CategoryOptionsUpsert,
    OptionCategoryResponse,
    PackageOptionCreate,
    PackageOptionResponse,
)
from .custom_booking import (
    CustomBookingCreate,
    CustomBookingResponse,
    CustomBookingStatusResponse,
    CustomBookingStatusUpdate,
    SelectedOptionSnapshot,
)
from .package import (
    PackageBookingCreate,
    PackageBookingResponse,
    PackageBookingStatusResponse,
    PackageBookingStatusUpdate,
    PackageCreate,
    PackageResponse,
    PackageUpdate,
)
