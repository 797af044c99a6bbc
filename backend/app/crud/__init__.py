from .crud_employee import employee
from .crud_hotel import hotel
from .crud_vehicle import vehicle
from . import crud_custom_package
from . import crud_custom_booking
from .crud_package import package
