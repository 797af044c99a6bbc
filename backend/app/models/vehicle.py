import enum

from sqlalchemy import Column, Integer, String, DateTime

from .base import BaseModel
from .types import CaseInsensitiveEnum


class VehicleType(str, enum.Enum):
    CAR = "car"
    VAN = "van"
    BUS = "bus"


class VehicleStatus(str, enum.Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class Vehicle(BaseModel):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(String, unique=True, nullable=False, index=True)
    type = Column(CaseInsensitiveEnum(VehicleType, name="vehicletype"), nullable=False)
    model = Column(String, nullable=False)
    seats = Column(Integer, nullable=False)
    fuel_type = Column(String, nullable=True)
    license_insurance_updated = Column(DateTime, nullable=True)
    license_insurance_expiry = Column(DateTime, nullable=True)
    status = Column(
        CaseInsensitiveEnum(VehicleStatus, name="vehiclestatus"),
        default=VehicleStatus.AVAILABLE,
        nullable=False,
        index=True,
    )
