from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.vehicle import VehicleStatus, VehicleType


class VehicleBase(BaseModel):
    vehicle_id: str = Field(min_length=1)
    type: VehicleType
    model: str = Field(min_length=1)
    seats: int = Field(gt=0)
    fuel_type: str = Field(min_length=1)
    license_insurance_updated: Optional[datetime] = None
    license_insurance_expiry: Optional[datetime] = None

    @field_validator("vehicle_id", "model", "fuel_type", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class VehicleCreate(VehicleBase):
    status: VehicleStatus = VehicleStatus.AVAILABLE


class VehicleUpdate(VehicleBase):
    status: VehicleStatus = VehicleStatus.AVAILABLE


class VehicleResponse(BaseModel):
    id: int
    vehicle_id: str
    type: VehicleType
    model: str
    seats: int
    fuel_type: Optional[str] = None
    license_insurance_updated: Optional[datetime] = None
    license_insurance_expiry: Optional[datetime] = None
    status: VehicleStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
