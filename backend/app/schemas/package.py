from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.booking_status import BookingStatus
from ..models.package import PackageStatus
from ..utils.errors import MAX_ID
from .custom_package import Price


class PackageBase(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: Price
    duration: str = Field(min_length=1)
    location: str = Field(min_length=1)
    image_url: Optional[str] = None
    max_pax: int = Field(gt=0)
    status: PackageStatus = PackageStatus.ACTIVE

    @field_validator("name", "description", "duration", "location", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class PackageCreate(PackageBase):
    pass


class PackageUpdate(PackageBase):
    pass


class PackageResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    duration: str
    location: str
    image_url: Optional[str] = None
    max_pax: int
    status: PackageStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PackageBookingCreate(BaseModel):
    package_id: int = Field(gt=0, le=MAX_ID)
    customer_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone_number: str = Field(min_length=1)
    travel_date: datetime
    number_of_people: int = Field(default=1, ge=1)
    # Computed from the package price when omitted
    total_price: Optional[Price] = None

    @field_validator("customer_name", "email", "phone_number", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class PackageBookingStatusUpdate(BaseModel):
    status: Optional[str] = None


class PackageBookingResponse(BaseModel):
    id: int
    package_id: Optional[int] = None
    package_name: str
    customer_name: str
    email: str
    phone_number: str
    travel_date: datetime
    number_of_people: int
    total_price: float
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PackageBookingStatusResponse(BaseModel):
    success: bool
    message: str
    data: Optional[PackageBookingResponse] = None
