from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, field_validator

from ..models.booking_status import BookingStatus
from .custom_package import Price


class SelectedOptionSnapshot(BaseModel):
    """Copy of an option taken when the customer submits a booking."""

    id: Optional[Union[int, str]] = None
    name: str
    price: Price


# Every field is optional here so missing values can be reported together
# by the booking service instead of one pydantic error per field.
class CustomBookingCreate(BaseModel):
    customer_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    travel_date: Optional[datetime] = None
    additional_notes: Optional[str] = None
    selected_options: Optional[Dict[str, SelectedOptionSnapshot]] = None
    total_price: Optional[float] = None

    @field_validator(
        "customer_name", "email", "phone_number", "additional_notes", "travel_date",
        mode="before",
    )
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class CustomBookingStatusUpdate(BaseModel):
    # Left as free text; the workflow validates it after the id check
    status: Any = None


class CustomBookingResponse(BaseModel):
    id: int
    customer_name: str
    email: str
    phone_number: str
    travel_date: datetime
    additional_notes: str
    selected_options: Dict[str, SelectedOptionSnapshot]
    total_price: float
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CustomBookingStatusResponse(BaseModel):
    success: bool
    message: str
    data: Optional[CustomBookingResponse] = None
