from sqlalchemy import Column, Integer, String, DateTime, Float, JSON

from .base import BaseModel
from .booking_status import BookingStatus
from .types import CaseInsensitiveEnum


class CustomPackageBooking(BaseModel):
    __tablename__ = "custom_package_bookings"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone_number = Column(String, nullable=False)
    travel_date = Column(DateTime, nullable=False)
    additional_notes = Column(String, nullable=False, default="")
    # Category name -> {"id", "name", "price"} copied at submission time.
    # Never re-derived from the live catalog.
    selected_options = Column(JSON, nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(
        CaseInsensitiveEnum(BookingStatus, name="custombookingstatus"),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )
