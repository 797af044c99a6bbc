import enum

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel
from .booking_status import BookingStatus
from .types import CaseInsensitiveEnum


class PackageStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TourPackage(BaseModel):
    """A fixed, ready-made tour sold as a whole."""

    __tablename__ = "packages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    # Free text such as "3 days / 2 nights"
    duration = Column(String, nullable=False)
    location = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    max_pax = Column(Integer, nullable=False)
    status = Column(
        CaseInsensitiveEnum(PackageStatus, name="packagestatus"),
        default=PackageStatus.ACTIVE,
        nullable=False,
        index=True,
    )

    bookings = relationship("PackageBooking", back_populates="package", passive_deletes=True)


class PackageBooking(BaseModel):
    __tablename__ = "package_bookings"

    id = Column(Integer, primary_key=True, index=True)
    # Bookings outlive the package they were made for
    package_id = Column(
        Integer,
        ForeignKey("packages.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    customer_name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone_number = Column(String, nullable=False)
    travel_date = Column(DateTime, nullable=False)
    number_of_people = Column(Integer, nullable=False, default=1)
    total_price = Column(Float, nullable=False)
    status = Column(
        CaseInsensitiveEnum(BookingStatus, name="packagebookingstatus"),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )

    package = relationship("TourPackage", back_populates="bookings")

    @property
    def package_name(self) -> str:
        return self.package.name if self.package is not None else "Unknown Package"
