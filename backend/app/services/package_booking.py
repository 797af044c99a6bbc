"""Bookings for ready-made tour packages."""

import logging
import math
from typing import List

from sqlalchemy.orm import Session

from ..crud import package as crud_package
from ..models import PackageBooking, PackageStatus
from ..schemas.package import PackageBookingCreate
from ..utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def create_booking(db: Session, booking_in: PackageBookingCreate) -> PackageBooking:
    """Persist a ``pending`` booking for an active package.

    A submitted ``total_price`` is stored as is, like custom package
    bookings; it defaults to price times party size.
    """
    tour = crud_package.get_package(db, booking_in.package_id)
    if tour is None or tour.status != PackageStatus.ACTIVE:
        raise NotFoundError("Package not found", {"package_id": "not_found"})
    if booking_in.number_of_people > tour.max_pax:
        raise ValidationError(
            f"Number of people cannot exceed {tour.max_pax} for this package",
            {"number_of_people": "exceeds_max_pax"},
        )

    expected = tour.price * booking_in.number_of_people
    total_price = booking_in.total_price
    if total_price is None:
        total_price = expected
    elif not math.isclose(total_price, expected, abs_tol=0.005):
        logger.warning(
            "Submitted total %.2f differs from package price %.2f for %s",
            total_price,
            expected,
            booking_in.email,
        )

    booking = crud_package.create_booking(
        db,
        package_id=tour.id,
        customer_name=booking_in.customer_name,
        email=booking_in.email.lower(),
        phone_number=booking_in.phone_number,
        travel_date=booking_in.travel_date,
        number_of_people=booking_in.number_of_people,
        total_price=total_price,
    )
    logger.info("Created package booking %s for package %s", booking.id, tour.id)
    return booking


def list_bookings(db: Session) -> List[PackageBooking]:
    return crud_package.get_bookings(db)
