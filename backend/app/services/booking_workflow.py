"""Staff decisions on custom package and tour package bookings.

``pending`` is initial; staff move a booking to ``approved`` or
``rejected``. No transition guard exists: any status may overwrite any
other, matching what the booking table accepts.
"""

import logging
from typing import Any, Callable

from sqlalchemy.orm import Session

from ..crud import crud_custom_booking
from ..models.booking_status import BookingStatus
from ..models.custom_booking import CustomPackageBooking
from ..utils.errors import InvalidStatusError, NotFoundError, ensure_valid_id

logger = logging.getLogger(__name__)

VALID_STATUSES = tuple(s.value for s in BookingStatus)


def parse_status(raw: Any) -> BookingStatus:
    if isinstance(raw, str) and raw in VALID_STATUSES:
        return BookingStatus(raw)
    raise InvalidStatusError(
        f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}",
        {"status": "invalid"},
    )


def update_status(
    db: Session,
    raw_id: Any,
    raw_status: Any,
    set_status: Callable[[Session, int, BookingStatus], Any] = crud_custom_booking.set_status,
) -> CustomPackageBooking:
    """Set a booking's status.

    Checks run in a fixed order: id format, then status value, then
    existence. ``set_status`` picks the booking table; custom package
    bookings by default.
    """
    booking_id = ensure_valid_id(raw_id, "booking")
    new_status = parse_status(raw_status)
    booking = set_status(db, booking_id, new_status)
    if booking is None:
        raise NotFoundError("Booking not found", {"id": "not_found"})
    logger.info("Booking %s status set to %s", booking_id, new_status.value)
    return booking
