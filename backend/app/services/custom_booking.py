"""Create and remove custom package bookings."""

import logging
import math
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..crud import crud_custom_booking
from ..models.custom_booking import CustomPackageBooking
from ..schemas.custom_booking import CustomBookingCreate
from ..utils.errors import NotFoundError, ValidationError, ensure_valid_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "customer_name",
    "email",
    "phone_number",
    "travel_date",
    "selected_options",
)


def _coerce_total(value: Any) -> float:
    try:
        total = float(value)
    except (TypeError, ValueError):
        total = math.nan
    if not math.isfinite(total) or total < 0:
        raise ValidationError(
            "Total price must be a non-negative number",
            {"total_price": "invalid"},
        )
    return total


def create_booking(db: Session, booking_in: CustomBookingCreate) -> CustomPackageBooking:
    """Validate and persist a booking in ``pending`` state.

    ``total_price`` is stored as submitted. It is not recomputed from the
    snapshot; a mismatch is only logged.
    """
    missing = [f for f in REQUIRED_FIELDS if not getattr(booking_in, f)]
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            {f: "required" for f in missing},
        )
    total_price = _coerce_total(booking_in.total_price)

    snapshot: Dict[str, Dict[str, Any]] = {
        category: option.model_dump()
        for category, option in booking_in.selected_options.items()
    }
    snapshot_sum = sum(o["price"] for o in snapshot.values())
    if not math.isclose(snapshot_sum, total_price, abs_tol=0.005):
        logger.warning(
            "Submitted total %.2f differs from option sum %.2f for %s",
            total_price,
            snapshot_sum,
            booking_in.email,
        )

    booking = crud_custom_booking.create_booking(
        db,
        customer_name=booking_in.customer_name,
        email=booking_in.email.lower(),
        phone_number=booking_in.phone_number,
        travel_date=booking_in.travel_date,
        additional_notes=booking_in.additional_notes or "",
        selected_options=snapshot,
        total_price=total_price,
    )
    logger.info("Created custom package booking %s for %s", booking.id, booking.email)
    return booking


def list_bookings(db: Session) -> List[CustomPackageBooking]:
    return crud_custom_booking.get_bookings(db)


def delete_booking(db: Session, raw_id: Any) -> None:
    booking_id = ensure_valid_id(raw_id, "booking")
    booking = crud_custom_booking.get_booking(db, booking_id)
    if booking is None:
        raise NotFoundError("Booking not found", {"id": "not_found"})
    crud_custom_booking.delete_booking(db, booking)
    logger.info("Deleted custom package booking %s", booking_id)


def notification_payload(booking: CustomPackageBooking) -> Dict[str, Any]:
    """Plain copy of the fields the confirmation email needs.

    Background tasks run after the request session is closed, so they get
    data rather than the ORM instance.
    """
    return {
        "id": booking.id,
        "customer_name": booking.customer_name,
        "email": booking.email,
        "travel_date": booking.travel_date.date().isoformat(),
        "selected_options": dict(booking.selected_options or {}),
        "total_price": booking.total_price,
        "status": booking.status.value,
    }
