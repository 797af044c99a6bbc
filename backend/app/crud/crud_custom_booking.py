from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.booking_status import BookingStatus
from ..models.custom_booking import CustomPackageBooking


def create_booking(db: Session, **fields) -> CustomPackageBooking:
    booking = CustomPackageBooking(status=BookingStatus.PENDING, **fields)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def get_bookings(db: Session) -> List[CustomPackageBooking]:
    """All bookings, newest first."""
    return (
        db.query(CustomPackageBooking)
        .order_by(
            CustomPackageBooking.created_at.desc(),
            CustomPackageBooking.id.desc(),
        )
        .all()
    )


def get_booking(db: Session, booking_id: int) -> Optional[CustomPackageBooking]:
    return db.get(CustomPackageBooking, booking_id)


def set_status(db: Session, booking_id: int, status: BookingStatus) -> Optional[CustomPackageBooking]:
    """Overwrite ``status`` in a single UPDATE and return the fresh row.

    Returns ``None`` when no booking has ``booking_id``.
    """
    updated = (
        db.query(CustomPackageBooking)
        .filter(CustomPackageBooking.id == booking_id)
        .update({CustomPackageBooking.status: status}, synchronize_session=False)
    )
    db.commit()
    if not updated:
        return None
    booking = get_booking(db, booking_id)
    if booking is not None:
        db.refresh(booking)
    return booking


def delete_booking(db: Session, booking: CustomPackageBooking) -> None:
    db.delete(booking)
    db.commit()
