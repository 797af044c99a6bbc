"""Customer notifications for custom package bookings.

Every function here is scheduled as a background task after the HTTP
response has been sent. Failures are logged and never re-raised.
"""

import logging
from typing import Any, Mapping

from ..core.config import settings
from .email import send_email

logger = logging.getLogger(__name__)


def format_booking_received_email(booking: Mapping[str, Any]) -> tuple[str, str]:
    """Return ``(subject, body)`` for the booking confirmation email."""
    subject = f"{settings.AGENCY_NAME}: we received your custom package request"
    lines = [
        f"Dear {booking['customer_name']},",
        "",
        "Thank you for your custom package request. Our team will review it",
        "and get back to you shortly.",
        "",
        f"Booking reference: #{booking['id']}",
        f"Travel date: {booking['travel_date']}",
        "",
        "Selected options:",
    ]
    for category, option in (booking.get("selected_options") or {}).items():
        lines.append(f"  - {category}: {option.get('name')} (${float(option.get('price') or 0):.2f})")
    lines.extend(
        [
            "",
            f"Total: ${float(booking['total_price']):.2f}",
            f"Status: {booking['status']}",
            "",
            settings.AGENCY_NAME,
        ]
    )
    return subject, "\n".join(lines)


async def notify_booking_received(booking: Mapping[str, Any]) -> bool:
    """Email the customer that their booking was received.

    Returns ``True`` on delivery, ``False`` when skipped or failed.
    """
    if not settings.BOOKING_EMAIL_ENABLED:
        logger.info("Booking email disabled; skipping booking %s", booking.get("id"))
        return False
    try:
        subject, body = format_booking_received_email(booking)
        await send_email(booking["email"], subject, body)
    except Exception as exc:
        logger.error(
            "Booking notification failed for booking %s: %s", booking.get("id"), exc
        )
        return False
    return True
