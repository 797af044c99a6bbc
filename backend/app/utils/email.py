import logging
from email.message import EmailMessage

import aiosmtplib

from ..core.config import settings
from .errors import UpstreamError

logger = logging.getLogger(__name__)

SMTP_TIMEOUT_SECONDS = 10


def build_message(recipient: str, subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.SMTP_FROM
    msg["To"] = recipient
    msg["Subject"] = subject
    msg.set_content(body)
    return msg


async def send_email(recipient: str, subject: str, body: str) -> None:
    """Send an email via SMTP.

    Raises :class:`UpstreamError` when the transport fails; callers decide
    whether that matters.
    """
    msg = build_message(recipient, subject, body)
    try:
        await aiosmtplib.send(
            msg,
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME or None,
            password=settings.SMTP_PASSWORD or None,
            start_tls=bool(settings.SMTP_USERNAME),
            timeout=SMTP_TIMEOUT_SECONDS,
        )
    except (aiosmtplib.SMTPException, OSError) as exc:
        raise UpstreamError(f"SMTP delivery to {recipient} failed: {exc}") from exc
    logger.info("Sent email to %s", recipient)
