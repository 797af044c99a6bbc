from typing import Dict, Optional
from fastapi import status
import logging
import re

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[1-9][0-9]*$")
# Largest value a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1


class AppError(Exception):
    """Base for errors that map onto a JSON error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}

    def to_content(self) -> dict:
        content = {"success": False, "message": self.message}
        if self.field_errors:
            content["field_errors"] = self.field_errors
        return content


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdError(ValidationError):
    pass


class InvalidStatusError(ValidationError):
    pass


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class UpstreamError(AppError):
    """An outbound transport (SMTP) failed. Logged by callers, never returned."""

    status_code = status.HTTP_502_BAD_GATEWAY


def ensure_valid_id(raw: object, resource: str) -> int:
    """Return ``raw`` as a primary key or raise :class:`InvalidIdError`."""
    text = str(raw).strip() if raw is not None else ""
    if not _ID_RE.match(text) or int(text) > MAX_ID:
        raise InvalidIdError(
            f"Invalid {resource} ID format",
            {"id": "invalid"},
        )
    return int(text)
