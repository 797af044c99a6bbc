from .errors import (
    AppError,
    ConflictError,
    InvalidIdError,
    InvalidStatusError,
    NotFoundError,
    UpstreamError,
    ValidationError,
    ensure_valid_id,
)
from .email import send_email
