import enum

class BookingStatus(str, enum.Enum):
    """Lifecycle of a custom package booking.

    ``pending`` is the initial state; ``approved`` and ``rejected`` are set by
    staff. The column itself accepts any member at any time.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
