import logging
from typing import Any, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from .dependencies import get_db
from ..crud import crud_custom_package
from ..schemas.custom_booking import (
    CustomBookingCreate,
    CustomBookingResponse,
    CustomBookingStatusResponse,
    CustomBookingStatusUpdate,
)
from ..schemas.custom_package import (
    AvailableItemsResponse,
    CategoryOptionsUpsert,
    OptionCategoryResponse,
)
from ..services import availability, booking_workflow, custom_booking
from ..utils.errors import NotFoundError, ensure_valid_id
from ..utils.notifications import notify_booking_received

logger = logging.getLogger(__name__)

router = APIRouter()


# ─── Option catalog ──────────────────────────────────────────────────────────


@router.get("/categories", response_model=List[OptionCategoryResponse])
def list_categories(db: Session = Depends(get_db)) -> Any:
    """Categories sorted by name, showing only options that can be booked."""
    return availability.list_categories(db)


@router.post(
    "/options",
    response_model=OptionCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def upsert_category_options(
    payload: CategoryOptionsUpsert, db: Session = Depends(get_db)
) -> Any:
    """Append options to a category, creating the category on first use."""
    availability.check_room_types(db, payload.options)
    return crud_custom_package.upsert_category_options(db, payload.name, payload.options)


@router.delete("/categories/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)) -> Any:
    pk = ensure_valid_id(category_id, "category")
    category = crud_custom_package.get_category(db, pk)
    if category is None:
        raise NotFoundError("Category not found", {"id": "not_found"})
    crud_custom_package.delete_category(db, category)
    logger.info("Deleted category %s", pk)
    return {"success": True, "message": "Category deleted successfully"}


@router.get("/available-items", response_model=AvailableItemsResponse)
def list_available_items(db: Session = Depends(get_db)) -> Any:
    """Agents, hotel rooms and vehicles that can back a new option."""
    return availability.list_available_items(db)


# ─── Bookings ────────────────────────────────────────────────────────────────


@router.post(
    "/bookings",
    response_model=CustomBookingResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_booking(
    payload: CustomBookingCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
) -> Any:
    booking = custom_booking.create_booking(db, payload)
    # Runs after the response is sent; failures are logged inside
    background_tasks.add_task(
        notify_booking_received, custom_booking.notification_payload(booking)
    )
    return booking


@router.get("/bookings", response_model=List[CustomBookingResponse])
def list_bookings(db: Session = Depends(get_db)) -> Any:
    """All bookings, newest first."""
    return custom_booking.list_bookings(db)


@router.put("/bookings/{booking_id}", response_model=CustomBookingStatusResponse)
def update_booking_status(
    booking_id: str,
    status_update: Optional[CustomBookingStatusUpdate] = None,
    db: Session = Depends(get_db),
) -> Any:
    new_status = status_update.status if status_update else None
    booking = booking_workflow.update_status(db, booking_id, new_status)
    return CustomBookingStatusResponse(
        success=True,
        message=f"Booking status updated to {booking.status.value}",
        data=CustomBookingResponse.model_validate(booking),
    )


@router.delete("/bookings/{booking_id}")
def delete_booking(booking_id: str, db: Session = Depends(get_db)) -> Any:
    custom_booking.delete_booking(db, booking_id)
    return {"success": True, "message": "Booking deleted successfully"}
