import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .dependencies import get_db
from ..crud import package as crud_package
from ..schemas.package import (
    PackageBookingCreate,
    PackageBookingResponse,
    PackageBookingStatusResponse,
    PackageBookingStatusUpdate,
    PackageCreate,
    PackageResponse,
    PackageUpdate,
)
from ..services import booking_workflow, package_booking
from ..utils.errors import NotFoundError, ensure_valid_id

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_or_404(db: Session, package_id: str):
    db_package = crud_package.get_package(db, ensure_valid_id(package_id, "package"))
    if db_package is None:
        raise NotFoundError("Package not found", {"id": "not_found"})
    return db_package


# ─── Bookings (registered before /{package_id}) ─────────────────────────────


@router.post(
    "/bookings",
    response_model=PackageBookingResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_package_booking(
    booking_in: PackageBookingCreate, db: Session = Depends(get_db)
) -> Any:
    return package_booking.create_booking(db, booking_in)


@router.get("/bookings", response_model=List[PackageBookingResponse])
def list_package_bookings(db: Session = Depends(get_db)) -> Any:
    """All package bookings, newest first."""
    return package_booking.list_bookings(db)


@router.put("/bookings/{booking_id}", response_model=PackageBookingStatusResponse)
def update_package_booking_status(
    booking_id: str,
    status_update: Optional[PackageBookingStatusUpdate] = None,
    db: Session = Depends(get_db),
) -> Any:
    new_status = status_update.status if status_update else None
    booking = booking_workflow.update_status(
        db, booking_id, new_status, set_status=crud_package.set_booking_status
    )
    return PackageBookingStatusResponse(
        success=True,
        message=f"Booking status updated to {booking.status.value}",
        data=PackageBookingResponse.model_validate(booking),
    )


# ─── Packages ────────────────────────────────────────────────────────────────


@router.get("/public", response_model=List[PackageResponse])
def list_public_packages(db: Session = Depends(get_db)) -> Any:
    """Active packages, newest first."""
    return crud_package.get_public_packages(db)


@router.get("/", response_model=List[PackageResponse])
def list_packages(db: Session = Depends(get_db)) -> Any:
    return crud_package.get_packages(db)


@router.get("/{package_id}", response_model=PackageResponse)
def read_package(package_id: str, db: Session = Depends(get_db)) -> Any:
    return _get_or_404(db, package_id)


@router.post("/", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
def create_package(package_in: PackageCreate, db: Session = Depends(get_db)) -> Any:
    db_package = crud_package.create_package(db, package_in)
    logger.info("Package %s saved", db_package.id)
    return db_package


@router.put("/{package_id}", response_model=PackageResponse)
def update_package(
    package_id: str, package_in: PackageUpdate, db: Session = Depends(get_db)
) -> Any:
    return crud_package.update_package(db, _get_or_404(db, package_id), package_in)


@router.delete("/{package_id}")
def delete_package(package_id: str, db: Session = Depends(get_db)) -> Any:
    crud_package.delete_package(db, _get_or_404(db, package_id))
    return {"success": True, "message": "Package deleted"}
