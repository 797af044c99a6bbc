import logging
from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .dependencies import get_db
from ..crud import hotel as crud_hotel
from ..schemas.hotel import HotelCreate, HotelResponse, HotelUpdate
from ..utils.errors import NotFoundError, ensure_valid_id

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_or_404(db: Session, hotel_id: str):
    db_hotel = crud_hotel.get_hotel(db, ensure_valid_id(hotel_id, "hotel"))
    if db_hotel is None:
        raise NotFoundError("Hotel not found", {"id": "not_found"})
    return db_hotel


@router.get("/", response_model=List[HotelResponse])
def list_hotels(db: Session = Depends(get_db)) -> Any:
    """All hotels, newest first."""
    return crud_hotel.get_hotels(db)


@router.get("/{hotel_id}", response_model=HotelResponse)
def read_hotel(hotel_id: str, db: Session = Depends(get_db)) -> Any:
    return _get_or_404(db, hotel_id)


@router.post("/", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
def create_hotel(hotel_in: HotelCreate, db: Session = Depends(get_db)) -> Any:
    db_hotel = crud_hotel.create_hotel(db, hotel_in)
    logger.info("Hotel %s saved", db_hotel.id)
    return db_hotel


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(hotel_id: str, hotel_in: HotelUpdate, db: Session = Depends(get_db)) -> Any:
    return crud_hotel.update_hotel(db, _get_or_404(db, hotel_id), hotel_in)


@router.delete("/{hotel_id}")
def delete_hotel(hotel_id: str, db: Session = Depends(get_db)) -> Any:
    crud_hotel.delete_hotel(db, _get_or_404(db, hotel_id))
    return {"success": True, "message": "Hotel deleted"}
