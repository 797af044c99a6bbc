from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .dependencies import get_db
from ..crud import vehicle as crud_vehicle
from ..schemas.vehicle import VehicleCreate, VehicleResponse, VehicleUpdate
from ..utils.errors import NotFoundError, ensure_valid_id

router = APIRouter()


def _get_or_404(db: Session, vehicle_pk: str):
    db_vehicle = crud_vehicle.get_vehicle(db, ensure_valid_id(vehicle_pk, "vehicle"))
    if db_vehicle is None:
        raise NotFoundError("Vehicle not found", {"id": "not_found"})
    return db_vehicle


@router.get("/", response_model=List[VehicleResponse])
def list_vehicles(db: Session = Depends(get_db)) -> Any:
    """All vehicles, newest first."""
    return crud_vehicle.get_vehicles(db)


@router.get("/{vehicle_pk}", response_model=VehicleResponse)
def read_vehicle(vehicle_pk: str, db: Session = Depends(get_db)) -> Any:
    return _get_or_404(db, vehicle_pk)


@router.post("/", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
def create_vehicle(vehicle_in: VehicleCreate, db: Session = Depends(get_db)) -> Any:
    return crud_vehicle.create_vehicle(db, vehicle_in)


@router.put("/{vehicle_pk}", response_model=VehicleResponse)
def update_vehicle(
    vehicle_pk: str, vehicle_in: VehicleUpdate, db: Session = Depends(get_db)
) -> Any:
    return crud_vehicle.update_vehicle(db, _get_or_404(db, vehicle_pk), vehicle_in)


@router.delete("/{vehicle_pk}")
def delete_vehicle(vehicle_pk: str, db: Session = Depends(get_db)) -> Any:
    crud_vehicle.delete_vehicle(db, _get_or_404(db, vehicle_pk))
    return {"success": True, "message": "Vehicle deleted"}
