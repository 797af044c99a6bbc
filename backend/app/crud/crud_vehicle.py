from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..utils.errors import ConflictError


class CRUDVehicle:
    def get_vehicle(self, db: Session, vehicle_pk: int) -> Optional[models.Vehicle]:
        return db.get(models.Vehicle, vehicle_pk)

    def get_vehicles(self, db: Session) -> List[models.Vehicle]:
        return (
            db.query(models.Vehicle)
            .order_by(models.Vehicle.created_at.desc(), models.Vehicle.id.desc())
            .all()
        )

    def get_available_vehicles(self, db: Session) -> List[models.Vehicle]:
        return (
            db.query(models.Vehicle)
            .filter(models.Vehicle.status == models.VehicleStatus.AVAILABLE)
            .order_by(models.Vehicle.vehicle_id)
            .all()
        )

    def create_vehicle(self, db: Session, vehicle_in: schemas.VehicleCreate) -> models.Vehicle:
        db_vehicle = models.Vehicle(**vehicle_in.model_dump())
        db.add(db_vehicle)
        self._commit(db)
        db.refresh(db_vehicle)
        return db_vehicle

    def update_vehicle(
        self, db: Session, db_vehicle: models.Vehicle, vehicle_in: schemas.VehicleUpdate
    ) -> models.Vehicle:
        for key, value in vehicle_in.model_dump().items():
            setattr(db_vehicle, key, value)
        self._commit(db)
        db.refresh(db_vehicle)
        return db_vehicle

    def delete_vehicle(self, db: Session, db_vehicle: models.Vehicle) -> None:
        db.delete(db_vehicle)
        db.commit()

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError(
                "Vehicle ID already exists", {"vehicle_id": "duplicate"}
            ) from exc


vehicle = CRUDVehicle()
