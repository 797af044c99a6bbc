from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


class CRUDHotel:
    def get_hotel(self, db: Session, hotel_id: int) -> Optional[models.Hotel]:
        return db.get(models.Hotel, hotel_id)

    def get_hotels(self, db: Session) -> List[models.Hotel]:
        # newest first
        return (
            db.query(models.Hotel)
            .order_by(models.Hotel.created_at.desc(), models.Hotel.id.desc())
            .all()
        )

    def get_open_hotels(self, db: Session) -> List[models.Hotel]:
        return (
            db.query(models.Hotel)
            .filter(models.Hotel.status != models.HotelStatus.UNAVAILABLE)
            .order_by(models.Hotel.name)
            .all()
        )

    def create_hotel(self, db: Session, hotel_in: schemas.HotelCreate) -> models.Hotel:
        db_hotel = models.Hotel(**hotel_in.model_dump())
        db.add(db_hotel)
        db.commit()
        db.refresh(db_hotel)
        return db_hotel

    def update_hotel(
        self, db: Session, db_hotel: models.Hotel, hotel_in: schemas.HotelUpdate
    ) -> models.Hotel:
        update_data = hotel_in.model_dump()
        if update_data.get("status") is None:
            update_data["status"] = models.HotelStatus.AVAILABLE
        for key, value in update_data.items():
            setattr(db_hotel, key, value)
        db.commit()
        db.refresh(db_hotel)
        return db_hotel

    def delete_hotel(self, db: Session, db_hotel: models.Hotel) -> None:
        db.delete(db_hotel)
        db.commit()


hotel = CRUDHotel()
