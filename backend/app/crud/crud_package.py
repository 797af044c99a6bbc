from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from .. import models, schemas


class CRUDPackage:
    def get_package(self, db: Session, package_id: int) -> Optional[models.TourPackage]:
        return db.get(models.TourPackage, package_id)

    def get_packages(self, db: Session) -> List[models.TourPackage]:
        # newest first
        return (
            db.query(models.TourPackage)
            .order_by(models.TourPackage.created_at.desc(), models.TourPackage.id.desc())
            .all()
        )

    def get_public_packages(self, db: Session) -> List[models.TourPackage]:
        return (
            db.query(models.TourPackage)
            .filter(models.TourPackage.status == models.PackageStatus.ACTIVE)
            .order_by(models.TourPackage.created_at.desc(), models.TourPackage.id.desc())
            .all()
        )

    def create_package(
        self, db: Session, package_in: schemas.PackageCreate
    ) -> models.TourPackage:
        db_package = models.TourPackage(**package_in.model_dump())
        db.add(db_package)
        db.commit()
        db.refresh(db_package)
        return db_package

    def update_package(
        self,
        db: Session,
        db_package: models.TourPackage,
        package_in: schemas.PackageUpdate,
    ) -> models.TourPackage:
        for key, value in package_in.model_dump().items():
            setattr(db_package, key, value)
        db.commit()
        db.refresh(db_package)
        return db_package

    def delete_package(self, db: Session, db_package: models.TourPackage) -> None:
        db.delete(db_package)
        db.commit()

    # ─── Bookings ────────────────────────────────────────────────────────────

    def create_booking(self, db: Session, **fields) -> models.PackageBooking:
        booking = models.PackageBooking(status=models.BookingStatus.PENDING, **fields)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    def get_bookings(self, db: Session) -> List[models.PackageBooking]:
        """All package bookings, newest first, with their package loaded."""
        return (
            db.query(models.PackageBooking)
            .options(joinedload(models.PackageBooking.package))
            .order_by(
                models.PackageBooking.created_at.desc(),
                models.PackageBooking.id.desc(),
            )
            .all()
        )

    def set_booking_status(
        self, db: Session, booking_id: int, status: models.BookingStatus
    ) -> Optional[models.PackageBooking]:
        updated = (
            db.query(models.PackageBooking)
            .filter(models.PackageBooking.id == booking_id)
            .update({models.PackageBooking.status: status}, synchronize_session=False)
        )
        db.commit()
        if not updated:
            return None
        booking = db.get(models.PackageBooking, booking_id)
        if booking is not None:
            db.refresh(booking)
        return booking


package = CRUDPackage()
