from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..schemas.employee import salary_limit_error
from ..utils.errors import ConflictError, ValidationError


class CRUDEmployee:
    def get_employee(self, db: Session, employee_id: int) -> Optional[models.Employee]:
        return db.get(models.Employee, employee_id)

    def get_employees(self, db: Session) -> List[models.Employee]:
        return db.query(models.Employee).order_by(models.Employee.id).all()

    def get_active_agents(self, db: Session) -> List[models.Employee]:
        return (
            db.query(models.Employee)
            .filter(
                models.Employee.role == models.EmployeeRole.TRAVEL_AGENT,
                models.Employee.status == models.EmployeeStatus.ACTIVE,
            )
            .order_by(models.Employee.name)
            .all()
        )

    def create_employee(
        self, db: Session, employee_in: schemas.EmployeeCreate
    ) -> models.Employee:
        data = employee_in.model_dump(exclude_none=True)
        db_employee = models.Employee(**data)
        db.add(db_employee)
        self._commit(db)
        db.refresh(db_employee)
        return db_employee

    def update_employee(
        self,
        db: Session,
        db_employee: models.Employee,
        employee_in: schemas.EmployeeUpdate,
    ) -> models.Employee:
        update_data = employee_in.model_dump(exclude_unset=True, exclude_none=True)
        # Check the ceiling against the merged role/salary, not just what was sent
        role = update_data.get("role", db_employee.role)
        salary = update_data.get("salary", db_employee.salary)
        message = salary_limit_error(role, salary)
        if message:
            raise ValidationError(message, {"salary": "exceeds_limit"})
        for key, value in update_data.items():
            setattr(db_employee, key, value)
        self._commit(db)
        db.refresh(db_employee)
        return db_employee

    def delete_employee(self, db: Session, db_employee: models.Employee) -> None:
        db.delete(db_employee)
        db.commit()

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError(
                "Employee ID, email or NIC already exists",
                {"employee": "duplicate"},
            ) from exc


employee = CRUDEmployee()
