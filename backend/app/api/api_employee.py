from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .dependencies import get_db
from ..crud import employee as crud_employee
from ..schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from ..utils.errors import NotFoundError, ensure_valid_id

router = APIRouter()


def _get_or_404(db: Session, employee_id: str):
    db_employee = crud_employee.get_employee(db, ensure_valid_id(employee_id, "employee"))
    if db_employee is None:
        raise NotFoundError("Employee not found", {"id": "not_found"})
    return db_employee


@router.get("/", response_model=List[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)) -> Any:
    return crud_employee.get_employees(db)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def read_employee(employee_id: str, db: Session = Depends(get_db)) -> Any:
    return _get_or_404(db, employee_id)


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(employee_in: EmployeeCreate, db: Session = Depends(get_db)) -> Any:
    return crud_employee.create_employee(db, employee_in)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: str, employee_in: EmployeeUpdate, db: Session = Depends(get_db)
) -> Any:
    db_employee = _get_or_404(db, employee_id)
    return crud_employee.update_employee(db, db_employee, employee_in)


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, db: Session = Depends(get_db)) -> Any:
    crud_employee.delete_employee(db, _get_or_404(db, employee_id))
    return {"success": True, "message": "Employee deleted"}
