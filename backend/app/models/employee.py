import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, DateTime, Enum as SAEnum

from .base import BaseModel
from .types import CaseInsensitiveEnum


class EmployeeRole(str, enum.Enum):
    TRAVEL_AGENT = "Travel Agent"
    DRIVER = "Driver"
    WORKER = "Worker"
    SUPPLIER = "Supplier"


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


# Monthly salary ceilings per role; roles without an entry use DEFAULT_SALARY_LIMIT
SALARY_LIMITS = {
    EmployeeRole.DRIVER: 500,
    EmployeeRole.TRAVEL_AGENT: 1200,
    EmployeeRole.SUPPLIER: 450,
    EmployeeRole.WORKER: 350,
}
DEFAULT_SALARY_LIMIT = 2500


class Employee(BaseModel):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    employee_id = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False)
    nic = Column(String, unique=True, nullable=False)
    role = Column(
        SAEnum(EmployeeRole, name="employeerole", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    phone_number = Column(String, nullable=False)
    salary = Column(Float, nullable=False)
    join_date = Column(DateTime, default=datetime.utcnow)
    status = Column(
        CaseInsensitiveEnum(EmployeeStatus, name="employeestatus"),
        default=EmployeeStatus.ACTIVE,
        nullable=False,
        index=True,
    )
