from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.employee import (
    DEFAULT_SALARY_LIMIT,
    SALARY_LIMITS,
    EmployeeRole,
    EmployeeStatus,
)


def salary_limit_error(role: Optional[EmployeeRole], salary: Optional[float]) -> Optional[str]:
    """Return an error message when ``salary`` exceeds the ceiling for ``role``."""
    if salary is None:
        return None
    limit = SALARY_LIMITS.get(role) if role is not None else None
    if limit is not None:
        if salary > limit:
            return f"Salary for {role.value} cannot exceed ${limit}"
        return None
    if salary > DEFAULT_SALARY_LIMIT:
        return "Maximum salary allowed is $2,500"
    return None


class EmployeeBase(BaseModel):
    name: Optional[str] = None
    employee_id: Optional[str] = None
    email: Optional[str] = None
    nic: Optional[str] = None
    role: Optional[EmployeeRole] = None
    phone_number: Optional[str] = None
    salary: Optional[float] = Field(default=None, ge=0)
    join_date: Optional[datetime] = None
    status: Optional[EmployeeStatus] = None

    @field_validator("name", "employee_id", "email", "nic", "phone_number", mode="before")
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class EmployeeCreate(EmployeeBase):
    name: str = Field(min_length=1)
    employee_id: str = Field(min_length=1)
    email: str = Field(min_length=3)
    nic: str = Field(min_length=1)
    role: EmployeeRole
    phone_number: str = Field(min_length=1)
    salary: float = Field(ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @model_validator(mode="after")
    def salary_within_role_limit(self) -> "EmployeeCreate":
        message = salary_limit_error(self.role, self.salary)
        if message:
            raise ValueError(message)
        return self


class EmployeeUpdate(EmployeeBase):
    pass


class EmployeeResponse(BaseModel):
    id: int
    name: str
    employee_id: str
    email: str
    nic: str
    role: EmployeeRole
    phone_number: str
    salary: float
    join_date: Optional[datetime] = None
    status: EmployeeStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
