"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - EmployeeCreate: text fields stripped and non-empty, email contains '@',
      salary is a non-negative integer, status one of EmployeeStatus
    - EmployeeUpdate: every field optional; only fields present in the body
      reach the store (exclude_unset), explicit null only allowed for avatar
    - id and createdAt are not input fields: sent values are ignored
    - JSON keys are camelCase (employeeId, createdAt); snake_case accepted on input

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every field
    - EmployeeResponse converts both ways with core Employee so the table
      client and the routes share the same wire contract
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from staffgrid.core.domain_types import EmployeeId, EmployeeStatus
from staffgrid.core.entities import Employee

_TEXT_FIELDS = ("name", "email", "department", "role", "employee_id")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _clean_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty or whitespace")
    return value


def _check_email(value: str) -> str:
    if "@" not in value:
        raise ValueError("must be an email address")
    return value


class EmployeeCreate(_CamelModel):
    """Employee creation — every field but avatar and status required."""
    name: str = Field(max_length=200)
    email: str = Field(max_length=320)
    department: str = Field(max_length=100)
    role: str = Field(max_length=100)
    salary: int = Field(ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    avatar: str | None = Field(None, max_length=2048)
    employee_id: str = Field(max_length=50)

    @field_validator(*_TEXT_FIELDS)
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _clean_text(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class EmployeeUpdate(_CamelModel):
    """Partial employee update — absent fields stay untouched."""
    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    department: str | None = Field(None, max_length=100)
    role: str | None = Field(None, max_length=100)
    salary: int | None = Field(None, ge=0)
    status: EmployeeStatus | None = None
    avatar: str | None = Field(None, max_length=2048)
    employee_id: str | None = Field(None, max_length=50)

    @field_validator(*_TEXT_FIELDS)
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return None if v is None else _clean_text(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return None if v is None else _check_email(v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.model_fields_set:
            if name != "avatar" and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class EmployeeResponse(_CamelModel):
    """Employee as returned by the API and consumed by the table client."""
    id: str
    name: str
    email: str
    department: str
    role: str
    salary: int
    status: EmployeeStatus
    avatar: str | None = None
    employee_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            department=employee.department,
            role=employee.role,
            salary=employee.salary,
            status=employee.status,
            avatar=employee.avatar,
            employee_id=employee.employee_id,
            created_at=employee.created_at,
        )

    def to_entity(self) -> Employee:
        return Employee(
            id=EmployeeId(self.id),
            name=self.name,
            email=self.email,
            department=self.department,
            role=self.role,
            salary=self.salary,
            status=self.status,
            avatar=self.avatar,
            employee_id=self.employee_id,
            created_at=self.created_at,
        )
