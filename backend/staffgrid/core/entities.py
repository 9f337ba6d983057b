"""Entities — Employee and User records as held by the record store.

Invariants:
    - Entities are frozen: every change produces a new instance
    - id and created_at are never overwritten by merge_employee()
    - merge_employee() ignores keys that are not Employee fields

Design Decisions:
    - Plain dataclasses, not ORM rows or pydantic models: core stays free of
      persistence and wire concerns; stores and schemas convert at their edges
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Mapping

from staffgrid.core.domain_types import EmployeeId, EmployeeStatus, UserId


@dataclass(frozen=True)
class Employee:
    """A row of the employee table."""
    id: EmployeeId
    name: str
    email: str
    department: str
    role: str
    salary: int
    status: EmployeeStatus
    employee_id: str
    created_at: datetime
    avatar: str | None = None


@dataclass(frozen=True)
class User:
    """An account record. The password is opaque and never verified here."""
    id: UserId
    username: str
    password: str


# Fields an update may never touch
IMMUTABLE_EMPLOYEE_FIELDS = frozenset({"id", "created_at"})

EMPLOYEE_FIELDS = frozenset(f.name for f in fields(Employee))
MUTABLE_EMPLOYEE_FIELDS = EMPLOYEE_FIELDS - IMMUTABLE_EMPLOYEE_FIELDS


def merge_employee(employee: Employee, partial: Mapping[str, Any]) -> Employee:
    """Overlay provided fields onto an employee. Pure, returns a new instance."""
    changes = {
        key: value for key, value in partial.items()
        if key in MUTABLE_EMPLOYEE_FIELDS
    }
    if "status" in changes:
        changes["status"] = EmployeeStatus(changes["status"])
    if not changes:
        return employee
    return replace(employee, **changes)


def build_employee(
    employee_id: EmployeeId, data: Mapping[str, Any], created_at: datetime,
) -> Employee:
    """Build a new Employee from validated creation fields plus generated ones."""
    return Employee(
        id=employee_id,
        name=data["name"],
        email=data["email"],
        department=data["department"],
        role=data["role"],
        salary=data["salary"],
        status=EmployeeStatus(data.get("status", EmployeeStatus.ACTIVE)),
        employee_id=data["employee_id"],
        avatar=data.get("avatar"),
        created_at=created_at,
    )


MUTABLE_USER_FIELDS = frozenset({"username", "password"})


def merge_user(user: User, partial: Mapping[str, Any]) -> User:
    """Overlay provided username/password onto a user. Pure."""
    changes = {
        key: value for key, value in partial.items()
        if key in MUTABLE_USER_FIELDS
    }
    if not changes:
        return user
    return replace(user, **changes)
