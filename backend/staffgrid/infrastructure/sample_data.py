"""Sample Data — the five employees a fresh in-memory store starts with.

Invariants:
    - Seeded ids are "1".."5" and codes EMP001..EMP005; created rows get uuid4 ids
    - Exactly one seeded employee per department
"""

from datetime import datetime, timezone

from staffgrid.core.domain_types import EmployeeId, EmployeeStatus
from staffgrid.core.entities import Employee

_AVATAR = (
    "https://images.unsplash.com/photo-{photo}?ixlib=rb-4.0.3"
    "&auto=format&fit=crop&w=200&h=200"
)

_SEED = (
    ("Sarah Johnson", "Engineering", "Senior Developer", 95000,
     EmployeeStatus.ACTIVE, "1494790108755-2616b612b786"),
    ("Michael Chen", "Marketing", "Marketing Manager", 85000,
     EmployeeStatus.ACTIVE, "1472099645785-5658abf4ff4e"),
    ("Emma Davis", "Design", "UX Designer", 78000,
     EmployeeStatus.ON_LEAVE, "1438761681033-6461ffad8d80"),
    ("David Rodriguez", "Sales", "Sales Representative", 65000,
     EmployeeStatus.ACTIVE, "1507003211169-0a1dd7228f2d"),
    ("Lisa Thompson", "HR", "HR Manager", 72000,
     EmployeeStatus.INACTIVE, "1487412720507-e7ab37603c6f"),
)


def sample_employees() -> list[Employee]:
    """Fresh list of seed employees, all stamped with the current time."""
    now = datetime.now(timezone.utc)
    employees = []
    for index, (name, department, role, salary, status, photo) in enumerate(_SEED, 1):
        employees.append(Employee(
            id=EmployeeId(str(index)),
            name=name,
            email=f"{name.lower().replace(' ', '.')}@company.com",
            department=department,
            role=role,
            salary=salary,
            status=status,
            avatar=_AVATAR.format(photo=photo),
            employee_id=f"EMP{index:03d}",
            created_at=now,
        ))
    return employees
