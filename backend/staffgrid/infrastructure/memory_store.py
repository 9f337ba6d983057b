"""In-Memory Record Store — dict-backed employee and user repositories.

Invariants:
    - Dict insertion order is the list() order
    - Every operation is total: unknown ids give None / False
    - Identifiers are uuid4 strings; created_at is stamped once at create()
    - State is volatile: lost when the process (or the RecordStore) goes away

Design Decisions:
    - No locks: each coroutine runs to completion without awaiting, so every
      operation is atomic under the single-threaded event loop
    - find_by_username() is a linear scan, first match wins; uniqueness is
      checked by the users route before create()
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from staffgrid.core.domain_types import EmployeeId, UserId
from staffgrid.core.entities import (
    Employee, User, build_employee, merge_employee, merge_user,
)

logger = logging.getLogger(__name__)


class InMemoryEmployeeRepository:
    """EmployeeRepository over a plain dict."""

    def __init__(self, seed: Iterable[Employee] = ()):
        self._employees: dict[EmployeeId, Employee] = {}
        for employee in seed:
            self._employees[employee.id] = employee

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        return self._employees.get(employee_id)

    async def list(self) -> list[Employee]:
        return list(self._employees.values())

    async def create(self, data: Mapping[str, Any]) -> Employee:
        employee = build_employee(
            EmployeeId(str(uuid.uuid4())), data, datetime.now(timezone.utc),
        )
        self._employees[employee.id] = employee
        logger.info(
            f"Employee {employee.id} created",
            extra={"employee_id": employee.id},
        )
        return employee

    async def update(
        self, employee_id: EmployeeId, partial: Mapping[str, Any],
    ) -> Employee | None:
        current = self._employees.get(employee_id)
        if current is None:
            return None
        updated = merge_employee(current, partial)
        self._employees[employee_id] = updated
        return updated

    async def delete(self, employee_id: EmployeeId) -> bool:
        removed = self._employees.pop(employee_id, None) is not None
        if removed:
            logger.info(
                f"Employee {employee_id} deleted",
                extra={"employee_id": employee_id},
            )
        return removed

    async def insert_many(self, employees: Iterable[Employee]) -> None:
        """Insert fully-formed employees (ids and timestamps kept). Used for seeding."""
        for employee in employees:
            self._employees[employee.id] = employee


class InMemoryUserRepository:
    """UserRepository over a plain dict."""

    def __init__(self):
        self._users: dict[UserId, User] = {}

    async def get(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)

    async def list(self) -> list[User]:
        return list(self._users.values())

    async def find_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create(self, data: Mapping[str, Any]) -> User:
        user = User(
            id=UserId(str(uuid.uuid4())),
            username=data["username"],
            password=data["password"],
        )
        self._users[user.id] = user
        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return user

    async def update(
        self, user_id: UserId, partial: Mapping[str, Any],
    ) -> User | None:
        current = self._users.get(user_id)
        if current is None:
            return None
        updated = merge_user(current, partial)
        self._users[user_id] = updated
        return updated

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None
