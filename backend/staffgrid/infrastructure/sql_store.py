"""SQL Record Store — SQLAlchemy implementations of the repository protocols.

Invariants:
    - Same absent-vs-present contract as the in-memory store: unknown ids give
      None / False, never DatabaseError
    - list() orders by position (insertion order), then id: two concurrent
      creates may share a position and still list deterministically
    - update() never writes id, created_at, or position
    - ORM rows are converted to frozen core entities before returning

Design Decisions:
    - One short-lived session per operation: repositories are shared by all
      requests, sessions are not
    - Merging happens on the core entity (merge_employee) and is copied back to
      the row, so both stores share a single merge rule
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from sqlalchemy import delete, func, select

from staffgrid.core.domain_types import EmployeeId, EmployeeStatus, UserId
from staffgrid.core.entities import (
    MUTABLE_EMPLOYEE_FIELDS, Employee, User,
    build_employee, merge_employee, merge_user,
)
from staffgrid.infrastructure.database import DatabaseSessionManager
from staffgrid.models.employee import EmployeeRow
from staffgrid.models.user import UserRow

logger = logging.getLogger(__name__)


def _to_employee(row: EmployeeRow) -> Employee:
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops tzinfo; values are always written in UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Employee(
        id=EmployeeId(row.id),
        name=row.name,
        email=row.email,
        department=row.department,
        role=row.role,
        salary=row.salary,
        status=EmployeeStatus(row.status),
        avatar=row.avatar,
        employee_id=row.employee_id,
        created_at=created_at,
    )


def _to_user(row: UserRow) -> User:
    return User(id=UserId(row.id), username=row.username, password=row.password)


async def _next_position(db, model) -> int:
    result = await db.execute(select(func.max(model.position)))
    return (result.scalar_one_or_none() or 0) + 1


class SqlEmployeeRepository:
    """EmployeeRepository backed by the `employees` table."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        async with self._db.session() as db:
            row = await db.get(EmployeeRow, employee_id)
            return _to_employee(row) if row else None

    async def list(self) -> list[Employee]:
        async with self._db.session() as db:
            result = await db.execute(
                select(EmployeeRow).order_by(EmployeeRow.position, EmployeeRow.id),
            )
            return [_to_employee(row) for row in result.scalars().all()]

    async def create(self, data: Mapping[str, Any]) -> Employee:
        employee = build_employee(
            EmployeeId(str(uuid.uuid4())), data, datetime.now(timezone.utc),
        )
        await self.insert_many([employee])
        logger.info(
            f"Employee {employee.id} created",
            extra={"employee_id": employee.id},
        )
        return employee

    async def insert_many(self, employees: Iterable[Employee]) -> None:
        """Insert fully-formed employees (ids and timestamps kept). Used for seeding."""
        async with self._db.session() as db:
            position = await _next_position(db, EmployeeRow)
            for offset, employee in enumerate(employees):
                db.add(EmployeeRow(
                    id=employee.id,
                    position=position + offset,
                    name=employee.name,
                    email=employee.email,
                    department=employee.department,
                    role=employee.role,
                    salary=employee.salary,
                    status=employee.status.value,
                    avatar=employee.avatar,
                    employee_id=employee.employee_id,
                    created_at=employee.created_at,
                ))
            await db.commit()

    async def update(
        self, employee_id: EmployeeId, partial: Mapping[str, Any],
    ) -> Employee | None:
        async with self._db.session() as db:
            row = await db.get(EmployeeRow, employee_id)
            if row is None:
                return None
            merged = merge_employee(_to_employee(row), partial)
            for name in MUTABLE_EMPLOYEE_FIELDS:
                value = getattr(merged, name)
                if name == "status":
                    value = value.value
                setattr(row, name, value)
            await db.commit()
            return merged

    async def delete(self, employee_id: EmployeeId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(EmployeeRow).where(EmployeeRow.id == employee_id),
            )
            await db.commit()
            removed = result.rowcount > 0
        if removed:
            logger.info(
                f"Employee {employee_id} deleted",
                extra={"employee_id": employee_id},
            )
        return removed


class SqlUserRepository:
    """UserRepository backed by the `users` table."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get(self, user_id: UserId) -> User | None:
        async with self._db.session() as db:
            row = await db.get(UserRow, user_id)
            return _to_user(row) if row else None

    async def list(self) -> list[User]:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRow).order_by(UserRow.position, UserRow.id),
            )
            return [_to_user(row) for row in result.scalars().all()]

    async def find_by_username(self, username: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRow)
                .where(UserRow.username == username)
                .order_by(UserRow.position, UserRow.id)
                .limit(1),
            )
            row = result.scalar_one_or_none()
            return _to_user(row) if row else None

    async def create(self, data: Mapping[str, Any]) -> User:
        user = User(
            id=UserId(str(uuid.uuid4())),
            username=data["username"],
            password=data["password"],
        )
        async with self._db.session() as db:
            db.add(UserRow(
                id=user.id,
                position=await _next_position(db, UserRow),
                username=user.username,
                password=user.password,
            ))
            await db.commit()
        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return user

    async def update(
        self, user_id: UserId, partial: Mapping[str, Any],
    ) -> User | None:
        async with self._db.session() as db:
            row = await db.get(UserRow, user_id)
            if row is None:
                return None
            merged = merge_user(_to_user(row), partial)
            row.username = merged.username
            row.password = merged.password
            await db.commit()
            return merged

    async def delete(self, user_id: UserId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(delete(UserRow).where(UserRow.id == user_id))
            await db.commit()
            return result.rowcount > 0
