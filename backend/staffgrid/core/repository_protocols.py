"""Boundary Protocols — contracts between core and the record stores.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every operation is total: unknown ids yield None / False, never an exception
    - update() never changes id or created_at, even when present in the partial
    - list() returns entities in insertion order (callers must not rely on it)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations may do IO (SQL store), the in-memory
      store is async only to share the shape
"""

from typing import Any, Mapping, Protocol

from staffgrid.core.domain_types import EmployeeId, UserId
from staffgrid.core.entities import Employee, User


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by infrastructure."""
    async def get(self, employee_id: EmployeeId) -> Employee | None: ...
    async def list(self) -> list[Employee]: ...
    async def create(self, data: Mapping[str, Any]) -> Employee: ...
    async def update(
        self, employee_id: EmployeeId, partial: Mapping[str, Any],
    ) -> Employee | None: ...
    async def delete(self, employee_id: EmployeeId) -> bool: ...


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def get(self, user_id: UserId) -> User | None: ...
    async def list(self) -> list[User]: ...
    async def create(self, data: Mapping[str, Any]) -> User: ...
    async def update(
        self, user_id: UserId, partial: Mapping[str, Any],
    ) -> User | None: ...
    async def delete(self, user_id: UserId) -> bool: ...
    async def find_by_username(self, username: str) -> User | None: ...


class EmployeeSource(Protocol):
    """Contract for the table's fetch boundary — implemented by the HTTP client.

    delete_employee() returns False when the row no longer exists; transport
    failures raise RecordStoreUnavailableError.
    """
    async def fetch_employees(self) -> list[Employee]: ...
    async def delete_employee(self, employee_id: EmployeeId) -> bool: ...
