"""Route Dependencies — hand the lifespan-owned RecordStore to route handlers.

Invariants:
    - Routes never import a store instance; they receive repositories here
    - Tests swap the whole store by setting app.state.record_store

Design Decisions:
    - app.state over a module global: the store's lifetime is the app's lifespan
"""

from fastapi import Depends, Request

from staffgrid.core.repository_protocols import EmployeeRepository, UserRepository
from staffgrid.infrastructure.record_store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    store = getattr(request.app.state, "record_store", None)
    if store is None:
        raise RuntimeError("Record store not initialized")
    return store


def get_employee_repository(
    store: RecordStore = Depends(get_record_store),
) -> EmployeeRepository:
    return store.employees


def get_user_repository(
    store: RecordStore = Depends(get_record_store),
) -> UserRepository:
    return store.users
