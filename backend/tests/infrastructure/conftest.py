"""Infrastructure fixtures — both repository implementations behind one parameter.

Invariants:
    - The SQL store runs on a fresh in-memory SQLite database per test
    - Contract tests receive `repos` and must pass for every backend
"""

import pytest

from staffgrid.infrastructure.record_store import (
    build_database_store, build_memory_store,
)


@pytest.fixture
async def sql_store():
    store = build_database_store("sqlite+aiosqlite:///:memory:")
    await store.open()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "database"])
async def repos(request):
    """An opened, empty RecordStore for each backend."""
    if request.param == "memory":
        store = build_memory_store(seed_sample_data=False)
    else:
        store = build_database_store("sqlite+aiosqlite:///:memory:")
    await store.open()
    yield store
    await store.close()


@pytest.fixture
def employee_data() -> dict:
    """Validated creation fields (snake_case, as routes pass them to stores)."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@company.com",
        "department": "Engineering",
        "role": "Principal Engineer",
        "salary": 120000,
        "status": "active",
        "avatar": None,
        "employee_id": "EMP100",
    }
