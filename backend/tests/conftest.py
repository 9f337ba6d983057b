"""Root conftest — shared test configuration and entity factories."""

import os
from datetime import datetime, timezone
from itertools import count

import pytest

# Tests always start from the in-memory store, never a real database
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

from staffgrid.core.domain_types import EmployeeId, EmployeeStatus  # noqa: E402
from staffgrid.core.entities import Employee  # noqa: E402
from staffgrid.infrastructure.sample_data import sample_employees  # noqa: E402

_ids = count(1)


@pytest.fixture
def make_employee():
    """Build an Employee with sensible defaults; override any field by keyword."""
    def _make(**overrides) -> Employee:
        n = next(_ids)
        fields = {
            "id": EmployeeId(f"e-{n}"),
            "name": f"Employee {n}",
            "email": f"employee{n}@company.com",
            "department": "Engineering",
            "role": "Developer",
            "salary": 50_000,
            "status": EmployeeStatus.ACTIVE,
            "employee_id": f"EMP{n:03d}",
            "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "avatar": None,
        }
        fields.update(overrides)
        return Employee(**fields)
    return _make


@pytest.fixture
def seeded_rows() -> list[Employee]:
    """The five sample employees (one per department)."""
    return sample_employees()


@pytest.fixture
def employee_payload() -> dict:
    """A valid camelCase creation body."""
    return {
        "name": "Ada Lovelace",
        "email": "ada.lovelace@company.com",
        "department": "Engineering",
        "role": "Principal Engineer",
        "salary": 120000,
        "status": "active",
        "employeeId": "EMP100",
    }


# ─── App fixtures ────────────────────────────────────────────────
# Every test gets its own seeded store on app.state (lifespan not run);
# the client talks to the app in-process through ASGITransport.

@pytest.fixture
async def record_store():
    from staffgrid.infrastructure.record_store import build_memory_store
    from staffgrid.main import app

    store = build_memory_store(seed_sample_data=True)
    await store.open()
    app.state.record_store = store
    yield store
    await store.close()
    app.state.record_store = None


@pytest.fixture
async def client(record_store):
    from httpx import ASGITransport, AsyncClient
    from staffgrid.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
