"""Tests for RecordStore lifetime, seeding and backend selection."""

from staffgrid.config import Settings
from staffgrid.infrastructure.memory_store import InMemoryEmployeeRepository
from staffgrid.infrastructure.record_store import (
    build_database_store, build_memory_store, build_record_store,
)
from staffgrid.infrastructure.sql_store import SqlEmployeeRepository


async def test_memory_store_seeds_five_sample_employees():
    store = build_memory_store(seed_sample_data=True)
    await store.open()
    rows = await store.employees.list()
    assert [e.id for e in rows] == ["1", "2", "3", "4", "5"]
    assert [e.employee_id for e in rows] == [
        "EMP001", "EMP002", "EMP003", "EMP004", "EMP005",
    ]
    await store.close()


async def test_seeding_can_be_disabled():
    store = build_memory_store(seed_sample_data=False)
    await store.open()
    assert await store.employees.list() == []


async def test_seed_skipped_when_store_has_rows(sql_store):
    sql_store.seed_sample_data = True
    await sql_store.open()
    await sql_store.open()
    assert len(await sql_store.employees.list()) == 5


async def test_sql_store_seeds_and_pings():
    store = build_database_store(
        "sqlite+aiosqlite:///:memory:", seed_sample_data=True,
    )
    await store.open()
    assert len(await store.employees.list()) == 5
    assert await store.ping() is True
    await store.close()


async def test_memory_store_always_ready():
    assert await build_memory_store().ping() is True


def test_build_record_store_follows_settings():
    memory = build_record_store(Settings(store_backend="memory"))
    database = build_record_store(Settings(
        store_backend="database",
        database_url="sqlite+aiosqlite:///:memory:",
    ))
    assert isinstance(memory.employees, InMemoryEmployeeRepository)
    assert isinstance(database.employees, SqlEmployeeRepository)
    assert database.backend == "database"


def test_postgres_url_is_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/staff")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/staff"
