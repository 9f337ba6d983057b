"""Record Store — explicitly constructed owner of the employee and user repositories.

Invariants:
    - One RecordStore per application lifespan: built at startup, closed at shutdown
    - open() is the only place sample data is seeded, and only into an empty store
    - ping() reports whether the backing store can serve requests

Design Decisions:
    - Replaces the module-level store singleton: the lifespan puts the instance
      on app.state and routes reach it through FastAPI dependencies
    - build_record_store() is the single branch on settings.store_backend
"""

import logging
from dataclasses import dataclass

from staffgrid.config import Settings
from staffgrid.infrastructure.database import DatabaseSessionManager
from staffgrid.infrastructure.memory_store import (
    InMemoryEmployeeRepository, InMemoryUserRepository,
)
from staffgrid.infrastructure.sample_data import sample_employees
from staffgrid.infrastructure.sql_store import SqlEmployeeRepository, SqlUserRepository

logger = logging.getLogger(__name__)


@dataclass
class RecordStore:
    """Employee + user repositories sharing one backend and one lifetime."""
    employees: InMemoryEmployeeRepository | SqlEmployeeRepository
    users: InMemoryUserRepository | SqlUserRepository
    backend: str = "memory"
    db_manager: DatabaseSessionManager | None = None
    seed_sample_data: bool = False

    async def open(self) -> None:
        if self.db_manager is not None:
            await self.db_manager.create_all()
        if self.seed_sample_data:
            await self._seed()
        logger.info(
            f"Record store opened ({self.backend})",
            extra={"backend": self.backend},
        )

    async def _seed(self) -> None:
        if await self.employees.list():
            return
        seed = sample_employees()
        await self.employees.insert_many(seed)
        logger.info(
            f"Seeded {len(seed)} sample employees",
            extra={"row_count": len(seed)},
        )

    async def ping(self) -> bool:
        if self.db_manager is None:
            return True
        return await self.db_manager.health_check()

    async def close(self) -> None:
        if self.db_manager is not None:
            await self.db_manager.dispose()
        logger.info(
            f"Record store closed ({self.backend})",
            extra={"backend": self.backend},
        )


def build_memory_store(seed_sample_data: bool = True) -> RecordStore:
    return RecordStore(
        employees=InMemoryEmployeeRepository(),
        users=InMemoryUserRepository(),
        backend="memory",
        seed_sample_data=seed_sample_data,
    )


def build_database_store(
    database_url: str,
    pool_size: int = 20,
    max_overflow: int = 10,
    seed_sample_data: bool = False,
) -> RecordStore:
    manager = DatabaseSessionManager(
        database_url, pool_size=pool_size, max_overflow=max_overflow,
    )
    return RecordStore(
        employees=SqlEmployeeRepository(manager),
        users=SqlUserRepository(manager),
        backend="database",
        db_manager=manager,
        seed_sample_data=seed_sample_data,
    )


def build_record_store(settings: Settings) -> RecordStore:
    """Construct (but do not open) the store selected by settings."""
    if settings.store_backend == "database":
        return build_database_store(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            seed_sample_data=settings.seed_sample_data,
        )
    return build_memory_store(seed_sample_data=settings.seed_sample_data)
