"""Employee ORM — persisted form of the employee table rows.

Invariants:
    - id is a string primary key (uuid4 for created rows, "1".."5" for seeds)
    - created_at is set on insert and never written again
    - position preserves insertion order for list(); assigned max+1 by the store

Design Decisions:
    - String id over native UUID: seeded ids are not UUIDs and SQLite has no UUID type
    - status stored as its string value, converted to EmployeeStatus by the store
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from staffgrid.db.base import Base


class EmployeeRow(Base):
    """One employee record."""
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    position: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active",
    )
    avatar: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
