"""User ORM — persisted account records.

Invariants:
    - username is indexed but NOT unique at the DB level; uniqueness is
      checked before create() by the users route
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from staffgrid.db.base import Base


class UserRow(Base):
    """One user account."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    position: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    username: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
