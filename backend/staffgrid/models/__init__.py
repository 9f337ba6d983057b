"""ORM Models — SQLAlchemy declarative models for the SQL record store.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure; the SQL store converts them to core entities

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from staffgrid.models.employee import EmployeeRow  # noqa: F401
from staffgrid.models.user import UserRow  # noqa: F401
