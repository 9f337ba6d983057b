"""Database Infrastructure — SQLAlchemy declarative base for the SQL record store.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)
"""
