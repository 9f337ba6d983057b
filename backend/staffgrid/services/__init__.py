"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services own the IO; the decisions they act on come from core/
"""
