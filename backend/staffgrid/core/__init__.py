"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (TableState is the one mutable holder)

Design Decisions:
    - Functional core separated from imperative shell: the table pipeline is
      testable without a server, a client, or an event loop
"""
