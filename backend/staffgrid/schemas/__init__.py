"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire format is camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are domain state
"""
