"""Infrastructure Layer — record stores, DB sessions, HTTP client, logging.

Invariants:
    - Every store implements the protocols in core/repository_protocols.py
    - External failures are mapped to StaffGridError subclasses before leaving this layer
"""
