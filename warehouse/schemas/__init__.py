"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain constructors stay the source of truth for entity rules

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
