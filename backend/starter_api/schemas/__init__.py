"""Pydantic Schemas — request/response contracts at the API boundary.

Invariants:
    - Every request body model derives from StrictModel

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
