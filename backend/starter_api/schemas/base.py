"""Strict Request Base — the global request-body validation policy.

Invariants:
    - Undeclared fields reject the request (extra="forbid")
    - Primitive values are coerced to the declared type (lax mode, e.g. "5" → 5)

Design Decisions:
    - Base class over per-route validators: one place decides the policy for
      every feature module's request bodies
"""

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base for all request bodies."""
    model_config = ConfigDict(extra="forbid")
