"""Domain Types — identity types and error kinds shared across layers.

Invariants:
    - PostId wraps int — never use a bare int for a post identifier in repositories
    - Every known data-access failure maps to exactly one KnownErrorKind

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)


# ─── Enums ───────────────────────────────────────────────────────

class KnownErrorKind(str, Enum):
    """Data-constraint failures the persistence layer reports as known errors."""
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    CHECK_VIOLATION = "check_violation"
    CONSTRAINT_VIOLATION = "constraint_violation"
    VALUE_TOO_LONG = "value_too_long"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    INVALID_VALUE = "invalid_value"
    RECORD_NOT_FOUND = "record_not_found"


class Environment(str, Enum):
    """Deployment environment names accepted by ENVIRONMENT."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"
