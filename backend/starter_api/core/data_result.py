"""Data Result — tagged return type of the data-access layer.

Invariants:
    - Every repository write returns exactly one variant: Ok or KnownDataError
    - Unexpected driver/connection faults are NOT a variant: they propagate as exceptions

Design Decisions:
    - Union alias over a custom Result class: pattern matching works on plain
      dataclasses (`case Ok(value)` / `case KnownDataError()`)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from starter_api.core.errors import KnownDataError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful data-access outcome."""
    value: T


DataResult = Union[Ok[T], KnownDataError]
