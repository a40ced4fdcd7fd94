"""Known Data-Access Errors — the value and exception shapes of a data-constraint failure.

Invariants:
    - KnownDataError.message is multi-line by convention: first line is the
      summary, last line names the failing invocation
    - KnownDataError is immutable; the same value travels in a DataResult or
      inside KnownDataAccessError
    - No HTTP status lives here: every known error maps to 400 at the boundary

Design Decisions:
    - Value first, exception second: repositories return the value, the
      exception only wraps it for paths that cannot return (session commit)
    - Structured fields (kind, target, model, operation) kept next to the
      message for logging, never serialized to clients
"""

from dataclasses import dataclass, field

from starter_api.core.domain_types import KnownErrorKind


@dataclass(frozen=True)
class KnownDataError:
    """A data-constraint failure reported by the persistence layer."""
    kind: KnownErrorKind
    message: str
    target: tuple[str, ...] = field(default_factory=tuple)
    model: str | None = None
    operation: str | None = None

    @property
    def code(self) -> str:
        return self.kind.name


class KnownDataAccessError(Exception):
    """Raised when a known data-access error escapes outside a DataResult."""

    def __init__(self, error: KnownDataError):
        super().__init__(error.message)
        self.error = error
        self.message = error.message
