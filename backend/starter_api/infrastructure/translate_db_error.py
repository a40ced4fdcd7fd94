"""Driver Error Translation — SQLAlchemy exceptions → KnownDataError values.

Invariants:
    - Only IntegrityError (constraint failures), DataError (value rejected by
      the column type) and missing records become KnownDataError;
      connection/driver faults are never translated
    - Message layout: summary line, raw driver lines, invocation line
    - Kind decided by SQLSTATE when the driver exposes one, otherwise by the
      driver's own error phrase; column and constraint names never decide it

Design Decisions:
    - SQLSTATE first: asyncpg and psycopg report it, aiosqlite does not, so
      SQLite falls back to its fixed "<KIND> constraint failed" prefix
    - Raw driver lines kept in the middle of the message: visible in logs,
      dropped by the first/last-line normalizer
"""

import re

from sqlalchemy.exc import DataError, IntegrityError

from starter_api.core.domain_types import KnownErrorKind
from starter_api.core.errors import KnownDataError

KNOWN_DRIVER_ERRORS = (IntegrityError, DataError)

_SQLSTATE_KINDS = {
    "23505": KnownErrorKind.UNIQUE_VIOLATION,
    "23502": KnownErrorKind.NOT_NULL_VIOLATION,
    "23503": KnownErrorKind.FOREIGN_KEY_VIOLATION,
    "23514": KnownErrorKind.CHECK_VIOLATION,
    "22001": KnownErrorKind.VALUE_TOO_LONG,
    "22003": KnownErrorKind.VALUE_OUT_OF_RANGE,
}

_SQLITE_KIND = re.compile(
    r"^(UNIQUE|NOT NULL|FOREIGN KEY|CHECK) constraint failed", re.IGNORECASE,
)
_SQLITE_KINDS = {
    "UNIQUE": KnownErrorKind.UNIQUE_VIOLATION,
    "NOT NULL": KnownErrorKind.NOT_NULL_VIOLATION,
    "FOREIGN KEY": KnownErrorKind.FOREIGN_KEY_VIOLATION,
    "CHECK": KnownErrorKind.CHECK_VIOLATION,
}
# Phrases quote identifiers, so a column named unique_code cannot match
_PG_PHRASES = (
    (re.compile(r"duplicate key value violates unique constraint \""), KnownErrorKind.UNIQUE_VIOLATION),
    (re.compile(r"violates not-null constraint"), KnownErrorKind.NOT_NULL_VIOLATION),
    (re.compile(r"violates foreign key constraint \""), KnownErrorKind.FOREIGN_KEY_VIOLATION),
    (re.compile(r"violates check constraint \""), KnownErrorKind.CHECK_VIOLATION),
    (re.compile(r"value too long for type"), KnownErrorKind.VALUE_TOO_LONG),
    (re.compile(r"out of range"), KnownErrorKind.VALUE_OUT_OF_RANGE),
)

_SQLITE_TARGET = re.compile(r"constraint failed: (.+)$", re.IGNORECASE)
_PG_KEY_TARGET = re.compile(r"Key \(([^)]*)\)=")
_PG_COLUMN_TARGET = re.compile(r'column "([^"]+)"')
_PG_CONSTRAINT_NAME = re.compile(r'constraint "([^"]+)"')


def translate_known_error(
    exc: IntegrityError | DataError,
    model: str | None = None,
    operation: str | None = None,
) -> KnownDataError:
    """Classify a constraint or value failure and build its multi-line message."""
    driver_text = str(exc.orig) if exc.orig is not None else str(exc)
    kind = _classify(exc, driver_text)
    target = _extract_target(driver_text)
    lines = [
        _summary_line(kind, target),
        *(line.strip() for line in driver_text.splitlines() if line.strip()),
        _invocation_line(model, operation),
    ]
    return KnownDataError(
        kind=kind, message="\n".join(lines), target=target,
        model=model, operation=operation,
    )


def record_not_found(model: str, operation: str) -> KnownDataError:
    """Build the error for an update/delete whose target row does not exist."""
    return KnownDataError(
        kind=KnownErrorKind.RECORD_NOT_FOUND,
        message="\n".join([
            f"Record to {operation} not found.",
            _invocation_line(model, operation),
        ]),
        model=model,
        operation=operation,
    )


def _sqlstate(exc: IntegrityError | DataError) -> str | None:
    # asyncpg's adapted error carries sqlstate itself or on its cause;
    # psycopg2 calls it pgcode
    for source in (exc.orig, getattr(exc.orig, "__cause__", None)):
        if source is None:
            continue
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if isinstance(code, str):
            return code
    return None


def _classify(exc: IntegrityError | DataError, driver_text: str) -> KnownErrorKind:
    code = _sqlstate(exc)
    if code in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[code]
    sqlite_match = _SQLITE_KIND.match(driver_text.strip())
    if sqlite_match:
        return _SQLITE_KINDS[sqlite_match.group(1).upper()]
    for pattern, kind in _PG_PHRASES:
        if pattern.search(driver_text):
            return kind
    if isinstance(exc, DataError):
        return KnownErrorKind.INVALID_VALUE
    return KnownErrorKind.CONSTRAINT_VIOLATION


def _extract_target(driver_text: str) -> tuple[str, ...]:
    first_line = driver_text.splitlines()[0] if driver_text else ""
    sqlite_match = _SQLITE_TARGET.search(first_line)
    if sqlite_match:
        # "posts.title, posts.body" → ("title", "body")
        return tuple(
            part.strip().rsplit(".", 1)[-1]
            for part in sqlite_match.group(1).split(",")
        )
    for pattern in (_PG_KEY_TARGET, _PG_COLUMN_TARGET, _PG_CONSTRAINT_NAME):
        match = pattern.search(driver_text)
        if match:
            return tuple(part.strip() for part in match.group(1).split(","))
    return ()


def _summary_line(kind: KnownErrorKind, target: tuple[str, ...]) -> str:
    fields = ", ".join(f"`{t}`" for t in target)
    match kind:
        case KnownErrorKind.UNIQUE_VIOLATION:
            return f"Unique constraint failed on the fields: ({fields})"
        case KnownErrorKind.FOREIGN_KEY_VIOLATION:
            if fields:
                return f"Foreign key constraint failed on the field: {fields}"
            return "Foreign key constraint failed"
        case KnownErrorKind.NOT_NULL_VIOLATION:
            return f"Null constraint violation on the fields: ({fields})"
        case KnownErrorKind.CHECK_VIOLATION:
            return f"Check constraint failed: {fields}" if fields else "Check constraint failed"
        case KnownErrorKind.VALUE_TOO_LONG:
            return "The provided value for the column is too long for the column's type"
        case KnownErrorKind.VALUE_OUT_OF_RANGE:
            return "The provided value is out of range for the column's type"
        case KnownErrorKind.INVALID_VALUE:
            return "The provided value is invalid for the column's type"
        case _:
            return "Constraint violation"


def _invocation_line(model: str | None, operation: str | None) -> str:
    name = ".".join(part for part in (model, operation) if part) or "query"
    return f"Invalid `{name}()` invocation"
