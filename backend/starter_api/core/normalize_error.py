"""Error Normalization — shapes a known data-access error into the client-facing body.

Invariants:
    - trimmed message == first line + " " + last line, for any line count >= 1
    - single-line message "M" yields "M M" (first and last line are the same line)
    - body has exactly two keys: statusCode (400) and message (str)
    - no classification by kind: every known error gets the same status and rule

Design Decisions:
    - Message-text heuristic kept over structured fields: existing API consumers
      depend on the exact text
"""

from starter_api.core.errors import KnownDataError

KNOWN_ERROR_STATUS = 400


def trim_error_message(message: str) -> str:
    """Join the first and last line of a multi-line error message."""
    lines = message.split("\n")
    return " ".join([lines[0], lines[-1]])


def build_error_body(error: KnownDataError) -> dict:
    """Build the normalized {statusCode, message} response body."""
    return {
        "statusCode": KNOWN_ERROR_STATUS,
        "message": trim_error_message(error.message),
    }
