"""Driver Error Translation — verifies classification and message layout.

Tests cover:
    - SQLite and PostgreSQL wording for each constraint kind
    - Identifiers containing "unique" never decide the kind
    - SQLSTATE preferred over text; DataError mapped to value kinds
    - Target field extraction
    - Summary first, invocation last, driver text in between
"""

import sqlite3

import pytest
from sqlalchemy.exc import DataError, IntegrityError

from starter_api.core.domain_types import KnownErrorKind
from starter_api.core.normalize_error import trim_error_message
from starter_api.infrastructure.translate_db_error import (
    record_not_found, translate_known_error,
)


def _integrity_error(driver_message: str) -> IntegrityError:
    return IntegrityError(
        "INSERT INTO posts ...", {}, sqlite3.IntegrityError(driver_message),
    )


@pytest.mark.parametrize(
    "driver_message, kind, target",
    [
        ("UNIQUE constraint failed: posts.title", KnownErrorKind.UNIQUE_VIOLATION, ("title",)),
        (
            "UNIQUE constraint failed: posts.title, posts.body",
            KnownErrorKind.UNIQUE_VIOLATION, ("title", "body"),
        ),
        ("NOT NULL constraint failed: posts.title", KnownErrorKind.NOT_NULL_VIOLATION, ("title",)),
        ("FOREIGN KEY constraint failed", KnownErrorKind.FOREIGN_KEY_VIOLATION, ()),
        ("CHECK constraint failed: positive_id", KnownErrorKind.CHECK_VIOLATION, ("positive_id",)),
        (
            'duplicate key value violates unique constraint "posts_title_key"\n'
            "DETAIL:  Key (title)=(Hello) already exists.",
            KnownErrorKind.UNIQUE_VIOLATION, ("title",),
        ),
        (
            'null value in column "title" of relation "posts" violates not-null constraint',
            KnownErrorKind.NOT_NULL_VIOLATION, ("title",),
        ),
        (
            'insert or update on table "comments" violates foreign key constraint "comments_post_id_fkey"\n'
            "DETAIL:  Key (post_id)=(42) is not present in table \"posts\".",
            KnownErrorKind.FOREIGN_KEY_VIOLATION, ("post_id",),
        ),
        ("NOT NULL constraint failed: posts.unique_code", KnownErrorKind.NOT_NULL_VIOLATION, ("unique_code",)),
        ("CHECK constraint failed: unique_or_null", KnownErrorKind.CHECK_VIOLATION, ("unique_or_null",)),
        (
            'insert or update on table "comments" violates foreign key constraint "comments_unique_post_fkey"\n'
            "DETAIL:  Key (post_id)=(42) is not present in table \"posts\".",
            KnownErrorKind.FOREIGN_KEY_VIOLATION, ("post_id",),
        ),
        (
            'null value in column "unique_code" of relation "posts" violates not-null constraint',
            KnownErrorKind.NOT_NULL_VIOLATION, ("unique_code",),
        ),
        ("something else entirely", KnownErrorKind.CONSTRAINT_VIOLATION, ()),
    ],
)
def test_classifies_driver_messages(driver_message, kind, target):
    error = translate_known_error(_integrity_error(driver_message), "post", "create")
    assert error.kind == kind
    assert error.target == target
    assert error.model == "post"
    assert error.operation == "create"


def test_message_layout_summary_driver_invocation():
    error = translate_known_error(
        _integrity_error("UNIQUE constraint failed: posts.title"), "post", "create",
    )
    assert error.message.split("\n") == [
        "Unique constraint failed on the fields: (`title`)",
        "UNIQUE constraint failed: posts.title",
        "Invalid `post.create()` invocation",
    ]
    assert trim_error_message(error.message) == (
        "Unique constraint failed on the fields: (`title`) "
        "Invalid `post.create()` invocation"
    )


def test_multiline_driver_text_stays_between_summary_and_invocation():
    error = translate_known_error(
        _integrity_error(
            'duplicate key value violates unique constraint "posts_title_key"\n'
            "DETAIL:  Key (title)=(Hello) already exists.",
        ),
        "post", "update",
    )
    lines = error.message.split("\n")
    assert lines[0] == "Unique constraint failed on the fields: (`title`)"
    assert lines[-1] == "Invalid `post.update()` invocation"
    assert "DETAIL:  Key (title)=(Hello) already exists." in lines


def test_invocation_without_model_uses_operation():
    error = translate_known_error(
        _integrity_error("FOREIGN KEY constraint failed"), operation="commit",
    )
    assert error.message.split("\n")[-1] == "Invalid `commit()` invocation"
    assert error.message.split("\n")[0] == "Foreign key constraint failed"


def test_record_not_found():
    error = record_not_found("post", "delete")
    assert error.kind == KnownErrorKind.RECORD_NOT_FOUND
    assert trim_error_message(error.message) == (
        "Record to delete not found. Invalid `post.delete()` invocation"
    )


class _DriverError(Exception):
    """Driver exception exposing a SQLSTATE like asyncpg and psycopg do."""

    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


@pytest.mark.parametrize(
    "sqlstate, kind",
    [
        ("23505", KnownErrorKind.UNIQUE_VIOLATION),
        ("23502", KnownErrorKind.NOT_NULL_VIOLATION),
        ("23503", KnownErrorKind.FOREIGN_KEY_VIOLATION),
        ("23514", KnownErrorKind.CHECK_VIOLATION),
    ],
)
def test_sqlstate_decides_over_message_text(sqlstate, kind):
    exc = IntegrityError(
        "INSERT ...", {},
        _DriverError('constraint "unique_duplicate_key_fkey" rejected the row', sqlstate),
    )
    assert translate_known_error(exc, "post", "create").kind == kind


def test_sqlstate_read_from_wrapped_cause():
    cause = _DriverError("boom", "23503")
    adapted = Exception("wrapped")
    adapted.__cause__ = cause
    exc = IntegrityError("INSERT ...", {}, adapted)
    assert translate_known_error(exc).kind == KnownErrorKind.FOREIGN_KEY_VIOLATION


@pytest.mark.parametrize(
    "driver_error, kind, summary",
    [
        (
            _DriverError("value too long for type character varying(255)", "22001"),
            KnownErrorKind.VALUE_TOO_LONG,
            "The provided value for the column is too long for the column's type",
        ),
        (
            _DriverError('value "99999999999" is out of range for type integer', "22003"),
            KnownErrorKind.VALUE_OUT_OF_RANGE,
            "The provided value is out of range for the column's type",
        ),
        (
            Exception("value too long for type character varying(255)"),
            KnownErrorKind.VALUE_TOO_LONG,
            "The provided value for the column is too long for the column's type",
        ),
        (
            _DriverError('invalid input syntax for type integer: "abc"', "22P02"),
            KnownErrorKind.INVALID_VALUE,
            "The provided value is invalid for the column's type",
        ),
    ],
)
def test_data_errors_are_known(driver_error, kind, summary):
    error = translate_known_error(
        DataError("INSERT INTO posts ...", {}, driver_error), "post", "create",
    )
    assert error.kind == kind
    assert trim_error_message(error.message) == f"{summary} Invalid `post.create()` invocation"
