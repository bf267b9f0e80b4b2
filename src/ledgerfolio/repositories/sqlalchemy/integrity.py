"""Translation of unique-constraint violations into DuplicateKeyError."""

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ledgerfolio.repositories.errors import DuplicateKeyError


def duplicate_field(exc: IntegrityError, fields: Iterable[str]) -> Optional[str]:
    """
    Return which of ``fields`` a unique violation was raised for.

    SQLite reports the columns ("UNIQUE constraint failed: assets.user_id,
    assets.ticker"); PostgreSQL reports the constraint name
    ("uq_asset_user_ticker"). Returns None for any other integrity error.
    """
    message = str(exc.orig).lower()
    if "unique" not in message and "duplicate" not in message:
        return None
    for field in fields:
        if f".{field}" in message or f"user_{field}" in message:
            return field
    return None


@contextmanager
def unique_guard(db: Session, fields: Iterable[str]) -> Iterator[None]:
    """
    Run a write inside a SAVEPOINT and flush it.

    A unique violation on one of ``fields`` rolls back only the savepoint
    and surfaces as DuplicateKeyError; any other integrity error propagates.
    """
    fields = tuple(fields)
    try:
        with db.begin_nested():
            yield
    except IntegrityError as exc:
        field = duplicate_field(exc, fields)
        if field is None:
            raise
        raise DuplicateKeyError(field) from exc
