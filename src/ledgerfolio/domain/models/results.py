"""Typed non-exception results returned by services."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """
    A recoverable, field-addressable failure such as a duplicate name.

    Returned instead of raised so callers can show it next to the field.
    """

    field: str
    message: str
    code: str = "DUPLICATE"
