"""Errors raised by repository implementations."""


class DuplicateKeyError(Exception):
    """A unique constraint rejected an insert or update on ``field``."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Duplicate value for {field}")
