"""Shared response schemas."""

from pydantic import BaseModel

from ledgerfolio.domain.models import FieldError


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
    message: str
    field: str | None = None


def field_error_body(result: FieldError) -> dict:
    return ErrorResponse(error=result.code, message=result.message, field=result.field).model_dump()
