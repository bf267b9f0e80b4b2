"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR", field: Optional[str] = None):
        self.message = message
        self.code = code
        self.field = field
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, code="VALIDATION_ERROR", field=field)


class PrecisionError(AppError):
    """Raised when an amount has more decimal places than its asset allows."""

    def __init__(self, field: str, value: str, precision: int):
        super().__init__(
            f"{field} {value} exceeds the maximum of {precision} decimal places",
            code="PRECISION_ERROR",
            field=field,
        )
        self.precision = precision


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class OwnershipError(AppError):
    """Raised when a referenced entity does not belong to the requesting user."""

    status_code = 403

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} {identifier} does not belong to the current user",
            code="FORBIDDEN",
        )


class LimitExceededError(AppError):
    """Raised when a user reaches the maximum number of a resource."""

    def __init__(self, resource: str, limit: int):
        super().__init__(
            f"Maximum number of {resource} reached ({limit})",
            code="LIMIT_EXCEEDED",
        )


class UnbalancedEntriesError(AppError):
    """Raised when an entry plan does not sum to zero. Indicates a bug."""

    status_code = 500

    def __init__(self, kind: str, total: str):
        super().__init__(
            f"{kind} entries do not balance (sum={total})",
            code="UNBALANCED",
        )


class PriceProviderError(AppError):
    """Raised when the external price service cannot be reached."""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="PRICE_PROVIDER_ERROR")
