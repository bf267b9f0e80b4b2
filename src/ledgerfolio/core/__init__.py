"""Core utilities and shared functionality."""

from ledgerfolio.core.timezone import (
    now_utc,
    today_utc,
    parse_date,
    date_list,
    UTC,
)
from ledgerfolio.core.exceptions import (
    AppError,
    ValidationError,
    PrecisionError,
    NotFoundError,
    OwnershipError,
    LimitExceededError,
    UnbalancedEntriesError,
    PriceProviderError,
)

__all__ = [
    "now_utc",
    "today_utc",
    "parse_date",
    "date_list",
    "UTC",
    "AppError",
    "ValidationError",
    "PrecisionError",
    "NotFoundError",
    "OwnershipError",
    "LimitExceededError",
    "UnbalancedEntriesError",
    "PriceProviderError",
]
