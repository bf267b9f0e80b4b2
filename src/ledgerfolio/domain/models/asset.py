"""Asset and accounting currency domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Asset:
    """
    A currency, security or commodity tracked by a user.

    ``precision`` bounds the decimal places of amounts booked in this asset;
    ``price_precision`` bounds the decimal places of prices quoted for it.
    Both are read-only inputs to the ledger engine.
    """

    id: str
    user_id: str
    ticker: str
    name: str
    symbol: Optional[str] = None
    precision: int = 0
    price_precision: int = 0
    is_currency: bool = False
    external_ticker: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)


@dataclass
class AccountingCurrency:
    """The asset a user values their portfolio in. Display only."""

    user_id: str
    asset_id: Optional[str] = None
