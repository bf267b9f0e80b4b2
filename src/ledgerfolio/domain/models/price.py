"""Asset price domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Price:
    """Price of one unit of ``asset_id`` in ``quote_asset_id`` on a date."""

    id: str
    user_id: str
    asset_id: str
    quote_asset_id: str
    date: date
    price: Decimal
    is_auto_generated: bool = False
    created_at: Optional[datetime] = field(default=None)
