"""Portfolio account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class PortfolioAccount:
    """
    A named bucket of holdings, e.g. a brokerage or a wallet.

    Names are unique per user; ``order`` controls display order.
    """

    id: str
    user_id: str
    name: str
    order: int = 0
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)
