"""Ledger, ledger entry and balance domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ledgerfolio.domain.models.enums import LedgerType


@dataclass
class Ledger:
    """
    T-account for one (portfolio account, asset, ledger type) triple.

    Created lazily and never deleted except by cascade from its
    account or asset.
    """

    id: str
    portfolio_account_id: str
    asset_id: str
    type: LedgerType
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = LedgerType(self.type)


@dataclass
class LedgerEntry:
    """
    One signed movement in one ledger.

    Always created as part of a balanced group sharing ``transaction_id``.
    Immutable once committed.
    """

    id: str
    ledger_id: str
    transaction_id: str
    amount: Decimal
    created_at: Optional[datetime] = field(default=None)


@dataclass
class Balance:
    """
    Cached balance of one asset in one portfolio account.

    IMPORTANT: Never edit directly; always recalculate from the asset ledger.
    """

    portfolio_account_id: str
    asset_id: str
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    updated_at: Optional[datetime] = field(default=None)
