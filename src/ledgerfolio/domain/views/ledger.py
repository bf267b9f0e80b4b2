"""View models joining linking records, entries and ledgers."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ledgerfolio.core.decimal_utils import exact_sum
from ledgerfolio.domain.models import LedgerType, Transaction, TransactionKind


@dataclass
class EntryLine:
    """A ledger entry resolved to its account, asset and ledger type."""

    role: str
    entry_id: str
    ledger_id: str
    portfolio_account_id: str
    asset_id: str
    ledger_type: LedgerType
    amount: Decimal


@dataclass
class TransactionDetail:
    """A transaction header with every entry of its group, keyed by role."""

    transaction: Transaction
    kind: TransactionKind
    entries: dict[str, EntryLine] = field(default_factory=dict)

    @property
    def total(self) -> Decimal:
        """Sum of every entry in the group; zero for a balanced transaction."""
        return exact_sum(line.amount for line in self.entries.values())

    def amount(self, role: str) -> Optional[Decimal]:
        """Return the amount booked for a role, or None if the role is absent."""
        line = self.entries.get(role)
        return line.amount if line else None


@dataclass
class AuditTrailLine:
    """One asset-ledger entry behind a balance, with the running total after it."""

    transaction: Transaction
    kind: Optional[TransactionKind]
    entry_id: str
    amount: Decimal
    running_balance: Decimal
