"""Ledger and ledger entry repository protocols."""

from typing import Protocol, Optional

from ledgerfolio.domain.models import Ledger, LedgerEntry, LedgerType


class LedgerRepository(Protocol):
    """Interface for ledger data access."""

    def get(self, portfolio_account_id: str, asset_id: str, ledger_type: LedgerType) -> Optional[Ledger]:
        """Retrieve the ledger for a triple, if it exists."""
        ...

    def get_or_create(self, portfolio_account_id: str, asset_id: str, ledger_type: LedgerType) -> Ledger:
        """Return the ledger for a triple, creating it if needed; race-safe."""
        ...

    def get_many(self, ledger_ids: list[str]) -> dict[str, Ledger]:
        """Retrieve ledgers by ID."""
        ...


class EntryRepository(Protocol):
    """Interface for ledger entry data access (append-only)."""

    def add_many(self, entries: list[LedgerEntry]) -> list[LedgerEntry]:
        """Insert entries."""
        ...

    def list_by_transaction(self, transaction_id: str) -> list[LedgerEntry]:
        """List every entry of one transaction."""
        ...

    def list_by_ledger(self, ledger_id: str) -> list[LedgerEntry]:
        """List every entry booked against one ledger."""
        ...

    def delete_by_transaction(self, transaction_id: str) -> None:
        """Delete every entry of one transaction; the linking record goes by cascade."""
        ...

    def pairs_for_transaction(self, transaction_id: str) -> set[tuple[str, str]]:
        """Return the (account, asset) pairs a transaction's entries touch."""
        ...
