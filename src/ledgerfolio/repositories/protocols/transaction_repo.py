"""Transaction header and linking record repository protocol."""

from datetime import date
from typing import Protocol, Optional

from ledgerfolio.domain.models import Transaction, TransactionKind, LinkRecord


class TransactionRepository(Protocol):
    """Interface for transaction headers and their linking records."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new header."""
        ...

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve header by ID."""
        ...

    def get_many(self, transaction_ids: list[str]) -> dict[str, Transaction]:
        """Retrieve headers by ID."""
        ...

    def update(self, transaction: Transaction) -> Transaction:
        """Update title, description and date of a header."""
        ...

    def delete(self, transaction_id: str) -> None:
        """Delete a header; the database cascades entries and linking record."""
        ...

    def list_by_user(
        self,
        user_id: str,
        kind: Optional[TransactionKind] = None,
        account_id: Optional[str] = None,
        asset_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List a user's headers matching the filters, newest first."""
        ...

    def add_link(self, kind: TransactionKind, transaction_id: str, entry_ids: dict[str, str]) -> LinkRecord:
        """Insert the linking record mapping roles to entry IDs."""
        ...

    def get_link(self, transaction_id: str) -> Optional[tuple[TransactionKind, LinkRecord]]:
        """Retrieve the linking record of a header and its kind."""
        ...

    def kinds_for(self, transaction_ids: list[str]) -> dict[str, TransactionKind]:
        """Map header IDs to the kind of their linking record."""
        ...

    def delete_unlinked(self, user_id: str) -> list[str]:
        """Delete the user's headers that lost their linking record."""
        ...
