"""Portfolio account repository protocol."""

from typing import Protocol, Optional

from ledgerfolio.domain.models import PortfolioAccount


class PortfolioAccountRepository(Protocol):
    """Interface for portfolio account data access."""

    def create(self, account: PortfolioAccount) -> PortfolioAccount:
        """Persist a new account. Raises DuplicateKeyError on a taken name."""
        ...

    def get_by_id(self, account_id: str) -> Optional[PortfolioAccount]:
        """Retrieve account by ID."""
        ...

    def get_by_name(self, user_id: str, name: str) -> Optional[PortfolioAccount]:
        """Retrieve a user's account by name."""
        ...

    def list_by_user(self, user_id: str) -> list[PortfolioAccount]:
        """List a user's accounts by display order."""
        ...

    def count_by_user(self, user_id: str) -> int:
        """Count a user's accounts."""
        ...

    def max_order(self, user_id: str) -> Optional[int]:
        """Return the highest display order among a user's accounts."""
        ...

    def update(self, account: PortfolioAccount) -> PortfolioAccount:
        """Update name and order. Raises DuplicateKeyError on a taken name."""
        ...

    def delete(self, account_id: str) -> None:
        """Delete an account; the database cascades ledgers and balances."""
        ...
