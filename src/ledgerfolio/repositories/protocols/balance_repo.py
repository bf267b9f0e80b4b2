"""Balance cache repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from ledgerfolio.domain.models import Balance


class BalanceRepository(Protocol):
    """Interface for the per (account, asset) balance cache."""

    def get(self, portfolio_account_id: str, asset_id: str) -> Optional[Balance]:
        """Get a cached balance."""
        ...

    def get_or_create(self, portfolio_account_id: str, asset_id: str) -> Balance:
        """Get a cached balance, creating a zero row if absent; race-safe."""
        ...

    def set(self, portfolio_account_id: str, asset_id: str, balance: Decimal) -> Balance:
        """Insert or update a cached balance."""
        ...

    def list_by_user(self, user_id: str) -> list[Balance]:
        """List every cached balance of a user's accounts."""
        ...

    def sum_asset_ledger(self, portfolio_account_id: str, asset_id: str) -> Decimal:
        """Sum every entry of the pair's asset-kind ledger."""
        ...
