"""Asset repository protocol."""

from typing import Protocol, Optional

from ledgerfolio.domain.models import Asset, AccountingCurrency


class AssetRepository(Protocol):
    """Interface for asset and accounting currency data access."""

    def create(self, asset: Asset) -> Asset:
        """Persist a new asset. Raises DuplicateKeyError on a taken ticker/name/symbol."""
        ...

    def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Retrieve asset by ID."""
        ...

    def find_duplicate(self, asset: Asset) -> Optional[str]:
        """Return the first unique field another asset of the user already holds."""
        ...

    def list_by_user(self, user_id: str) -> list[Asset]:
        """List a user's assets ordered by ticker."""
        ...

    def count_by_user(self, user_id: str) -> int:
        """Count a user's assets."""
        ...

    def update(self, asset: Asset) -> Asset:
        """Update an asset. Raises DuplicateKeyError on a taken ticker/name/symbol."""
        ...

    def delete(self, asset_id: str) -> None:
        """Delete an asset; the database cascades ledgers, balances and prices."""
        ...

    def get_accounting_currency(self, user_id: str) -> Optional[AccountingCurrency]:
        """Get the user's accounting currency selection."""
        ...

    def set_accounting_currency(self, user_id: str, asset_id: Optional[str]) -> AccountingCurrency:
        """Insert or update the user's accounting currency selection."""
        ...
