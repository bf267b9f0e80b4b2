"""Price repository protocol."""

from datetime import date
from typing import Protocol, Optional

from ledgerfolio.domain.models import Price


class PriceRepository(Protocol):
    """Interface for asset price data access."""

    def upsert(self, price: Price) -> Price:
        """Insert a price or replace the one on the same pair and date."""
        ...

    def get_by_id(self, price_id: str) -> Optional[Price]:
        """Retrieve price by ID."""
        ...

    def list_by_user(
        self,
        user_id: str,
        asset_id: Optional[str] = None,
        quote_asset_id: Optional[str] = None,
    ) -> list[Price]:
        """List a user's prices, optionally for one pair, by date."""
        ...

    def existing_dates(self, asset_id: str, quote_asset_id: str) -> set[date]:
        """Return the dates that already have a price for the pair."""
        ...

    def delete(self, price_id: str) -> None:
        """Delete a price."""
        ...
