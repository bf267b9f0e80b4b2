"""Historical price provider protocol."""

from datetime import date
from decimal import Decimal
from typing import Protocol


class PriceProvider(Protocol):
    """
    Protocol for historical price providers.

    Prices are keyed by lower-case external ticker and calendar date.
    Dates the provider cannot price are omitted from results.
    """

    def latest_date(self) -> date:
        """Return the most recent date the provider has prices for."""
        ...

    def supported_tickers(self) -> dict[str, str]:
        """Return supported external tickers mapped to display names."""
        ...

    def get_prices(self, base: str, quote: str, dates: list[date]) -> dict[date, Decimal]:
        """Return the price of one ``base`` in ``quote`` for each date it can price."""
        ...
