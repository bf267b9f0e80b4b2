"""Stub price provider for offline/testing use."""

from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerfolio.core.timezone import today_utc


# Deterministic fake rates, quoted per one unit of the first ticker
_STUB_RATES: dict[tuple[str, str], Decimal] = {
    ("usd", "eur"): Decimal("0.92"),
    ("usd", "gbp"): Decimal("0.79"),
    ("usd", "jpy"): Decimal("149.5"),
    ("usd", "nzd"): Decimal("1.64"),
    ("btc", "usd"): Decimal("43250.5"),
    ("eth", "usd"): Decimal("2280.25"),
    ("xau", "usd"): Decimal("2035.1"),
}


class StubPriceProvider:
    """
    Stub provider with fixed rates for offline operation.

    Inverse pairs are derived from the table; unknown pairs return nothing.
    """

    def __init__(
        self,
        rates: Optional[dict[tuple[str, str], Decimal]] = None,
        latest: Optional[date] = None,
    ):
        self._rates = dict(rates if rates is not None else _STUB_RATES)
        self._latest = latest

    def latest_date(self) -> date:
        return self._latest or today_utc()

    def supported_tickers(self) -> dict[str, str]:
        tickers = {t for pair in self._rates for t in pair}
        return {t: t.upper() for t in sorted(tickers)}

    def get_prices(self, base: str, quote: str, dates: list[date]) -> dict[date, Decimal]:
        rate = self._rate(base.lower(), quote.lower())
        if rate is None:
            return {}
        latest = self.latest_date()
        return {d: rate for d in dates if d <= latest}

    def _rate(self, base: str, quote: str) -> Optional[Decimal]:
        if (base, quote) in self._rates:
            return self._rates[(base, quote)]
        if (quote, base) in self._rates:
            return Decimal(1) / self._rates[(quote, base)]
        return None
