"""Price provider backed by the free currency exchange rates API."""

import json
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional

import httpx

from ledgerfolio.config.settings import Settings, get_settings
from ledgerfolio.core.exceptions import PriceProviderError
from ledgerfolio.core.timezone import parse_date
from ledgerfolio.providers.cache import TtlCache

logger = logging.getLogger(__name__)

# Subset of the API's tickers the app offers.
SUPPORTED_TICKERS = frozenset({
    # Currencies
    "aud", "cad", "chf", "cny", "eur", "gbp", "hkd", "inr",
    "jpy", "krw", "mxn", "nzd", "rub", "sgd", "try", "usd",
    # Cryptocurrencies
    "ada", "bnb", "btc", "doge", "dot", "eth", "link", "ltc",
    "shib", "sol", "uni", "usdc", "usdt", "xmr", "xrp", "xlm",
    # Commodities
    "xag", "xau", "xpt",
})


class CurrencyApiProvider:
    """
    Fetches daily rates from a CDN-hosted exchange rate dataset.

    Every request tries the primary URL first and the fallback URL second.
    The latest available date and the currency list are cached in the
    injected TtlCache. Dates that fail to load are logged and skipped.
    """

    def __init__(
        self,
        client: httpx.Client,
        cache: TtlCache,
        settings: Optional[Settings] = None,
    ):
        self._client = client
        self._cache = cache
        self._settings = settings or get_settings()

    def latest_date(self) -> date:
        return self._cache.get_or_load(
            "latest_date",
            self._settings.price_latest_date_ttl_seconds,
            self._fetch_latest_date,
        )

    def supported_tickers(self) -> dict[str, str]:
        currencies = self._cache.get_or_load(
            "currencies",
            self._settings.price_currencies_ttl_seconds,
            lambda: self._fetch("currencies.min.json"),
        )
        # Some names are empty; fall back to the ticker.
        return {
            ticker: name or ticker.upper()
            for ticker, name in currencies.items()
            if ticker.lower() in SUPPORTED_TICKERS
        }

    def get_prices(self, base: str, quote: str, dates: list[date]) -> dict[date, Decimal]:
        base, quote = base.lower(), quote.lower()
        prices: dict[date, Decimal] = {}
        for day in dates:
            try:
                data = self._fetch(f"currencies/{base}.min.json", day.isoformat())
            except PriceProviderError as exc:
                logger.warning("Skipping %s/%s on %s: %s", base, quote, day, exc)
                continue
            rate = data.get(base, {}).get(quote)
            if rate:
                prices[parse_date(data.get("date", day.isoformat()))] = Decimal(rate)
        return prices

    def _fetch_latest_date(self) -> date:
        data = self._fetch("currencies/nzd.min.json")
        try:
            return parse_date(data["date"])
        except (KeyError, TypeError, ValueError) as exc:
            raise PriceProviderError("Invalid response from price API") from exc

    def _fetch(self, endpoint: str, on: str = "latest") -> Any:
        urls = (
            self._settings.price_api_primary_url.format(date=on) + endpoint,
            self._settings.price_api_fallback_url.format(date=on) + endpoint,
        )
        last_error: Optional[Exception] = None
        for url in urls:
            try:
                response = self._client.get(url, timeout=self._settings.price_api_timeout_seconds)
                response.raise_for_status()
                # Rates are parsed straight to Decimal, never through float.
                return json.loads(response.text, parse_float=Decimal)
            except (httpx.HTTPError, ValueError) as exc:
                logger.debug("Price API request to %s failed: %s", url, exc)
                last_error = exc
        raise PriceProviderError(f"Failed to fetch {endpoint} from both price API endpoints: {last_error}")
