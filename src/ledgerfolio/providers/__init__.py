"""Price providers module."""

from ledgerfolio.providers.price_provider import PriceProvider
from ledgerfolio.providers.stub_provider import StubPriceProvider
from ledgerfolio.providers.cache import TtlCache
from ledgerfolio.providers.currency_api_provider import CurrencyApiProvider, SUPPORTED_TICKERS

__all__ = [
    "PriceProvider",
    "StubPriceProvider",
    "TtlCache",
    "CurrencyApiProvider",
    "SUPPORTED_TICKERS",
]
