"""Price service: manual and auto-generated asset prices."""

import logging
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Optional

from ledgerfolio.core.decimal_utils import LEDGER_CONTEXT, ZERO, check_precision, to_decimal
from ledgerfolio.core.exceptions import NotFoundError, OwnershipError, ValidationError
from ledgerfolio.core.timezone import date_list
from ledgerfolio.domain.models import Asset, Price, PriceFrequency
from ledgerfolio.providers.price_provider import PriceProvider
from ledgerfolio.repositories.protocols import UnitOfWork
from ledgerfolio.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)


class PriceService:
    """
    Service for asset prices quoted in another asset.

    Prices never feed the ledger math; they exist for valuation and charts.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        provider: Optional[PriceProvider] = None,
        ownership: Optional[OwnershipGuard] = None,
    ):
        self._uow = uow
        self._provider = provider
        self._ownership = ownership or OwnershipGuard(uow.accounts, uow.assets, uow.transactions)

    def upsert_price(
        self,
        user_id: str,
        asset_id: str,
        quote_asset_id: str,
        on_date: date,
        price: Decimal,
    ) -> Price:
        """Set the price of an asset on a date, replacing any existing one."""
        with self._uow:
            asset, _ = self._require_pair(user_id, asset_id, quote_asset_id)
            value = check_precision(to_decimal(price, "price"), asset.price_precision, "price")
            if value <= ZERO:
                raise ValidationError("price must be greater than zero", field="price")
            stored = self._uow.prices.upsert(
                Price(
                    id=str(uuid.uuid4()),
                    user_id=user_id,
                    asset_id=asset_id,
                    quote_asset_id=quote_asset_id,
                    date=on_date,
                    price=value,
                )
            )
        return stored

    def list_prices(
        self,
        user_id: str,
        asset_id: Optional[str] = None,
        quote_asset_id: Optional[str] = None,
    ) -> list[Price]:
        """List a user's prices, newest first."""
        return self._uow.prices.list_by_user(user_id, asset_id, quote_asset_id)

    def delete_price(self, user_id: str, price_id: str) -> None:
        with self._uow:
            price = self._uow.prices.get_by_id(price_id)
            if not price:
                raise NotFoundError("Price", price_id)
            if price.user_id != user_id:
                raise OwnershipError("Price", price_id)
            self._uow.prices.delete(price_id)

    def supported_tickers(self) -> dict[str, str]:
        """External tickers the configured provider can price."""
        return self._require_provider().supported_tickers()

    def generate_prices(
        self,
        user_id: str,
        asset_id: str,
        quote_asset_id: str,
        from_date: date,
        to_date: date,
        frequency: PriceFrequency = PriceFrequency.ALL,
        override_existing: bool = False,
    ) -> list[Price]:
        """
        Fill a date range with prices from the external provider.

        Both assets need an external ticker the provider supports. The range
        is capped at the provider's latest date. Dates that already have a
        price are skipped unless ``override_existing``. Provider prices are
        rounded to the asset's price precision.
        """
        provider = self._require_provider()
        frequency = PriceFrequency(frequency)

        asset, quote = self._require_pair(user_id, asset_id, quote_asset_id)
        supported = provider.supported_tickers()
        for field, item in (("asset_id", asset), ("quote_asset_id", quote)):
            if not item.external_ticker:
                raise ValidationError(f"{item.ticker} has no external ticker", field=field)
            if item.external_ticker.lower() not in supported:
                raise ValidationError(
                    f"External ticker '{item.external_ticker}' is not supported", field=field
                )

        to_date = min(to_date, provider.latest_date())
        dates = date_list(from_date, to_date, frequency.value)
        if not override_existing:
            existing = self._uow.prices.existing_dates(asset_id, quote_asset_id)
            dates = [d for d in dates if d not in existing]
        if not dates:
            return []

        fetched = provider.get_prices(asset.external_ticker, quote.external_ticker, dates)
        step = Decimal(1).scaleb(-asset.price_precision)

        generated = []
        with self._uow:
            for day in sorted(fetched):
                value = fetched[day].quantize(step, rounding=ROUND_HALF_EVEN, context=LEDGER_CONTEXT)
                if value <= ZERO:
                    continue
                generated.append(
                    self._uow.prices.upsert(
                        Price(
                            id=str(uuid.uuid4()),
                            user_id=user_id,
                            asset_id=asset_id,
                            quote_asset_id=quote_asset_id,
                            date=day,
                            price=value,
                            is_auto_generated=True,
                        )
                    )
                )
        logger.info(
            "Generated %d of %d %s/%s prices",
            len(generated), len(dates), asset.ticker, quote.ticker,
        )
        return generated

    def _require_pair(self, user_id: str, asset_id: str, quote_asset_id: str) -> tuple[Asset, Asset]:
        if asset_id == quote_asset_id:
            raise ValidationError("Asset and quote asset must differ", field="quote_asset_id")
        asset = self._ownership.require_asset(user_id, asset_id)
        quote = self._ownership.require_asset(user_id, quote_asset_id)
        return asset, quote

    def _require_provider(self) -> PriceProvider:
        if self._provider is None:
            raise ValidationError("No price provider is configured")
        return self._provider
