"""
Integration tests for PriceService with the stub provider.

Tests cover:
- Manual price upserts and precision checks
- Generating prices for all days, month starts and month ends
- Skipping or overriding existing dates
- Provider capability checks
"""

from datetime import date
from decimal import Decimal

import pytest

from ledgerfolio.core.exceptions import OwnershipError, PrecisionError, ValidationError
from ledgerfolio.domain.models import PriceFrequency
from ledgerfolio.services import PriceService

from tests.conftest import OTHER_USER_ID, USER_ID

D = Decimal


@pytest.fixture
def usd(make_asset):
    return make_asset("USD", precision=2, price_precision=4, external_ticker="usd")


@pytest.fixture
def eur(make_asset):
    return make_asset("EUR", precision=2, price_precision=4, external_ticker="eur")


# =============================================================================
# MANUAL PRICES
# =============================================================================


class TestUpsertPrice:
    """Tests for manually entered prices."""

    def test_upsert_replaces_same_date(self, price_service, usd, eur):
        """
        GIVEN a USD/EUR price on a date
        WHEN another price is set for the same date
        THEN it replaces the first one
        """
        price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 1, 1), D("0.91"))
        price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 1, 1), D("0.93"))

        prices = price_service.list_prices(USER_ID, asset_id=usd.id)

        assert len(prices) == 1
        assert prices[0].price == D("0.9300")
        assert prices[0].is_auto_generated is False

    def test_price_precision_enforced(self, price_service, usd, eur):
        with pytest.raises(PrecisionError) as exc_info:
            price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 1, 1), D("0.91234"))

        assert exc_info.value.field == "price"

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_price_must_be_positive(self, price_service, usd, eur, value):
        with pytest.raises(ValidationError):
            price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 1, 1), D(value))

    def test_asset_cannot_quote_itself(self, price_service, usd):
        with pytest.raises(ValidationError) as exc_info:
            price_service.upsert_price(USER_ID, usd.id, usd.id, date(2024, 1, 1), D("1"))

        assert exc_info.value.field == "quote_asset_id"

    def test_foreign_price_cannot_be_deleted(self, price_service, usd, eur):
        price = price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 1, 1), D("0.9"))

        with pytest.raises(OwnershipError):
            price_service.delete_price(OTHER_USER_ID, price.id)

        price_service.delete_price(USER_ID, price.id)
        assert price_service.list_prices(USER_ID) == []


# =============================================================================
# GENERATED PRICES
# =============================================================================


class TestGeneratePrices:
    """Tests for filling date ranges from the provider."""

    def test_all_days_capped_at_latest_date(self, price_service, usd, eur):
        """
        GIVEN a provider whose latest date is 2024-06-30
        WHEN I generate daily prices for 2024-06-25..2024-07-05
        THEN six prices are stored, rounded to the price precision
        """
        generated = price_service.generate_prices(
            USER_ID, usd.id, eur.id, date(2024, 6, 25), date(2024, 7, 5)
        )

        assert [p.date for p in generated] == [date(2024, 6, d) for d in range(25, 31)]
        assert all(p.price == D("0.9200") and p.is_auto_generated for p in generated)

    def test_month_end(self, price_service, usd, eur):
        generated = price_service.generate_prices(
            USER_ID, usd.id, eur.id, date(2024, 1, 15), date(2024, 6, 30), PriceFrequency.MONTH_END
        )

        assert [p.date for p in generated] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
            date(2024, 4, 30),
            date(2024, 5, 31),
            date(2024, 6, 30),
        ]

    def test_inverse_pair_is_rounded(self, price_service, usd, eur):
        generated = price_service.generate_prices(
            USER_ID, eur.id, usd.id, date(2024, 3, 1), date(2024, 3, 1)
        )

        assert generated[0].price == D("1.0870")

    def test_existing_dates_skipped(self, price_service, usd, eur):
        """
        GIVEN a manual price on 2024-06-27
        WHEN I generate 2024-06-25..2024-06-30 without override
        THEN the manual price is kept and the other five dates are filled
        """
        price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 6, 27), D("0.95"))

        generated = price_service.generate_prices(
            USER_ID, usd.id, eur.id, date(2024, 6, 25), date(2024, 6, 30)
        )

        assert date(2024, 6, 27) not in [p.date for p in generated]
        assert len(generated) == 5
        manual = [p for p in price_service.list_prices(USER_ID) if p.date == date(2024, 6, 27)]
        assert manual[0].price == D("0.9500")
        assert manual[0].is_auto_generated is False

    def test_override_existing(self, price_service, usd, eur):
        price_service.upsert_price(USER_ID, usd.id, eur.id, date(2024, 6, 27), D("0.95"))

        generated = price_service.generate_prices(
            USER_ID, usd.id, eur.id, date(2024, 6, 25), date(2024, 6, 30), override_existing=True
        )

        assert len(generated) == 6
        assert len(price_service.list_prices(USER_ID)) == 6
        assert all(p.price == D("0.9200") for p in price_service.list_prices(USER_ID))

    def test_range_after_latest_date_is_empty(self, price_service, usd, eur):
        generated = price_service.generate_prices(
            USER_ID, usd.id, eur.id, date(2024, 7, 1), date(2024, 7, 31)
        )

        assert generated == []

    def test_missing_external_ticker(self, price_service, make_asset, eur):
        plain = make_asset("ABC")

        with pytest.raises(ValidationError) as exc_info:
            price_service.generate_prices(USER_ID, plain.id, eur.id, date(2024, 1, 1), date(2024, 1, 2))

        assert exc_info.value.field == "asset_id"

    def test_unsupported_external_ticker(self, price_service, make_asset, usd):
        odd = make_asset("ODD", external_ticker="odd")

        with pytest.raises(ValidationError) as exc_info:
            price_service.generate_prices(USER_ID, usd.id, odd.id, date(2024, 1, 1), date(2024, 1, 2))

        assert exc_info.value.field == "quote_asset_id"

    def test_no_provider_configured(self, uow, usd, eur):
        service = PriceService(uow)

        with pytest.raises(ValidationError):
            service.generate_prices(USER_ID, usd.id, eur.id, date(2024, 1, 1), date(2024, 1, 2))

    def test_supported_tickers(self, price_service):
        assert price_service.supported_tickers()["usd"] == "USD"
