"""Portfolio service: portfolio accounts, assets and accounting currency."""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Union

from ledgerfolio.config.settings import get_settings
from ledgerfolio.core.decimal_utils import MAX_SCALE
from ledgerfolio.core.exceptions import LimitExceededError, ValidationError
from ledgerfolio.domain.models import AccountingCurrency, Asset, FieldError, PortfolioAccount
from ledgerfolio.repositories.errors import DuplicateKeyError
from ledgerfolio.repositories.protocols import UnitOfWork
from ledgerfolio.services.balance_service import BalanceService
from ledgerfolio.services.ledger_directory import LedgerDirectory
from ledgerfolio.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)

ACCOUNT_NAME_MAX = 50
ASSET_TICKER_MAX = 10
ASSET_NAME_MAX = 50
ASSET_SYMBOL_MAX = 10


@dataclass
class AssetCreate:
    """Input data for creating an asset."""

    ticker: str
    name: str
    symbol: Optional[str] = None
    precision: int = 0
    price_precision: int = 0
    is_currency: bool = False
    external_ticker: Optional[str] = None


@dataclass
class AssetUpdate:
    """Partial update data for editing an asset."""

    ticker: Optional[str] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    precision: Optional[int] = None
    price_precision: Optional[int] = None
    is_currency: Optional[bool] = None
    external_ticker: Optional[str] = None


def _duplicate(field: str, value: str) -> FieldError:
    return FieldError(field=field, message=f"{field.capitalize()} '{value}' is already in use")


class PortfolioService:
    """
    Service for the entities the ledger books against.

    Creating an account or asset eagerly creates the ledgers and balance
    rows for every (account, asset) pair of the user. Duplicate names,
    tickers and symbols come back as FieldError results, not exceptions.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ownership: Optional[OwnershipGuard] = None,
        ledger_directory: Optional[LedgerDirectory] = None,
        balance_service: Optional[BalanceService] = None,
    ):
        self._uow = uow
        self._ownership = ownership or OwnershipGuard(uow.accounts, uow.assets, uow.transactions)
        self._ledgers = ledger_directory or LedgerDirectory(
            uow.ledgers, uow.balances, uow.accounts, uow.assets
        )
        self._balances = balance_service or BalanceService(uow)

    # =========================================================================
    # Portfolio accounts
    # =========================================================================

    def create_portfolio_account(self, user_id: str, name: str) -> Union[PortfolioAccount, FieldError]:
        """
        Create a portfolio account.

        Args:
            user_id: Owner
            name: Unique (per user) display name

        Returns:
            The created account, or a FieldError on a duplicate name
        """
        name = self._clean_name(name, "name", ACCOUNT_NAME_MAX)
        limit = get_settings().max_portfolio_accounts
        with self._uow:
            if self._uow.accounts.count_by_user(user_id) >= limit:
                raise LimitExceededError("portfolio accounts", limit)
            if self._uow.accounts.get_by_name(user_id, name):
                return _duplicate("name", name)

            highest = self._uow.accounts.max_order(user_id)
            account = PortfolioAccount(
                id=str(uuid.uuid4()),
                user_id=user_id,
                name=name,
                order=0 if highest is None else highest + 1,
            )
            try:
                account = self._uow.accounts.create(account)
            except DuplicateKeyError as exc:
                return _duplicate(exc.field, name)
            self._ledgers.init_ledgers_for_account(user_id, account.id)
        logger.info("Created portfolio account %s for user %s", account.id, user_id)
        return account

    def get_portfolio_account(self, user_id: str, account_id: str) -> PortfolioAccount:
        return self._ownership.require_account(user_id, account_id)

    def list_portfolio_accounts(self, user_id: str) -> list[PortfolioAccount]:
        """List a user's accounts in display order."""
        return self._uow.accounts.list_by_user(user_id)

    def update_portfolio_account(
        self,
        user_id: str,
        account_id: str,
        name: Optional[str] = None,
        order: Optional[int] = None,
    ) -> Union[PortfolioAccount, FieldError]:
        """Rename or reorder an account."""
        with self._uow:
            account = self._ownership.require_account(user_id, account_id)
            if name is not None:
                name = self._clean_name(name, "name", ACCOUNT_NAME_MAX)
                clash = self._uow.accounts.get_by_name(user_id, name)
                if clash and clash.id != account_id:
                    return _duplicate("name", name)
                account.name = name
            if order is not None:
                account.order = order
            try:
                return self._uow.accounts.update(account)
            except DuplicateKeyError as exc:
                return _duplicate(exc.field, account.name)

    def reorder_portfolio_accounts(self, user_id: str, account_ids: list[str]) -> list[PortfolioAccount]:
        """Set display order to the position of each ID in ``account_ids``."""
        if len(set(account_ids)) != len(account_ids):
            raise ValidationError("Account IDs must not repeat", field="account_ids")
        with self._uow:
            for position, account_id in enumerate(account_ids):
                account = self._ownership.require_account(user_id, account_id)
                account.order = position
                self._uow.accounts.update(account)
            accounts = self._uow.accounts.list_by_user(user_id)
        return accounts

    def delete_portfolio_account(self, user_id: str, account_id: str) -> list[str]:
        """
        Delete an account with its ledgers, entries and balances.

        Every transaction that lost entries goes with it, including
        transfers whose other half sits in a surviving account, so no half
        of a balanced group is left behind. Returns the removed IDs.
        """
        with self._uow:
            self._ownership.require_account(user_id, account_id)
            self._uow.accounts.delete(account_id)
            purged = self._uow.transactions.delete_unlinked(user_id)
            self._balances.recompute_user(user_id)
        logger.info(
            "Deleted portfolio account %s (%d transactions removed)", account_id, len(purged)
        )
        return purged

    # =========================================================================
    # Assets
    # =========================================================================

    def create_asset(self, user_id: str, data: AssetCreate) -> Union[Asset, FieldError]:
        """Create an asset, or return a FieldError on a duplicate ticker, name or symbol."""
        asset = Asset(
            id=str(uuid.uuid4()),
            user_id=user_id,
            ticker=data.ticker,
            name=data.name,
            symbol=data.symbol,
            precision=data.precision,
            price_precision=data.price_precision,
            is_currency=data.is_currency,
            external_ticker=data.external_ticker,
        )
        self._validate_asset(asset)
        limit = get_settings().max_assets
        with self._uow:
            if self._uow.assets.count_by_user(user_id) >= limit:
                raise LimitExceededError("assets", limit)
            field = self._uow.assets.find_duplicate(asset)
            if field:
                return _duplicate(field, getattr(asset, field))
            try:
                asset = self._uow.assets.create(asset)
            except DuplicateKeyError as exc:
                return _duplicate(exc.field, getattr(asset, exc.field))
            self._ledgers.init_ledgers_for_asset(user_id, asset.id)
        logger.info("Created asset %s (%s) for user %s", asset.id, asset.ticker, user_id)
        return asset

    def get_asset(self, user_id: str, asset_id: str) -> Asset:
        return self._ownership.require_asset(user_id, asset_id)

    def list_assets(self, user_id: str) -> list[Asset]:
        """List a user's assets by ticker."""
        return self._uow.assets.list_by_user(user_id)

    def update_asset(self, user_id: str, asset_id: str, patch: AssetUpdate) -> Union[Asset, FieldError]:
        """Apply a partial update to an asset."""
        with self._uow:
            asset = self._ownership.require_asset(user_id, asset_id)
            for field in ("ticker", "name", "precision", "price_precision", "is_currency"):
                value = getattr(patch, field)
                if value is not None:
                    setattr(asset, field, value)
            # Empty strings clear the optional fields.
            if patch.symbol is not None:
                asset.symbol = patch.symbol or None
            if patch.external_ticker is not None:
                asset.external_ticker = patch.external_ticker or None
            self._validate_asset(asset)

            field = self._uow.assets.find_duplicate(asset)
            if field:
                return _duplicate(field, getattr(asset, field))
            try:
                return self._uow.assets.update(asset)
            except DuplicateKeyError as exc:
                return _duplicate(exc.field, getattr(asset, exc.field))

    def delete_asset(self, user_id: str, asset_id: str) -> list[str]:
        """
        Delete an asset with its ledgers, entries, balances and prices.

        Every transaction that lost entries goes with it, including trades
        against a surviving asset. Returns the removed IDs.
        """
        with self._uow:
            self._ownership.require_asset(user_id, asset_id)
            self._uow.assets.delete(asset_id)
            purged = self._uow.transactions.delete_unlinked(user_id)
            self._balances.recompute_user(user_id)
        logger.info("Deleted asset %s (%d transactions removed)", asset_id, len(purged))
        return purged

    # =========================================================================
    # Accounting currency
    # =========================================================================

    def get_accounting_currency(self, user_id: str) -> AccountingCurrency:
        currency = self._uow.assets.get_accounting_currency(user_id)
        return currency or AccountingCurrency(user_id=user_id, asset_id=None)

    def set_accounting_currency(self, user_id: str, asset_id: Optional[str]) -> AccountingCurrency:
        """Select the asset used as the valuation unit, or clear it with None."""
        with self._uow:
            if asset_id is not None:
                self._ownership.require_asset(user_id, asset_id)
            currency = self._uow.assets.set_accounting_currency(user_id, asset_id)
        return currency

    # =========================================================================
    # Validation
    # =========================================================================

    @staticmethod
    def _clean_name(value: Optional[str], field: str, max_length: int) -> str:
        value = (value or "").strip()
        if not value:
            raise ValidationError(f"{field} is required", field=field)
        if len(value) > max_length:
            raise ValidationError(f"{field} must be at most {max_length} characters", field=field)
        return value

    def _validate_asset(self, asset: Asset) -> None:
        asset.ticker = self._clean_name(asset.ticker, "ticker", ASSET_TICKER_MAX).upper()
        asset.name = self._clean_name(asset.name, "name", ASSET_NAME_MAX)
        if asset.symbol is not None:
            asset.symbol = asset.symbol.strip() or None
        if asset.symbol and len(asset.symbol) > ASSET_SYMBOL_MAX:
            raise ValidationError(
                f"symbol must be at most {ASSET_SYMBOL_MAX} characters", field="symbol"
            )
        if asset.external_ticker is not None:
            asset.external_ticker = asset.external_ticker.strip().lower() or None
        for field in ("precision", "price_precision"):
            value = getattr(asset, field)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_SCALE:
                raise ValidationError(f"{field} must be an integer between 0 and {MAX_SCALE}", field=field)
