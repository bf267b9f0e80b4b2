"""SQLAlchemy implementation of AssetRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from ledgerfolio.domain.models import Asset, AccountingCurrency
from ledgerfolio.repositories.sqlalchemy.integrity import unique_guard
from ledgerfolio.repositories.sqlalchemy.orm_models import AssetORM, AccountingCurrencyORM

UNIQUE_FIELDS = ("ticker", "name", "symbol")


class SqlAlchemyAssetRepository:
    """SQLAlchemy-backed asset repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, asset: Asset) -> Asset:
        """Persist a new asset."""
        orm_asset = AssetORM(id=asset.id, user_id=asset.user_id)
        self._apply(orm_asset, asset)
        with unique_guard(self._db, UNIQUE_FIELDS):
            self._db.add(orm_asset)
        return self._to_domain(orm_asset)

    def get_by_id(self, asset_id: str) -> Optional[Asset]:
        """Retrieve asset by ID."""
        orm_asset = self._db.query(AssetORM).filter(AssetORM.id == asset_id).first()
        return self._to_domain(orm_asset) if orm_asset else None

    def find_duplicate(self, asset: Asset) -> Optional[str]:
        """Return the first unique field another asset of the user already holds."""
        for field in UNIQUE_FIELDS:
            value = getattr(asset, field)
            if value is None:
                continue
            clash = self._db.query(AssetORM.id).filter(
                AssetORM.user_id == asset.user_id,
                getattr(AssetORM, field) == value,
                AssetORM.id != asset.id,
            ).first()
            if clash:
                return field
        return None

    def list_by_user(self, user_id: str) -> list[Asset]:
        """List a user's assets ordered by ticker."""
        orm_assets = (
            self._db.query(AssetORM)
            .filter(AssetORM.user_id == user_id)
            .order_by(AssetORM.ticker)
            .all()
        )
        return [self._to_domain(a) for a in orm_assets]

    def count_by_user(self, user_id: str) -> int:
        """Count a user's assets."""
        return self._db.query(AssetORM).filter(AssetORM.user_id == user_id).count()

    def update(self, asset: Asset) -> Asset:
        """Update an existing asset."""
        orm_asset = self._db.query(AssetORM).filter(AssetORM.id == asset.id).first()
        if not orm_asset:
            raise ValueError(f"Asset not found: {asset.id}")
        with unique_guard(self._db, UNIQUE_FIELDS):
            self._apply(orm_asset, asset)
        return self._to_domain(orm_asset)

    def delete(self, asset_id: str) -> None:
        """Delete an asset; ledgers, entries, balances and prices go by cascade."""
        self._db.query(AssetORM).filter(AssetORM.id == asset_id).delete(
            synchronize_session=False
        )
        self._db.expire_all()

    def get_accounting_currency(self, user_id: str) -> Optional[AccountingCurrency]:
        """Get the user's accounting currency selection."""
        orm = self._db.get(AccountingCurrencyORM, user_id)
        if orm is None:
            return None
        return AccountingCurrency(user_id=orm.user_id, asset_id=orm.asset_id)

    def set_accounting_currency(self, user_id: str, asset_id: Optional[str]) -> AccountingCurrency:
        """Insert or update the user's accounting currency selection."""
        orm = self._db.get(AccountingCurrencyORM, user_id)
        if orm is None:
            orm = AccountingCurrencyORM(user_id=user_id)
            self._db.add(orm)
        orm.asset_id = asset_id
        self._db.flush()
        return AccountingCurrency(user_id=orm.user_id, asset_id=orm.asset_id)

    @staticmethod
    def _apply(orm: AssetORM, asset: Asset) -> None:
        orm.ticker = asset.ticker
        orm.name = asset.name
        orm.symbol = asset.symbol
        orm.precision = asset.precision
        orm.price_precision = asset.price_precision
        orm.is_currency = asset.is_currency
        orm.external_ticker = asset.external_ticker

    @staticmethod
    def _to_domain(orm: AssetORM) -> Asset:
        """Convert ORM model to domain model."""
        return Asset(
            id=orm.id,
            user_id=orm.user_id,
            ticker=orm.ticker,
            name=orm.name,
            symbol=orm.symbol,
            precision=orm.precision,
            price_precision=orm.price_precision,
            is_currency=orm.is_currency,
            external_ticker=orm.external_ticker,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
