"""SQLAlchemy implementation of PriceRepository."""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ledgerfolio.domain.models import Price
from ledgerfolio.repositories.sqlalchemy.orm_models import PriceORM


class SqlAlchemyPriceRepository:
    """SQLAlchemy-backed price repository."""

    def __init__(self, db: Session):
        self._db = db

    def upsert(self, price: Price) -> Price:
        """Insert a price or replace the one on the same pair and date."""
        orm_price = self._db.query(PriceORM).filter(
            PriceORM.asset_id == price.asset_id,
            PriceORM.quote_asset_id == price.quote_asset_id,
            PriceORM.date == price.date,
        ).first()
        if orm_price is None:
            orm_price = PriceORM(
                id=price.id,
                user_id=price.user_id,
                asset_id=price.asset_id,
                quote_asset_id=price.quote_asset_id,
                date=price.date,
            )
            self._db.add(orm_price)
        orm_price.price = price.price
        orm_price.is_auto_generated = price.is_auto_generated
        self._db.flush()
        return self._to_domain(orm_price)

    def get_by_id(self, price_id: str) -> Optional[Price]:
        """Retrieve price by ID."""
        orm_price = self._db.query(PriceORM).filter(PriceORM.id == price_id).first()
        return self._to_domain(orm_price) if orm_price else None

    def list_by_user(
        self,
        user_id: str,
        asset_id: Optional[str] = None,
        quote_asset_id: Optional[str] = None,
    ) -> list[Price]:
        """List a user's prices, newest first."""
        query = self._db.query(PriceORM).filter(PriceORM.user_id == user_id)
        if asset_id:
            query = query.filter(PriceORM.asset_id == asset_id)
        if quote_asset_id:
            query = query.filter(PriceORM.quote_asset_id == quote_asset_id)
        query = query.order_by(PriceORM.date.desc())
        return [self._to_domain(p) for p in query.all()]

    def existing_dates(self, asset_id: str, quote_asset_id: str) -> set[date]:
        """Return the dates that already have a price for the pair."""
        rows = self._db.query(PriceORM.date).filter(
            PriceORM.asset_id == asset_id,
            PriceORM.quote_asset_id == quote_asset_id,
        ).all()
        return {row[0] for row in rows}

    def delete(self, price_id: str) -> None:
        """Delete a price."""
        self._db.query(PriceORM).filter(PriceORM.id == price_id).delete(
            synchronize_session=False
        )

    @staticmethod
    def _to_domain(orm: PriceORM) -> Price:
        """Convert ORM model to domain model."""
        return Price(
            id=orm.id,
            user_id=orm.user_id,
            asset_id=orm.asset_id,
            quote_asset_id=orm.quote_asset_id,
            date=orm.date,
            price=orm.price,
            is_auto_generated=orm.is_auto_generated,
            created_at=orm.created_at,
        )
