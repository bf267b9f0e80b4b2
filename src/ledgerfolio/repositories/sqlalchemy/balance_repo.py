"""SQLAlchemy implementation of BalanceRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ledgerfolio.core.decimal_utils import ZERO, exact_sum
from ledgerfolio.core.timezone import now_utc
from ledgerfolio.domain.models import Balance, LedgerType
from ledgerfolio.repositories.sqlalchemy.orm_models import (
    BalanceORM,
    LedgerORM,
    LedgerEntryORM,
    PortfolioAccountORM,
)


class SqlAlchemyBalanceRepository:
    """SQLAlchemy-backed balance cache repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, portfolio_account_id: str, asset_id: str) -> Optional[Balance]:
        """Get a cached balance."""
        orm_balance = self._db.get(BalanceORM, (portfolio_account_id, asset_id))
        return self._to_domain(orm_balance) if orm_balance else None

    def get_or_create(self, portfolio_account_id: str, asset_id: str) -> Balance:
        """Get a cached balance, creating a zero row if absent."""
        return self._to_domain(self._get_or_create_orm(portfolio_account_id, asset_id))

    def set(self, portfolio_account_id: str, asset_id: str, balance: Decimal) -> Balance:
        """Insert or update a cached balance."""
        orm_balance = self._get_or_create_orm(portfolio_account_id, asset_id)
        orm_balance.balance = balance
        orm_balance.updated_at = now_utc()
        self._db.flush()
        return self._to_domain(orm_balance)

    def list_by_user(self, user_id: str) -> list[Balance]:
        """List every cached balance of a user's accounts."""
        orm_balances = (
            self._db.query(BalanceORM)
            .join(PortfolioAccountORM, PortfolioAccountORM.id == BalanceORM.portfolio_account_id)
            .filter(PortfolioAccountORM.user_id == user_id)
            .order_by(PortfolioAccountORM.order, BalanceORM.asset_id)
            .all()
        )
        return [self._to_domain(b) for b in orm_balances]

    def sum_asset_ledger(self, portfolio_account_id: str, asset_id: str) -> Decimal:
        """Sum every entry of the pair's asset-kind ledger, exactly."""
        rows = (
            self._db.query(LedgerEntryORM.amount)
            .join(LedgerORM, LedgerORM.id == LedgerEntryORM.ledger_id)
            .filter(
                LedgerORM.portfolio_account_id == portfolio_account_id,
                LedgerORM.asset_id == asset_id,
                LedgerORM.type == LedgerType.ASSET,
            )
            .all()
        )
        return exact_sum(row[0] for row in rows)

    def _get_or_create_orm(self, portfolio_account_id: str, asset_id: str) -> BalanceORM:
        orm_balance = self._db.get(BalanceORM, (portfolio_account_id, asset_id))
        if orm_balance:
            return orm_balance
        orm_balance = BalanceORM(
            portfolio_account_id=portfolio_account_id,
            asset_id=asset_id,
            balance=ZERO,
        )
        try:
            with self._db.begin_nested():
                self._db.add(orm_balance)
        except IntegrityError:
            orm_balance = self._db.get(BalanceORM, (portfolio_account_id, asset_id))
            if orm_balance is None:
                raise
        return orm_balance

    @staticmethod
    def _to_domain(orm: BalanceORM) -> Balance:
        """Convert ORM model to domain model."""
        return Balance(
            portfolio_account_id=orm.portfolio_account_id,
            asset_id=orm.asset_id,
            balance=orm.balance,
            updated_at=orm.updated_at,
        )
