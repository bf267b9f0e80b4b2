"""SQLAlchemy implementation of PortfolioAccountRepository."""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ledgerfolio.domain.models import PortfolioAccount
from ledgerfolio.repositories.sqlalchemy.integrity import unique_guard
from ledgerfolio.repositories.sqlalchemy.orm_models import PortfolioAccountORM

UNIQUE_FIELDS = ("name",)


class SqlAlchemyPortfolioAccountRepository:
    """SQLAlchemy-backed portfolio account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: PortfolioAccount) -> PortfolioAccount:
        """Persist a new account."""
        orm_account = PortfolioAccountORM(
            id=account.id,
            user_id=account.user_id,
            name=account.name,
            order=account.order,
        )
        with unique_guard(self._db, UNIQUE_FIELDS):
            self._db.add(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[PortfolioAccount]:
        """Retrieve account by ID."""
        orm_account = self._db.query(PortfolioAccountORM).filter(
            PortfolioAccountORM.id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def get_by_name(self, user_id: str, name: str) -> Optional[PortfolioAccount]:
        """Retrieve a user's account by name."""
        orm_account = self._db.query(PortfolioAccountORM).filter(
            PortfolioAccountORM.user_id == user_id,
            PortfolioAccountORM.name == name,
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_by_user(self, user_id: str) -> list[PortfolioAccount]:
        """List a user's accounts by display order."""
        orm_accounts = (
            self._db.query(PortfolioAccountORM)
            .filter(PortfolioAccountORM.user_id == user_id)
            .order_by(PortfolioAccountORM.order, PortfolioAccountORM.name)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def count_by_user(self, user_id: str) -> int:
        """Count a user's accounts."""
        return self._db.query(PortfolioAccountORM).filter(
            PortfolioAccountORM.user_id == user_id
        ).count()

    def max_order(self, user_id: str) -> Optional[int]:
        """Return the highest display order among a user's accounts."""
        return self._db.query(func.max(PortfolioAccountORM.order)).filter(
            PortfolioAccountORM.user_id == user_id
        ).scalar()

    def update(self, account: PortfolioAccount) -> PortfolioAccount:
        """Update name and order."""
        orm_account = self._db.query(PortfolioAccountORM).filter(
            PortfolioAccountORM.id == account.id
        ).first()
        if not orm_account:
            raise ValueError(f"Portfolio account not found: {account.id}")
        with unique_guard(self._db, UNIQUE_FIELDS):
            orm_account.name = account.name
            orm_account.order = account.order
        return self._to_domain(orm_account)

    def delete(self, account_id: str) -> None:
        """Delete an account; ledgers, entries and balances go by cascade."""
        self._db.query(PortfolioAccountORM).filter(
            PortfolioAccountORM.id == account_id
        ).delete(synchronize_session=False)
        self._db.expire_all()

    @staticmethod
    def _to_domain(orm: PortfolioAccountORM) -> PortfolioAccount:
        """Convert ORM model to domain model."""
        return PortfolioAccount(
            id=orm.id,
            user_id=orm.user_id,
            name=orm.name,
            order=orm.order,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
