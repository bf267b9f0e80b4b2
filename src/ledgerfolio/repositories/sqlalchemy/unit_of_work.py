"""SQLAlchemy unit of work spanning every repository."""

import logging

from sqlalchemy.orm import Session

from ledgerfolio.repositories.sqlalchemy.portfolio_account_repo import SqlAlchemyPortfolioAccountRepository
from ledgerfolio.repositories.sqlalchemy.asset_repo import SqlAlchemyAssetRepository
from ledgerfolio.repositories.sqlalchemy.ledger_repo import (
    SqlAlchemyLedgerRepository,
    SqlAlchemyEntryRepository,
)
from ledgerfolio.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from ledgerfolio.repositories.sqlalchemy.balance_repo import SqlAlchemyBalanceRepository
from ledgerfolio.repositories.sqlalchemy.price_repo import SqlAlchemyPriceRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """
    Unit of work over one SQLAlchemy session.

    Repositories only flush; this object owns commit and rollback so a
    multi-table write lands as one transaction or not at all.
    """

    def __init__(self, db: Session):
        self._db = db
        self.accounts = SqlAlchemyPortfolioAccountRepository(db)
        self.assets = SqlAlchemyAssetRepository(db)
        self.ledgers = SqlAlchemyLedgerRepository(db)
        self.entries = SqlAlchemyEntryRepository(db)
        self.transactions = SqlAlchemyTransactionRepository(db)
        self.balances = SqlAlchemyBalanceRepository(db)
        self.prices = SqlAlchemyPriceRepository(db)

    @property
    def session(self) -> Session:
        return self._db

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            self.rollback()

    def commit(self) -> None:
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    def rollback(self) -> None:
        self._db.rollback()
