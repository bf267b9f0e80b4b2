"""SQLAlchemy repository implementations."""

from ledgerfolio.repositories.sqlalchemy.database import (
    Base,
    build_engine,
    configure_sqlite,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
)
from ledgerfolio.repositories.sqlalchemy.portfolio_account_repo import SqlAlchemyPortfolioAccountRepository
from ledgerfolio.repositories.sqlalchemy.asset_repo import SqlAlchemyAssetRepository
from ledgerfolio.repositories.sqlalchemy.ledger_repo import (
    SqlAlchemyLedgerRepository,
    SqlAlchemyEntryRepository,
)
from ledgerfolio.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from ledgerfolio.repositories.sqlalchemy.balance_repo import SqlAlchemyBalanceRepository
from ledgerfolio.repositories.sqlalchemy.price_repo import SqlAlchemyPriceRepository
from ledgerfolio.repositories.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "build_engine",
    "configure_sqlite",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "SqlAlchemyPortfolioAccountRepository",
    "SqlAlchemyAssetRepository",
    "SqlAlchemyLedgerRepository",
    "SqlAlchemyEntryRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyBalanceRepository",
    "SqlAlchemyPriceRepository",
    "SqlAlchemyUnitOfWork",
]
