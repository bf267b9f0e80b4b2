"""Repository protocol definitions (interfaces)."""

from ledgerfolio.repositories.protocols.portfolio_account_repo import PortfolioAccountRepository
from ledgerfolio.repositories.protocols.asset_repo import AssetRepository
from ledgerfolio.repositories.protocols.ledger_repo import LedgerRepository, EntryRepository
from ledgerfolio.repositories.protocols.transaction_repo import TransactionRepository
from ledgerfolio.repositories.protocols.balance_repo import BalanceRepository
from ledgerfolio.repositories.protocols.price_repo import PriceRepository
from ledgerfolio.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "PortfolioAccountRepository",
    "AssetRepository",
    "LedgerRepository",
    "EntryRepository",
    "TransactionRepository",
    "BalanceRepository",
    "PriceRepository",
    "UnitOfWork",
]
