"""Repository layer - data access abstractions and implementations."""

from ledgerfolio.repositories.errors import DuplicateKeyError
from ledgerfolio.repositories.protocols import (
    PortfolioAccountRepository,
    AssetRepository,
    LedgerRepository,
    EntryRepository,
    TransactionRepository,
    BalanceRepository,
    PriceRepository,
    UnitOfWork,
)

__all__ = [
    "DuplicateKeyError",
    "PortfolioAccountRepository",
    "AssetRepository",
    "LedgerRepository",
    "EntryRepository",
    "TransactionRepository",
    "BalanceRepository",
    "PriceRepository",
    "UnitOfWork",
]
