"""Business logic services."""

from ledgerfolio.services.entry_plans import (
    PlanLine,
    CapitalInput,
    IncomeInput,
    TransferInput,
    TradeInput,
    build_plan,
    check_balanced,
)
from ledgerfolio.services.ownership import OwnershipGuard
from ledgerfolio.services.ledger_directory import LedgerDirectory
from ledgerfolio.services.balance_service import BalanceService
from ledgerfolio.services.transaction_service import TransactionService
from ledgerfolio.services.portfolio_service import PortfolioService, AssetCreate, AssetUpdate
from ledgerfolio.services.price_service import PriceService

__all__ = [
    "PlanLine",
    "CapitalInput",
    "IncomeInput",
    "TransferInput",
    "TradeInput",
    "build_plan",
    "check_balanced",
    "OwnershipGuard",
    "LedgerDirectory",
    "BalanceService",
    "TransactionService",
    "PortfolioService",
    "AssetCreate",
    "AssetUpdate",
    "PriceService",
]
