"""Domain layer - pure business models with no external dependencies."""

from ledgerfolio.domain.models import (
    LedgerType,
    TransactionKind,
    CapitalType,
    TradeType,
    FeeAsset,
    PriceFrequency,
    PortfolioAccount,
    Asset,
    AccountingCurrency,
    Ledger,
    LedgerEntry,
    Balance,
    Transaction,
    CapitalTransaction,
    AccountTransferTransaction,
    TradeTransaction,
    IncomeTransaction,
    Price,
    FieldError,
)

__all__ = [
    "LedgerType",
    "TransactionKind",
    "CapitalType",
    "TradeType",
    "FeeAsset",
    "PriceFrequency",
    "PortfolioAccount",
    "Asset",
    "AccountingCurrency",
    "Ledger",
    "LedgerEntry",
    "Balance",
    "Transaction",
    "CapitalTransaction",
    "AccountTransferTransaction",
    "TradeTransaction",
    "IncomeTransaction",
    "Price",
    "FieldError",
]
