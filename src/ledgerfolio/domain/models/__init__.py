"""Domain models package."""

from ledgerfolio.domain.models.enums import (
    LedgerType,
    TransactionKind,
    CapitalType,
    TradeType,
    FeeAsset,
    PriceFrequency,
)
from ledgerfolio.domain.models.portfolio_account import PortfolioAccount
from ledgerfolio.domain.models.asset import Asset, AccountingCurrency
from ledgerfolio.domain.models.ledger import Ledger, LedgerEntry, Balance
from ledgerfolio.domain.models.transaction import (
    Transaction,
    CapitalTransaction,
    AccountTransferTransaction,
    TradeTransaction,
    IncomeTransaction,
    LinkRecord,
    LINK_ROLES,
)
from ledgerfolio.domain.models.price import Price
from ledgerfolio.domain.models.results import FieldError

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
    "LinkRecord",
    "LINK_ROLES",
    "Price",
    "FieldError",
]
