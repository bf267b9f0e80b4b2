"""Enumerations for domain models."""

from enum import Enum


class LedgerType(str, Enum):
    """Side of the double-entry equation a ledger represents."""

    ASSET = "asset"
    LIABILITY = "liability"
    CAPITAL = "capital"
    INCOME = "income"


class TransactionKind(str, Enum):
    """Shape of entry group a transaction header carries."""

    CAPITAL = "capital"
    TRANSFER = "transfer"
    TRADE = "trade"
    INCOME = "income"


class CapitalType(str, Enum):
    """Direction of a capital movement."""

    CONTRIBUTION = "contribution"
    DRAWING = "drawing"


class TradeType(str, Enum):
    """Direction of a trade, from the base asset's point of view."""

    BUY = "buy"
    SELL = "sell"


class FeeAsset(str, Enum):
    """Which leg of a trade the fee is charged in."""

    BASE = "base"
    QUOTE = "quote"


class PriceFrequency(str, Enum):
    """Date selection used when generating historical prices."""

    ALL = "all"
    MONTH_START = "month-start"
    MONTH_END = "month-end"
