"""
Entry plans: the signed entries each kind of economic event produces.

A plan is a list of PlanLine, one per entry role. Plans are pure data; the
transaction service resolves ledgers for them and writes them atomically.

Sign convention: entries on asset/liability ledgers plus entries on
capital/income ledgers of one transaction sum to exactly zero.

    Capital   asset +amount, capital -amount (drawings flip both)
    Income    asset +amount, income -amount (expenses pass a negative amount)
    Transfer  source asset -amount, source capital +amount,
              target asset +net, target capital -net
    Trade     base asset +base, base income -base,
              quote asset -quote, quote income +quote (sells flip all four)
    Fee       fee asset -fee, fee income +fee
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from ledgerfolio.core.decimal_utils import ZERO, exact_sum, format_decimal
from ledgerfolio.core.exceptions import UnbalancedEntriesError
from ledgerfolio.domain.models import (
    CapitalType,
    FeeAsset,
    LedgerType,
    TradeType,
    TransactionKind,
)


@dataclass(frozen=True)
class PlanLine:
    """One entry to be written: role, target ledger triple and signed amount."""

    role: str
    portfolio_account_id: str
    asset_id: str
    ledger_type: LedgerType
    amount: Decimal


# =============================================================================
# Inputs
# =============================================================================


@dataclass
class CapitalInput:
    """Input data for a contribution or drawing."""

    title: str
    date: date
    portfolio_account_id: str
    asset_id: str
    amount: Decimal
    capital_type: CapitalType = CapitalType.CONTRIBUTION
    fee: Decimal = field(default=ZERO)
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.capital_type, str):
            self.capital_type = CapitalType(self.capital_type)


@dataclass
class IncomeInput:
    """Input data for an income receipt or an expense."""

    title: str
    date: date
    portfolio_account_id: str
    asset_id: str
    amount: Decimal
    description: Optional[str] = None


@dataclass
class TransferInput:
    """Input data for moving one asset between two portfolio accounts."""

    title: str
    date: date
    source_account_id: str
    target_account_id: str
    asset_id: str
    amount: Decimal
    fee: Decimal = field(default=ZERO)
    fee_inclusive: bool = False
    description: Optional[str] = None


@dataclass
class TradeInput:
    """Input data for buying or selling a base asset for a quote asset."""

    title: str
    date: date
    portfolio_account_id: str
    base_asset_id: str
    quote_asset_id: str
    base_amount: Decimal
    quote_amount: Decimal
    trade_type: TradeType = TradeType.BUY
    fee: Decimal = field(default=ZERO)
    fee_asset: FeeAsset = FeeAsset.QUOTE
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str):
            self.trade_type = TradeType(self.trade_type)
        if isinstance(self.fee_asset, str):
            self.fee_asset = FeeAsset(self.fee_asset)

    @property
    def fee_asset_id(self) -> str:
        return self.base_asset_id if self.fee_asset == FeeAsset.BASE else self.quote_asset_id


TransactionInput = Union[CapitalInput, IncomeInput, TransferInput, TradeInput]


# =============================================================================
# Plans
# =============================================================================


def _fee_lines(portfolio_account_id: str, asset_id: str, fee: Decimal) -> list[PlanLine]:
    if fee <= ZERO:
        return []
    return [
        PlanLine("fee_asset", portfolio_account_id, asset_id, LedgerType.ASSET, fee.copy_negate()),
        PlanLine("fee_income", portfolio_account_id, asset_id, LedgerType.INCOME, fee),
    ]


def capital_plan(data: CapitalInput) -> list[PlanLine]:
    """Entries for a contribution (asset in) or drawing (asset out)."""
    amount = data.amount
    if data.capital_type == CapitalType.DRAWING:
        amount = amount.copy_negate()
    account, asset = data.portfolio_account_id, data.asset_id
    return [
        PlanLine("asset", account, asset, LedgerType.ASSET, amount),
        PlanLine("capital", account, asset, LedgerType.CAPITAL, amount.copy_negate()),
        *_fee_lines(account, asset, data.fee),
    ]


def income_plan(data: IncomeInput) -> list[PlanLine]:
    """Entries for income (positive amount) or expense (negative amount)."""
    account, asset = data.portfolio_account_id, data.asset_id
    return [
        PlanLine("asset", account, asset, LedgerType.ASSET, data.amount),
        PlanLine("income", account, asset, LedgerType.INCOME, data.amount.copy_negate()),
    ]


def transfer_net_amount(data: TransferInput) -> Decimal:
    """Amount the target account receives."""
    if data.fee_inclusive:
        return exact_sum([data.amount, data.fee.copy_negate()])
    return data.amount


def transfer_plan(data: TransferInput) -> list[PlanLine]:
    """Entries for a transfer; the fee is always booked on the source account."""
    source, target, asset = data.source_account_id, data.target_account_id, data.asset_id
    net = transfer_net_amount(data)
    return [
        PlanLine("source_asset", source, asset, LedgerType.ASSET, data.amount.copy_negate()),
        PlanLine("source_capital", source, asset, LedgerType.CAPITAL, data.amount),
        PlanLine("target_asset", target, asset, LedgerType.ASSET, net),
        PlanLine("target_capital", target, asset, LedgerType.CAPITAL, net.copy_negate()),
        *_fee_lines(source, asset, data.fee),
    ]


def trade_plan(data: TradeInput) -> list[PlanLine]:
    """Entries for a buy (base in, quote out) or sell (base out, quote in)."""
    account = data.portfolio_account_id
    base, quote = data.base_amount, data.quote_amount
    if data.trade_type == TradeType.SELL:
        base, quote = base.copy_negate(), quote.copy_negate()
    return [
        PlanLine("base_asset", account, data.base_asset_id, LedgerType.ASSET, base),
        PlanLine("base_income", account, data.base_asset_id, LedgerType.INCOME, base.copy_negate()),
        PlanLine("quote_asset", account, data.quote_asset_id, LedgerType.ASSET, quote.copy_negate()),
        PlanLine("quote_income", account, data.quote_asset_id, LedgerType.INCOME, quote),
        *_fee_lines(account, data.fee_asset_id, data.fee),
    ]


def build_plan(data: TransactionInput) -> tuple[TransactionKind, list[PlanLine]]:
    """Return the transaction kind and entry plan for an input."""
    if isinstance(data, CapitalInput):
        return TransactionKind.CAPITAL, capital_plan(data)
    if isinstance(data, IncomeInput):
        return TransactionKind.INCOME, income_plan(data)
    if isinstance(data, TransferInput):
        return TransactionKind.TRANSFER, transfer_plan(data)
    if isinstance(data, TradeInput):
        return TransactionKind.TRADE, trade_plan(data)
    raise TypeError(f"Unsupported transaction input: {type(data).__name__}")


def check_balanced(kind: TransactionKind, lines: list[PlanLine]) -> None:
    """Raise UnbalancedEntriesError unless the plan sums to exactly zero."""
    total = exact_sum(line.amount for line in lines)
    if total != ZERO:
        raise UnbalancedEntriesError(TransactionKind(kind).value, format_decimal(total))
