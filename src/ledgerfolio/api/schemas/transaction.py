"""Pydantic schemas for transaction endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ledgerfolio.domain.models import CapitalType, FeeAsset, LedgerType, TradeType, TransactionKind
from ledgerfolio.domain.views import AuditTrailLine, TransactionDetail


class TransactionBase(BaseModel):
    title: str = Field(..., min_length=1, description="Short description shown in lists")
    date: date
    description: Optional[str] = None


class CapitalRequest(TransactionBase):
    """Request schema for a contribution or drawing."""

    portfolio_account_id: str
    asset_id: str
    amount: Decimal = Field(..., gt=0)
    capital_type: CapitalType = CapitalType.CONTRIBUTION
    fee: Decimal = Field(default=Decimal("0"), ge=0)


class IncomeRequest(TransactionBase):
    """Request schema for an income or expense. Amounts are positive."""

    portfolio_account_id: str
    asset_id: str
    amount: Decimal = Field(..., gt=0)


class TransferRequest(TransactionBase):
    """Request schema for a transfer between portfolio accounts."""

    source_account_id: str
    target_account_id: str
    asset_id: str
    amount: Decimal = Field(..., gt=0)
    fee: Decimal = Field(default=Decimal("0"), ge=0)
    fee_inclusive: bool = False


class TradeRequest(TransactionBase):
    """Request schema for a buy or sell."""

    portfolio_account_id: str
    base_asset_id: str
    quote_asset_id: str
    base_amount: Decimal = Field(..., gt=0)
    quote_amount: Decimal = Field(..., gt=0)
    trade_type: TradeType = TradeType.BUY
    fee: Decimal = Field(default=Decimal("0"), ge=0)
    fee_asset: FeeAsset = FeeAsset.QUOTE


class EntryResponse(BaseModel):
    entry_id: str
    ledger_id: str
    portfolio_account_id: str
    asset_id: str
    ledger_type: LedgerType
    amount: Decimal


class TransactionResponse(BaseModel):
    """Response schema for a transaction with its entries keyed by role."""

    id: str
    title: str
    description: Optional[str] = None
    date: date
    kind: TransactionKind
    entries: dict[str, EntryResponse]

    @classmethod
    def from_detail(cls, detail: TransactionDetail) -> "TransactionResponse":
        header = detail.transaction
        return cls(
            id=header.id,
            title=header.title,
            description=header.description,
            date=header.date,
            kind=detail.kind,
            entries={
                role: EntryResponse(
                    entry_id=line.entry_id,
                    ledger_id=line.ledger_id,
                    portfolio_account_id=line.portfolio_account_id,
                    asset_id=line.asset_id,
                    ledger_type=line.ledger_type,
                    amount=line.amount,
                )
                for role, line in detail.entries.items()
            },
        )


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]
    count: int


class AuditTrailLineResponse(BaseModel):
    transaction_id: str
    title: str
    date: date
    kind: Optional[TransactionKind] = None
    entry_id: str
    amount: Decimal
    running_balance: Decimal

    @classmethod
    def from_line(cls, line: AuditTrailLine) -> "AuditTrailLineResponse":
        return cls(
            transaction_id=line.transaction.id,
            title=line.transaction.title,
            date=line.transaction.date,
            kind=line.kind,
            entry_id=line.entry_id,
            amount=line.amount,
            running_balance=line.running_balance,
        )
