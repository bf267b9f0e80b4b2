"""Transaction header and linking record domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ledgerfolio.domain.models.enums import TransactionKind


@dataclass
class Transaction:
    """
    Header shared by exactly one entry group.

    Holds no monetary values; amounts live on the ledger entries.
    """

    id: str
    user_id: str
    title: str
    date: date
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)


@dataclass
class CapitalTransaction:
    """Links the entries of a contribution or drawing."""

    transaction_id: str
    asset_entry_id: str
    capital_entry_id: str
    fee_asset_entry_id: Optional[str] = None
    fee_income_entry_id: Optional[str] = None


@dataclass
class AccountTransferTransaction:
    """Links the entries of a transfer between two portfolio accounts."""

    transaction_id: str
    source_asset_entry_id: str
    source_capital_entry_id: str
    target_asset_entry_id: str
    target_capital_entry_id: str
    fee_asset_entry_id: Optional[str] = None
    fee_income_entry_id: Optional[str] = None


@dataclass
class TradeTransaction:
    """Links the entries of a buy or sell of a base asset priced in a quote asset."""

    transaction_id: str
    base_asset_entry_id: str
    base_income_entry_id: str
    quote_asset_entry_id: str
    quote_income_entry_id: str
    fee_asset_entry_id: Optional[str] = None
    fee_income_entry_id: Optional[str] = None


@dataclass
class IncomeTransaction:
    """Links the entries of an income receipt or an expense."""

    transaction_id: str
    asset_entry_id: str
    income_entry_id: str


# Entry roles per linking record; role "x" is stored in column "x_entry_id".
LINK_ROLES: dict[TransactionKind, tuple[str, ...]] = {
    TransactionKind.CAPITAL: ("asset", "capital", "fee_asset", "fee_income"),
    TransactionKind.TRANSFER: (
        "source_asset",
        "source_capital",
        "target_asset",
        "target_capital",
        "fee_asset",
        "fee_income",
    ),
    TransactionKind.TRADE: (
        "base_asset",
        "base_income",
        "quote_asset",
        "quote_income",
        "fee_asset",
        "fee_income",
    ),
    TransactionKind.INCOME: ("asset", "income"),
}

LinkRecord = (
    CapitalTransaction
    | AccountTransferTransaction
    | TradeTransaction
    | IncomeTransaction
)
