"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    Integer,
    SmallInteger,
    Date,
    DateTime,
    Boolean,
    Text,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
    Index,
    Enum as SqlEnum,
)
from sqlalchemy.types import TypeDecorator

from ledgerfolio.core.decimal_utils import MAX_DIGITS, format_decimal
from ledgerfolio.core.timezone import now_utc
from ledgerfolio.domain.models.enums import LedgerType
from ledgerfolio.repositories.sqlalchemy.database import Base


class DecimalString(TypeDecorator):
    """
    Decimal persisted as an exact decimal string.

    SQLite has no native NUMERIC(100, 20); storing text keeps every digit.
    Sums are computed in Python with Decimal, never in SQL.
    """

    impl = String(MAX_DIGITS + 2)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return format_decimal(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class PortfolioAccountORM(Base):
    """SQLAlchemy model for PortfolioAccount."""

    __tablename__ = "portfolio_accounts"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_portfolio_account_user_name"),
        CheckConstraint("length(name) > 0", name="ck_portfolio_account_name"),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)


class AssetORM(Base):
    """SQLAlchemy model for Asset."""

    __tablename__ = "assets"
    __table_args__ = (
        UniqueConstraint("user_id", "ticker", name="uq_asset_user_ticker"),
        UniqueConstraint("user_id", "name", name="uq_asset_user_name"),
        UniqueConstraint("user_id", "symbol", name="uq_asset_user_symbol"),
        CheckConstraint("length(ticker) > 0", name="ck_asset_ticker"),
        CheckConstraint("length(name) > 0", name="ck_asset_name"),
        CheckConstraint("precision >= 0 AND precision <= 20", name="ck_asset_precision"),
        CheckConstraint(
            "price_precision >= 0 AND price_precision <= 20",
            name="ck_asset_price_precision",
        ),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    ticker = Column(String(10), nullable=False)
    name = Column(String(50), nullable=False)
    symbol = Column(String(10), nullable=True)
    precision = Column(SmallInteger, nullable=False, default=0)
    price_precision = Column(SmallInteger, nullable=False, default=0)
    is_currency = Column(Boolean, nullable=False, default=False)
    external_ticker = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)


class AccountingCurrencyORM(Base):
    """SQLAlchemy model for AccountingCurrency (one row per user)."""

    __tablename__ = "accounting_currencies"

    user_id = Column(String(255), primary_key=True)
    asset_id = Column(String(36), ForeignKey("assets.id", ondelete="SET NULL"), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)


class TransactionORM(Base):
    """SQLAlchemy model for the Transaction header."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)


class LedgerORM(Base):
    """SQLAlchemy model for Ledger (one T-account per account/asset/type)."""

    __tablename__ = "ledgers"
    __table_args__ = (
        UniqueConstraint(
            "portfolio_account_id",
            "asset_id",
            "type",
            name="uq_ledger_account_asset_type",
        ),
    )

    id = Column(String(36), primary_key=True)
    portfolio_account_id = Column(
        String(36),
        ForeignKey("portfolio_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    asset_id = Column(String(36), ForeignKey("assets.id", ondelete="CASCADE"), nullable=False)
    type = Column(
        SqlEnum(LedgerType, name="ledger_type", values_callable=_enum_values),
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


class LedgerEntryORM(Base):
    """SQLAlchemy model for LedgerEntry."""

    __tablename__ = "ledger_entries"

    id = Column(String(36), primary_key=True)
    ledger_id = Column(
        String(36),
        ForeignKey("ledgers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    transaction_id = Column(
        String(36),
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(DecimalString, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


def _required_entry(name: str) -> Column:
    return Column(
        name,
        String(36),
        ForeignKey("ledger_entries.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )


def _optional_entry(name: str) -> Column:
    return Column(
        name,
        String(36),
        ForeignKey("ledger_entries.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )


def _transaction_ref() -> Column:
    return Column(
        String(36),
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )


class CapitalTransactionORM(Base):
    """Linking record for contributions and drawings."""

    __tablename__ = "capital_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = _transaction_ref()
    asset_entry_id = _required_entry("asset_entry_id")
    capital_entry_id = _required_entry("capital_entry_id")
    fee_asset_entry_id = _optional_entry("fee_asset_entry_id")
    fee_income_entry_id = _optional_entry("fee_income_entry_id")


class AccountTransferTransactionORM(Base):
    """Linking record for transfers between portfolio accounts."""

    __tablename__ = "account_transfer_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = _transaction_ref()
    source_asset_entry_id = _required_entry("source_asset_entry_id")
    source_capital_entry_id = _required_entry("source_capital_entry_id")
    target_asset_entry_id = _required_entry("target_asset_entry_id")
    target_capital_entry_id = _required_entry("target_capital_entry_id")
    fee_asset_entry_id = _optional_entry("fee_asset_entry_id")
    fee_income_entry_id = _optional_entry("fee_income_entry_id")


class TradeTransactionORM(Base):
    """Linking record for trades."""

    __tablename__ = "trade_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = _transaction_ref()
    base_asset_entry_id = _required_entry("base_asset_entry_id")
    base_income_entry_id = _required_entry("base_income_entry_id")
    quote_asset_entry_id = _required_entry("quote_asset_entry_id")
    quote_income_entry_id = _required_entry("quote_income_entry_id")
    fee_asset_entry_id = _optional_entry("fee_asset_entry_id")
    fee_income_entry_id = _optional_entry("fee_income_entry_id")


class IncomeTransactionORM(Base):
    """Linking record for income and expenses."""

    __tablename__ = "income_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = _transaction_ref()
    asset_entry_id = _required_entry("asset_entry_id")
    income_entry_id = _required_entry("income_entry_id")


class BalanceORM(Base):
    """SQLAlchemy model for Balance (cached asset-ledger total)."""

    __tablename__ = "balances"

    portfolio_account_id = Column(
        String(36),
        ForeignKey("portfolio_accounts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    asset_id = Column(String(36), ForeignKey("assets.id", ondelete="CASCADE"), primary_key=True)
    balance = Column(DecimalString, nullable=False, default=Decimal("0"))
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)


class PriceORM(Base):
    """SQLAlchemy model for Price."""

    __tablename__ = "prices"
    __table_args__ = (
        UniqueConstraint("asset_id", "quote_asset_id", "date", name="uq_price_pair_date"),
        Index("ix_prices_user_pair", "user_id", "asset_id", "quote_asset_id"),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(255), nullable=False)
    asset_id = Column(String(36), ForeignKey("assets.id", ondelete="CASCADE"), nullable=False)
    quote_asset_id = Column(
        String(36),
        ForeignKey("assets.id", ondelete="CASCADE"),
        nullable=False,
    )
    date = Column(Date, nullable=False)
    price = Column(DecimalString, nullable=False)
    is_auto_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
