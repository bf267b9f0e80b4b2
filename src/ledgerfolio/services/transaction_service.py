"""Transaction service: posts, edits, deletes and reads entry groups."""

import logging
import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerfolio.core.decimal_utils import ZERO, check_precision, exact_sum, to_decimal
from ledgerfolio.core.exceptions import NotFoundError, ValidationError
from ledgerfolio.domain.models import (
    Asset,
    LedgerEntry,
    LedgerType,
    Transaction,
    TransactionKind,
    LINK_ROLES,
)
from ledgerfolio.domain.views import AuditTrailLine, EntryLine, TransactionDetail
from ledgerfolio.repositories.protocols import UnitOfWork
from ledgerfolio.services.balance_service import BalanceService
from ledgerfolio.services.entry_plans import (
    CapitalInput,
    IncomeInput,
    PlanLine,
    TradeInput,
    TransactionInput,
    TransferInput,
    build_plan,
    check_balanced,
)
from ledgerfolio.services.ledger_directory import LedgerDirectory
from ledgerfolio.services.ownership import OwnershipGuard

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Service for composing balanced entry groups.

    Every composer runs the same posting routine over a different entry
    plan: check ownership and precision, resolve ledgers, insert the header
    and its entries, link them, refresh the balance cache, commit. Any
    failure rolls the whole group back.

    Editing deletes the old entries and posts a fresh plan under the same
    transaction id, in one unit of work.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ownership: Optional[OwnershipGuard] = None,
        ledger_directory: Optional[LedgerDirectory] = None,
        balance_service: Optional[BalanceService] = None,
    ):
        self._uow = uow
        self._ownership = ownership or OwnershipGuard(uow.accounts, uow.assets, uow.transactions)
        self._ledgers = ledger_directory or LedgerDirectory(
            uow.ledgers, uow.balances, uow.accounts, uow.assets
        )
        self._balances = balance_service or BalanceService(uow)

    # =========================================================================
    # Composers
    # =========================================================================

    def create_capital(self, user_id: str, data: CapitalInput) -> TransactionDetail:
        """Record a contribution or drawing."""
        return self._create(user_id, data)

    def create_income(self, user_id: str, data: IncomeInput) -> TransactionDetail:
        """Record an income receipt. A negative amount records an outflow."""
        return self._create(user_id, data)

    def create_expense(self, user_id: str, data: IncomeInput) -> TransactionDetail:
        """Record an expense; ``data.amount`` is the positive amount spent."""
        return self._create(user_id, self._as_expense(data))

    def create_transfer(self, user_id: str, data: TransferInput) -> TransactionDetail:
        """Move an asset from one portfolio account to another."""
        return self._create(user_id, data)

    def create_trade(self, user_id: str, data: TradeInput) -> TransactionDetail:
        """Buy or sell a base asset for a quote asset."""
        return self._create(user_id, data)

    def update_capital(self, user_id: str, transaction_id: str, data: CapitalInput) -> TransactionDetail:
        return self._update(user_id, transaction_id, data)

    def update_income(self, user_id: str, transaction_id: str, data: IncomeInput) -> TransactionDetail:
        return self._update(user_id, transaction_id, data)

    def update_expense(self, user_id: str, transaction_id: str, data: IncomeInput) -> TransactionDetail:
        return self._update(user_id, transaction_id, self._as_expense(data))

    def update_transfer(self, user_id: str, transaction_id: str, data: TransferInput) -> TransactionDetail:
        return self._update(user_id, transaction_id, data)

    def update_trade(self, user_id: str, transaction_id: str, data: TradeInput) -> TransactionDetail:
        return self._update(user_id, transaction_id, data)

    def delete_transaction(self, user_id: str, transaction_id: str) -> None:
        """
        Delete a transaction of any kind.

        Removing the header cascades to its entries and linking record.
        Ledgers stay, even when left without entries.
        """
        with self._uow:
            self._ownership.require_transaction(user_id, transaction_id)
            pairs = self._uow.entries.pairs_for_transaction(transaction_id)
            self._uow.transactions.delete(transaction_id)
            self._balances.refresh(pairs)
        logger.info("Deleted transaction %s", transaction_id)

    # =========================================================================
    # Reads
    # =========================================================================

    def get_transaction(self, user_id: str, transaction_id: str) -> TransactionDetail:
        """Return a header with every entry of its group keyed by role."""
        header = self._ownership.require_transaction(user_id, transaction_id)
        return self._detail(header)

    def list_transactions(
        self,
        user_id: str,
        kind: Optional[TransactionKind] = None,
        account_id: Optional[str] = None,
        asset_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionDetail]:
        """List a user's transactions, newest first."""
        if account_id:
            self._ownership.require_account(user_id, account_id)
        if asset_id:
            self._ownership.require_asset(user_id, asset_id)
        headers = self._uow.transactions.list_by_user(
            user_id,
            kind=kind,
            account_id=account_id,
            asset_id=asset_id,
            start_date=start_date,
            end_date=end_date,
        )
        return [self._detail(header) for header in headers]

    def audit_trail(self, user_id: str, account_id: str, asset_id: str) -> list[AuditTrailLine]:
        """
        Every asset-ledger entry behind balance(account, asset), oldest first.

        The last line's running balance equals the cached balance.
        """
        self._ownership.require_account(user_id, account_id)
        self._ownership.require_asset(user_id, asset_id)
        ledger = self._uow.ledgers.get(account_id, asset_id, LedgerType.ASSET)
        if ledger is None:
            return []

        entries = self._uow.entries.list_by_ledger(ledger.id)
        transaction_ids = list({e.transaction_id for e in entries})
        headers = self._uow.transactions.get_many(transaction_ids)
        kinds = self._uow.transactions.kinds_for(transaction_ids)

        lines = []
        running = ZERO
        for entry in entries:
            running = exact_sum([running, entry.amount])
            lines.append(
                AuditTrailLine(
                    transaction=headers[entry.transaction_id],
                    kind=kinds.get(entry.transaction_id),
                    entry_id=entry.id,
                    amount=entry.amount,
                    running_balance=running,
                )
            )
        return lines

    # =========================================================================
    # Posting routine
    # =========================================================================

    def _create(self, user_id: str, data: TransactionInput) -> TransactionDetail:
        transaction_id = str(uuid.uuid4())
        with self._uow:
            kind, lines = self._prepare(user_id, data)
            header = self._uow.transactions.create(
                Transaction(
                    id=transaction_id,
                    user_id=user_id,
                    title=data.title,
                    date=data.date,
                    description=data.description,
                )
            )
            self._post(kind, header, lines)
        logger.info("Created %s transaction %s", kind.value, transaction_id)
        return self.get_transaction(user_id, transaction_id)

    def _update(self, user_id: str, transaction_id: str, data: TransactionInput) -> TransactionDetail:
        with self._uow:
            existing = self._ownership.require_transaction(user_id, transaction_id)
            kind, lines = self._prepare(user_id, data)
            link = self._uow.transactions.get_link(transaction_id)
            if link is None:
                raise NotFoundError("Transaction", transaction_id)
            if link[0] != kind:
                raise ValidationError(
                    f"Transaction {transaction_id} is a {link[0].value} transaction, not {kind.value}",
                    field="kind",
                )

            old_pairs = self._uow.entries.pairs_for_transaction(transaction_id)
            self._uow.entries.delete_by_transaction(transaction_id)
            header = self._uow.transactions.update(
                replace(existing, title=data.title, date=data.date, description=data.description)
            )
            self._post(kind, header, lines, extra_pairs=old_pairs)
        logger.info("Updated %s transaction %s", kind.value, transaction_id)
        return self.get_transaction(user_id, transaction_id)

    def _post(
        self,
        kind: TransactionKind,
        header: Transaction,
        lines: list[PlanLine],
        extra_pairs: Optional[set[tuple[str, str]]] = None,
    ) -> None:
        """Write a checked plan under an existing header. Caller owns the unit of work."""
        ledgers = {
            line.role: self._ledgers.resolve_ledger(line.portfolio_account_id, line.asset_id, line.ledger_type)
            for line in lines
        }
        entries = self._uow.entries.add_many(
            [
                LedgerEntry(
                    id=str(uuid.uuid4()),
                    ledger_id=ledgers[line.role].id,
                    transaction_id=header.id,
                    amount=line.amount,
                )
                for line in lines
            ]
        )
        self._uow.transactions.add_link(
            kind,
            header.id,
            {line.role: entry.id for line, entry in zip(lines, entries)},
        )
        pairs = {(line.portfolio_account_id, line.asset_id) for line in lines}
        self._balances.refresh(pairs | (extra_pairs or set()))

    def _prepare(self, user_id: str, data: TransactionInput) -> tuple[TransactionKind, list[PlanLine]]:
        """Validate an input and return its checked plan. Writes nothing."""
        if not data.title or not data.title.strip():
            raise ValidationError("Title is required", field="title")

        if isinstance(data, CapitalInput):
            self._ownership.require_account(user_id, data.portfolio_account_id)
            asset = self._ownership.require_asset(user_id, data.asset_id)
            data = replace(
                data,
                amount=self._positive(data.amount, asset, "amount"),
                fee=self._fee(data.fee, asset),
            )
        elif isinstance(data, IncomeInput):
            self._ownership.require_account(user_id, data.portfolio_account_id)
            asset = self._ownership.require_asset(user_id, data.asset_id)
            amount = check_precision(to_decimal(data.amount, "amount"), asset.precision, "amount")
            if amount == ZERO:
                raise ValidationError("amount must not be zero", field="amount")
            data = replace(data, amount=amount)
        elif isinstance(data, TransferInput):
            if data.source_account_id == data.target_account_id:
                raise ValidationError("Source and target accounts must differ", field="target_account_id")
            self._ownership.require_account(user_id, data.source_account_id)
            self._ownership.require_account(user_id, data.target_account_id)
            asset = self._ownership.require_asset(user_id, data.asset_id)
            amount = self._positive(data.amount, asset, "amount")
            fee = self._fee(data.fee, asset)
            if data.fee_inclusive and fee >= amount:
                raise ValidationError("fee must be less than amount for a fee-inclusive transfer", field="fee")
            data = replace(data, amount=amount, fee=fee)
        elif isinstance(data, TradeInput):
            if data.base_asset_id == data.quote_asset_id:
                raise ValidationError("Base and quote assets must differ", field="quote_asset_id")
            self._ownership.require_account(user_id, data.portfolio_account_id)
            base = self._ownership.require_asset(user_id, data.base_asset_id)
            quote = self._ownership.require_asset(user_id, data.quote_asset_id)
            fee_asset = base if data.fee_asset_id == base.id else quote
            data = replace(
                data,
                base_amount=self._positive(data.base_amount, base, "base_amount"),
                quote_amount=self._positive(data.quote_amount, quote, "quote_amount"),
                fee=self._fee(data.fee, fee_asset),
            )

        kind, lines = build_plan(data)
        check_balanced(kind, lines)
        return kind, lines

    @staticmethod
    def _positive(value, asset: Asset, field: str) -> Decimal:
        amount = check_precision(to_decimal(value, field), asset.precision, field)
        if amount <= ZERO:
            raise ValidationError(f"{field} must be greater than zero", field=field)
        return amount

    @staticmethod
    def _fee(value, asset: Asset) -> Decimal:
        fee = check_precision(to_decimal(value if value is not None else ZERO, "fee"), asset.precision, "fee")
        if fee < ZERO:
            raise ValidationError("fee must not be negative", field="fee")
        return fee

    @staticmethod
    def _as_expense(data: IncomeInput) -> IncomeInput:
        amount = to_decimal(data.amount, "amount")
        if amount <= ZERO:
            raise ValidationError("amount must be greater than zero", field="amount")
        return replace(data, amount=amount.copy_negate())

    def _detail(self, header: Transaction) -> TransactionDetail:
        link = self._uow.transactions.get_link(header.id)
        if link is None:
            raise NotFoundError("Transaction", header.id)
        kind, record = link

        entries = {e.id: e for e in self._uow.entries.list_by_transaction(header.id)}
        ledgers = self._uow.ledgers.get_many([e.ledger_id for e in entries.values()])

        lines: dict[str, EntryLine] = {}
        for role in LINK_ROLES[kind]:
            entry_id = getattr(record, f"{role}_entry_id")
            entry = entries.get(entry_id) if entry_id else None
            if entry is None:
                continue
            ledger = ledgers[entry.ledger_id]
            lines[role] = EntryLine(
                role=role,
                entry_id=entry.id,
                ledger_id=ledger.id,
                portfolio_account_id=ledger.portfolio_account_id,
                asset_id=ledger.asset_id,
                ledger_type=ledger.type,
                amount=entry.amount,
            )
        return TransactionDetail(transaction=header, kind=kind, entries=lines)
