"""SQLAlchemy implementations of LedgerRepository and EntryRepository."""

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ledgerfolio.domain.models import Ledger, LedgerEntry, LedgerType
from ledgerfolio.repositories.sqlalchemy.orm_models import (
    LedgerORM,
    LedgerEntryORM,
    TransactionORM,
)

logger = logging.getLogger(__name__)


class SqlAlchemyLedgerRepository:
    """SQLAlchemy-backed ledger repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, portfolio_account_id: str, asset_id: str, ledger_type: LedgerType) -> Optional[Ledger]:
        """Retrieve the ledger for a triple, if it exists."""
        orm_ledger = self._db.query(LedgerORM).filter(
            LedgerORM.portfolio_account_id == portfolio_account_id,
            LedgerORM.asset_id == asset_id,
            LedgerORM.type == LedgerType(ledger_type),
        ).first()
        return self._to_domain(orm_ledger) if orm_ledger else None

    def get_or_create(self, portfolio_account_id: str, asset_id: str, ledger_type: LedgerType) -> Ledger:
        """
        Return the ledger for a triple, creating it if needed.

        Select; if absent insert inside a SAVEPOINT; if the insert loses a
        race on the unique triple, re-select the winner. An integrity error
        that leaves no row behind is not that race and is re-raised.
        """
        existing = self.get(portfolio_account_id, asset_id, ledger_type)
        if existing:
            return existing

        orm_ledger = LedgerORM(
            id=str(uuid.uuid4()),
            portfolio_account_id=portfolio_account_id,
            asset_id=asset_id,
            type=LedgerType(ledger_type),
        )
        try:
            with self._db.begin_nested():
                self._db.add(orm_ledger)
        except IntegrityError:
            existing = self.get(portfolio_account_id, asset_id, ledger_type)
            if existing is None:
                raise
            logger.debug(
                "Ledger %s/%s/%s created concurrently; reusing %s",
                portfolio_account_id, asset_id, ledger_type, existing.id,
            )
            return existing
        return self._to_domain(orm_ledger)

    def get_many(self, ledger_ids: list[str]) -> dict[str, Ledger]:
        """Retrieve ledgers by ID."""
        if not ledger_ids:
            return {}
        orm_ledgers = self._db.query(LedgerORM).filter(LedgerORM.id.in_(ledger_ids)).all()
        return {l.id: self._to_domain(l) for l in orm_ledgers}

    @staticmethod
    def _to_domain(orm: LedgerORM) -> Ledger:
        """Convert ORM model to domain model."""
        return Ledger(
            id=orm.id,
            portfolio_account_id=orm.portfolio_account_id,
            asset_id=orm.asset_id,
            type=orm.type,
            created_at=orm.created_at,
        )


class SqlAlchemyEntryRepository:
    """SQLAlchemy-backed ledger entry repository. Entries are never updated."""

    def __init__(self, db: Session):
        self._db = db

    def add_many(self, entries: list[LedgerEntry]) -> list[LedgerEntry]:
        """Insert entries."""
        orm_entries = [
            LedgerEntryORM(
                id=e.id,
                ledger_id=e.ledger_id,
                transaction_id=e.transaction_id,
                amount=e.amount,
            )
            for e in entries
        ]
        self._db.add_all(orm_entries)
        self._db.flush()
        return [self._to_domain(e) for e in orm_entries]

    def list_by_transaction(self, transaction_id: str) -> list[LedgerEntry]:
        """List every entry of one transaction."""
        orm_entries = self._db.query(LedgerEntryORM).filter(
            LedgerEntryORM.transaction_id == transaction_id
        ).all()
        return [self._to_domain(e) for e in orm_entries]

    def list_by_ledger(self, ledger_id: str) -> list[LedgerEntry]:
        """List every entry of one ledger in transaction date order."""
        orm_entries = (
            self._db.query(LedgerEntryORM)
            .join(TransactionORM, TransactionORM.id == LedgerEntryORM.transaction_id)
            .filter(LedgerEntryORM.ledger_id == ledger_id)
            .order_by(TransactionORM.date, TransactionORM.created_at, LedgerEntryORM.created_at)
            .all()
        )
        return [self._to_domain(e) for e in orm_entries]

    def delete_by_transaction(self, transaction_id: str) -> None:
        """Delete every entry of one transaction; its linking record goes by cascade."""
        self._db.query(LedgerEntryORM).filter(
            LedgerEntryORM.transaction_id == transaction_id
        ).delete(synchronize_session=False)
        self._db.expire_all()

    def pairs_for_transaction(self, transaction_id: str) -> set[tuple[str, str]]:
        """Return the (account, asset) pairs a transaction's entries touch."""
        rows = (
            self._db.query(LedgerORM.portfolio_account_id, LedgerORM.asset_id)
            .join(LedgerEntryORM, LedgerEntryORM.ledger_id == LedgerORM.id)
            .filter(LedgerEntryORM.transaction_id == transaction_id)
            .distinct()
            .all()
        )
        return {(row[0], row[1]) for row in rows}

    @staticmethod
    def _to_domain(orm: LedgerEntryORM) -> LedgerEntry:
        """Convert ORM model to domain model."""
        return LedgerEntry(
            id=orm.id,
            ledger_id=orm.ledger_id,
            transaction_id=orm.transaction_id,
            amount=orm.amount,
            created_at=orm.created_at,
        )
