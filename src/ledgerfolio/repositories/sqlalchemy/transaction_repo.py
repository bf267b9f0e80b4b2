"""SQLAlchemy implementation of TransactionRepository."""

from datetime import date
from typing import Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session

from ledgerfolio.domain.models import (
    Transaction,
    TransactionKind,
    CapitalTransaction,
    AccountTransferTransaction,
    TradeTransaction,
    IncomeTransaction,
    LinkRecord,
    LINK_ROLES,
)
from ledgerfolio.repositories.sqlalchemy.orm_models import (
    TransactionORM,
    LedgerORM,
    LedgerEntryORM,
    CapitalTransactionORM,
    AccountTransferTransactionORM,
    TradeTransactionORM,
    IncomeTransactionORM,
)

LINK_MODELS = {
    TransactionKind.CAPITAL: (CapitalTransactionORM, CapitalTransaction),
    TransactionKind.TRANSFER: (AccountTransferTransactionORM, AccountTransferTransaction),
    TransactionKind.TRADE: (TradeTransactionORM, TradeTransaction),
    TransactionKind.INCOME: (IncomeTransactionORM, IncomeTransaction),
}


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction header and linking record repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new header."""
        orm_txn = TransactionORM(
            id=transaction.id,
            user_id=transaction.user_id,
            title=transaction.title,
            description=transaction.description,
            date=transaction.date,
        )
        self._db.add(orm_txn)
        self._db.flush()
        return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve header by ID."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.id == transaction_id
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def get_many(self, transaction_ids: list[str]) -> dict[str, Transaction]:
        """Retrieve headers by ID."""
        if not transaction_ids:
            return {}
        orm_txns = self._db.query(TransactionORM).filter(
            TransactionORM.id.in_(transaction_ids)
        ).all()
        return {t.id: self._to_domain(t) for t in orm_txns}

    def update(self, transaction: Transaction) -> Transaction:
        """Update title, description and date of a header."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.id == transaction.id
        ).first()
        if not orm_txn:
            raise ValueError(f"Transaction not found: {transaction.id}")
        orm_txn.title = transaction.title
        orm_txn.description = transaction.description
        orm_txn.date = transaction.date
        self._db.flush()
        return self._to_domain(orm_txn)

    def delete(self, transaction_id: str) -> None:
        """Delete a header; entries and the linking record go by cascade."""
        self._db.query(TransactionORM).filter(
            TransactionORM.id == transaction_id
        ).delete(synchronize_session=False)
        self._db.expire_all()

    def list_by_user(
        self,
        user_id: str,
        kind: Optional[TransactionKind] = None,
        account_id: Optional[str] = None,
        asset_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """List a user's headers matching the filters, newest first."""
        query = self._db.query(TransactionORM).filter(TransactionORM.user_id == user_id)

        if kind is not None:
            link_model = LINK_MODELS[TransactionKind(kind)][0]
            query = query.filter(
                exists().where(link_model.transaction_id == TransactionORM.id)
            )
        if account_id is not None or asset_id is not None:
            touches = (
                exists()
                .where(LedgerEntryORM.transaction_id == TransactionORM.id)
                .where(LedgerORM.id == LedgerEntryORM.ledger_id)
            )
            if account_id is not None:
                touches = touches.where(LedgerORM.portfolio_account_id == account_id)
            if asset_id is not None:
                touches = touches.where(LedgerORM.asset_id == asset_id)
            query = query.filter(touches)
        if start_date:
            query = query.filter(TransactionORM.date >= start_date)
        if end_date:
            query = query.filter(TransactionORM.date <= end_date)

        query = query.order_by(TransactionORM.date.desc(), TransactionORM.created_at.desc())
        return [self._to_domain(t) for t in query.all()]

    def add_link(self, kind: TransactionKind, transaction_id: str, entry_ids: dict[str, str]) -> LinkRecord:
        """Insert the linking record mapping roles to entry IDs."""
        kind = TransactionKind(kind)
        orm_model, _ = LINK_MODELS[kind]
        unknown = set(entry_ids) - set(LINK_ROLES[kind])
        if unknown:
            raise ValueError(f"Unknown {kind.value} roles: {sorted(unknown)}")
        orm_link = orm_model(
            transaction_id=transaction_id,
            **{f"{role}_entry_id": entry_id for role, entry_id in entry_ids.items()},
        )
        self._db.add(orm_link)
        self._db.flush()
        return self._link_to_domain(kind, orm_link)

    def get_link(self, transaction_id: str) -> Optional[tuple[TransactionKind, LinkRecord]]:
        """Retrieve the linking record of a header and its kind."""
        for kind, (orm_model, _) in LINK_MODELS.items():
            orm_link = self._db.query(orm_model).filter(
                orm_model.transaction_id == transaction_id
            ).first()
            if orm_link:
                return kind, self._link_to_domain(kind, orm_link)
        return None

    def kinds_for(self, transaction_ids: list[str]) -> dict[str, TransactionKind]:
        """Map header IDs to the kind of their linking record."""
        kinds: dict[str, TransactionKind] = {}
        if not transaction_ids:
            return kinds
        for kind, (orm_model, _) in LINK_MODELS.items():
            rows = self._db.query(orm_model.transaction_id).filter(
                orm_model.transaction_id.in_(transaction_ids)
            ).all()
            kinds.update({row[0]: kind for row in rows})
        return kinds

    def delete_unlinked(self, user_id: str) -> list[str]:
        """
        Delete the user's headers that lost their linking record.

        Happens when an account or asset deletion cascaded away one side
        of a group; the surviving entries of that group go with the header.
        """
        query = self._db.query(TransactionORM.id).filter(TransactionORM.user_id == user_id)
        for orm_model, _ in LINK_MODELS.values():
            query = query.filter(~exists().where(orm_model.transaction_id == TransactionORM.id))
        orphan_ids = [row[0] for row in query.all()]
        if orphan_ids:
            self._db.query(TransactionORM).filter(
                TransactionORM.id.in_(orphan_ids)
            ).delete(synchronize_session=False)
            self._db.expire_all()
        return orphan_ids

    @staticmethod
    def _link_to_domain(kind: TransactionKind, orm) -> LinkRecord:
        _, link_cls = LINK_MODELS[kind]
        return link_cls(
            transaction_id=orm.transaction_id,
            **{f"{role}_entry_id": getattr(orm, f"{role}_entry_id") for role in LINK_ROLES[kind]},
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            user_id=orm.user_id,
            title=orm.title,
            date=orm.date,
            description=orm.description,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
