"""View models for service outputs."""

from ledgerfolio.domain.views.ledger import (
    EntryLine,
    TransactionDetail,
    AuditTrailLine,
)

__all__ = [
    "EntryLine",
    "TransactionDetail",
    "AuditTrailLine",
]
