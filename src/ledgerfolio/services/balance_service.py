"""Balance cache maintenance."""

import logging
from decimal import Decimal
from typing import Iterable

from ledgerfolio.domain.models import Balance
from ledgerfolio.repositories.protocols import UnitOfWork

logger = logging.getLogger(__name__)


class BalanceService:
    """
    Keeps the per (account, asset) balance cache equal to its asset ledger.

    Each cached value is recomputed from the asset-kind ledger's entries
    inside the same unit of work that wrote or deleted those entries, so a
    rolled-back composer never leaves a drifted balance behind.
    """

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    def get_balance(self, portfolio_account_id: str, asset_id: str) -> Decimal:
        """Return the cached balance, creating a zero row the first time."""
        with self._uow:
            balance = self._uow.balances.get_or_create(portfolio_account_id, asset_id)
        return balance.balance

    def list_balances(self, user_id: str) -> list[Balance]:
        """Return every cached balance of the user's accounts."""
        return self._uow.balances.list_by_user(user_id)

    def rebuild_balances(self, user_id: str) -> list[Balance]:
        """Recompute every (account, asset) pair of a user from the ledgers."""
        with self._uow:
            balances = self.recompute_user(user_id)
        logger.info("Rebuilt %d balances for user %s", len(balances), user_id)
        return balances

    def refresh(self, pairs: Iterable[tuple[str, str]]) -> list[Balance]:
        """Recompute the given pairs. Runs inside the caller's unit of work."""
        refreshed = []
        for account_id, asset_id in sorted(set(pairs)):
            total = self._uow.balances.sum_asset_ledger(account_id, asset_id)
            refreshed.append(self._uow.balances.set(account_id, asset_id, total))
        return refreshed

    def recompute_user(self, user_id: str) -> list[Balance]:
        """Recompute every pair of a user. Runs inside the caller's unit of work."""
        accounts = self._uow.accounts.list_by_user(user_id)
        assets = self._uow.assets.list_by_user(user_id)
        return self.refresh((account.id, asset.id) for account in accounts for asset in assets)
