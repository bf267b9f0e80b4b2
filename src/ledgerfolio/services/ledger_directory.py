"""Ledger directory: resolves the ledgers entries attach to."""

import logging

from ledgerfolio.domain.models import Ledger, LedgerType
from ledgerfolio.repositories.protocols import (
    AssetRepository,
    BalanceRepository,
    LedgerRepository,
    PortfolioAccountRepository,
)

logger = logging.getLogger(__name__)


class LedgerDirectory:
    """
    Finds or creates (account, asset, type) ledgers.

    Performs no ownership checks: callers prove the account and asset belong
    to the same user before calling in.
    """

    def __init__(
        self,
        ledger_repo: LedgerRepository,
        balance_repo: BalanceRepository,
        account_repo: PortfolioAccountRepository,
        asset_repo: AssetRepository,
    ):
        self._ledger_repo = ledger_repo
        self._balance_repo = balance_repo
        self._account_repo = account_repo
        self._asset_repo = asset_repo

    def resolve_ledger(self, portfolio_account_id: str, asset_id: str, ledger_type: LedgerType) -> Ledger:
        """Return the ledger for a triple; concurrent first calls share one row."""
        return self._ledger_repo.get_or_create(portfolio_account_id, asset_id, ledger_type)

    def init_ledgers_for_account(self, user_id: str, account_id: str) -> int:
        """Create every ledger kind and the balance row for the account and each of the user's assets."""
        created = 0
        for asset in self._asset_repo.list_by_user(user_id):
            created += self._init_pair(account_id, asset.id)
        return created

    def init_ledgers_for_asset(self, user_id: str, asset_id: str) -> int:
        """Create every ledger kind and the balance row for the asset in each of the user's accounts."""
        created = 0
        for account in self._account_repo.list_by_user(user_id):
            created += self._init_pair(account.id, asset_id)
        return created

    def _init_pair(self, account_id: str, asset_id: str) -> int:
        """Best effort: a failure on one kind is logged and the rest still run."""
        resolved = 0
        for ledger_type in LedgerType:
            try:
                self._ledger_repo.get_or_create(account_id, asset_id, ledger_type)
                resolved += 1
            except Exception:
                logger.exception(
                    "Could not create %s ledger for account %s asset %s",
                    ledger_type.value, account_id, asset_id,
                )
        try:
            self._balance_repo.get_or_create(account_id, asset_id)
        except Exception:
            logger.exception("Could not create balance for account %s asset %s", account_id, asset_id)
        return resolved
