"""Ownership checks scoping every read and write to the requesting user."""

from ledgerfolio.core.exceptions import NotFoundError, OwnershipError
from ledgerfolio.domain.models import Asset, PortfolioAccount, Transaction
from ledgerfolio.repositories.protocols import (
    AssetRepository,
    PortfolioAccountRepository,
    TransactionRepository,
)


class OwnershipGuard:
    """
    Rejects references to another user's accounts, assets or transactions.

    ``require_*`` raise NotFoundError for unknown IDs and OwnershipError for
    IDs that exist but belong to someone else.
    """

    def __init__(
        self,
        account_repo: PortfolioAccountRepository,
        asset_repo: AssetRepository,
        transaction_repo: TransactionRepository,
    ):
        self._account_repo = account_repo
        self._asset_repo = asset_repo
        self._transaction_repo = transaction_repo

    def account_belongs_to_user(self, account_id: str, user_id: str) -> bool:
        account = self._account_repo.get_by_id(account_id)
        return account is not None and account.user_id == user_id

    def asset_belongs_to_user(self, asset_id: str, user_id: str) -> bool:
        asset = self._asset_repo.get_by_id(asset_id)
        return asset is not None and asset.user_id == user_id

    def require_account(self, user_id: str, account_id: str) -> PortfolioAccount:
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Portfolio account", account_id)
        if account.user_id != user_id:
            raise OwnershipError("Portfolio account", account_id)
        return account

    def require_asset(self, user_id: str, asset_id: str) -> Asset:
        asset = self._asset_repo.get_by_id(asset_id)
        if not asset:
            raise NotFoundError("Asset", asset_id)
        if asset.user_id != user_id:
            raise OwnershipError("Asset", asset_id)
        return asset

    def require_transaction(self, user_id: str, transaction_id: str) -> Transaction:
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        if transaction.user_id != user_id:
            raise OwnershipError("Transaction", transaction_id)
        return transaction
