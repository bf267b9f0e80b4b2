"""
Integration tests for OwnershipGuard.
"""

import pytest

from ledgerfolio.core.exceptions import NotFoundError, OwnershipError
from ledgerfolio.services import OwnershipGuard

from tests.conftest import OTHER_USER_ID, USER_ID


@pytest.fixture
def guard(uow) -> OwnershipGuard:
    return OwnershipGuard(uow.accounts, uow.assets, uow.transactions)


class TestBelongsToUser:
    """Tests for the boolean ownership checks."""

    def test_own_account(self, guard, make_account):
        account = make_account()
        assert guard.account_belongs_to_user(account.id, USER_ID) is True

    def test_foreign_account(self, guard, make_account):
        account = make_account(user_id=OTHER_USER_ID)
        assert guard.account_belongs_to_user(account.id, USER_ID) is False

    def test_unknown_account(self, guard):
        assert guard.account_belongs_to_user("missing", USER_ID) is False

    def test_own_asset(self, guard, make_asset):
        asset = make_asset()
        assert guard.asset_belongs_to_user(asset.id, USER_ID) is True

    def test_foreign_asset(self, guard, make_asset):
        asset = make_asset(user_id=OTHER_USER_ID)
        assert guard.asset_belongs_to_user(asset.id, USER_ID) is False

    def test_unknown_asset(self, guard):
        assert guard.asset_belongs_to_user("missing", USER_ID) is False


class TestRequire:
    """Tests for the raising checks."""

    def test_require_returns_own_account(self, guard, make_account):
        account = make_account()
        assert guard.require_account(USER_ID, account.id).id == account.id

    def test_require_foreign_asset_is_forbidden(self, guard, make_asset):
        """
        GIVEN an asset owned by another user
        WHEN it is required for this user
        THEN OwnershipError is raised rather than NotFoundError
        """
        asset = make_asset(user_id=OTHER_USER_ID)
        with pytest.raises(OwnershipError):
            guard.require_asset(USER_ID, asset.id)

    def test_require_unknown_transaction(self, guard):
        with pytest.raises(NotFoundError):
            guard.require_transaction(USER_ID, "missing")
