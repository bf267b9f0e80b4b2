"""
API tests for portfolio account endpoints.

Tests cover:
- Create account (success, duplicate name, validation errors)
- List, get, rename and reorder
- Delete with removed transactions
- User scoping through the X-User-Id header
"""

from fastapi.testclient import TestClient

from tests.conftest import OTHER_USER_ID


def create_account(client: TestClient, name: str, **headers) -> dict:
    response = client.post("/accounts/", json={"name": name}, headers=headers or None)
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# CREATE ACCOUNT TESTS
# =============================================================================


class TestCreateAccountAPI:
    """Tests for POST /accounts endpoint."""

    def test_create_account_success(self, client: TestClient):
        """
        GIVEN no accounts exist
        WHEN I POST /accounts with a name
        THEN response is 201 with the account and order 0
        """
        response = client.post("/accounts/", json={"name": "Brokerage"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Brokerage"
        assert data["order"] == 0
        assert data["id"]

    def test_duplicate_name_returns_field_error(self, client: TestClient):
        """
        GIVEN an account named "Brokerage"
        WHEN I POST another account with that name
        THEN response is 400 naming the field
        """
        create_account(client, "Brokerage")

        response = client.post("/accounts/", json={"name": "Brokerage"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "DUPLICATE"
        assert body["field"] == "name"

    def test_empty_name_rejected(self, client: TestClient):
        response = client.post("/accounts/", json={"name": ""})

        assert response.status_code == 422

    def test_missing_user_header_rejected(self, client: TestClient):
        response = client.post("/accounts/", json={"name": "X"}, headers={"X-User-Id": ""})

        assert response.status_code == 400
        assert response.json()["field"] == "X-User-Id"


# =============================================================================
# READ AND UPDATE TESTS
# =============================================================================


class TestAccountReadUpdateAPI:
    """Tests for GET, PATCH and PUT /accounts/order."""

    def test_list_is_scoped_to_user(self, client: TestClient):
        create_account(client, "Mine")
        create_account(client, "Theirs", **{"X-User-Id": OTHER_USER_ID})

        response = client.get("/accounts/")

        assert [a["name"] for a in response.json()] == ["Mine"]

    def test_get_other_users_account_forbidden(self, client: TestClient):
        theirs = create_account(client, "Theirs", **{"X-User-Id": OTHER_USER_ID})

        response = client.get(f"/accounts/{theirs['id']}")

        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    def test_get_unknown_account(self, client: TestClient):
        response = client.get("/accounts/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_rename(self, client: TestClient):
        account = create_account(client, "Old")

        response = client.patch(f"/accounts/{account['id']}", json={"name": "New"})

        assert response.status_code == 200
        assert response.json()["name"] == "New"

    def test_reorder(self, client: TestClient):
        a = create_account(client, "A")
        b = create_account(client, "B")

        response = client.put("/accounts/order", json={"account_ids": [b["id"], a["id"]]})

        assert response.status_code == 200
        assert [acc["name"] for acc in response.json()] == ["B", "A"]


# =============================================================================
# DELETE TESTS
# =============================================================================


class TestDeleteAccountAPI:
    """Tests for DELETE /accounts/{id}."""

    def test_delete_returns_removed_transactions(self, client: TestClient):
        account = create_account(client, "Brokerage")
        asset = client.post("/assets/", json={"ticker": "USD", "name": "US Dollar", "precision": 2}).json()
        deposit = client.post("/transactions/capital", json={
            "title": "Deposit",
            "date": "2024-01-15",
            "portfolio_account_id": account["id"],
            "asset_id": asset["id"],
            "amount": "100.00",
        }).json()

        response = client.delete(f"/accounts/{account['id']}")

        assert response.status_code == 200
        assert response.json()["removed_transaction_ids"] == [deposit["id"]]
        assert client.get(f"/transactions/{deposit['id']}").status_code == 404
