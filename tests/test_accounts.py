"""
Tests for account lifecycle endpoints.
"""

from decimal import Decimal

from app.finance.accounts.models import Account
from app.finance.categories.models import Category
from app.finance.enums import TransactionType
from app.finance.transactions.models import Transaction

ACCOUNTS = "/api/finance/accounts"


class TestCurrencies:
    def test_lists_supported_currencies(self, client, headers):
        response = client.get("/api/finance/currencies", headers=headers)

        assert response.status_code == 200
        assert "USD" in response.json()["currencies"]
        assert "EUR" in response.json()["currencies"]

    def test_requires_auth(self, client):
        assert client.get("/api/finance/currencies").status_code == 401


class TestCreateAccount:
    def test_create_account_starts_at_zero(self, client, headers, user):
        response = client.post(ACCOUNTS, headers=headers, json={"name": "Cash", "currency": "USD"})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Cash"
        assert body["currency"] == "USD"
        assert body["userId"] == user.id
        assert Decimal(body["balance"]) == Decimal("0")
        assert body["id"]

    def test_missing_fields(self, client, headers):
        for payload in ({"currency": "USD"}, {"name": "Cash"}, {"name": "  ", "currency": "USD"}):
            response = client.post(ACCOUNTS, headers=headers, json=payload)
            assert response.status_code == 400
            assert response.json()["detail"] == "Name and currency are required to create an account."

    def test_invalid_currency_lists_valid_codes(self, client, headers):
        response = client.post(ACCOUNTS, headers=headers, json={"name": "Cash", "currency": "INVALID"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail.startswith("Invalid currency. Supported currencies are: ")
        assert "USD" in detail and "EUR" in detail

    def test_duplicate_name_for_same_user(self, client, headers, account):
        response = client.post(ACCOUNTS, headers=headers, json={"name": "Cash", "currency": "EUR"})

        assert response.status_code == 409
        assert response.json()["detail"] == "An account with this name already exists for the user."

    def test_same_name_allowed_for_other_user(self, client, account, make_user, auth_for):
        other = make_user(email="other@example.com")

        response = client.post(ACCOUNTS, headers=auth_for(other), json={"name": "Cash", "currency": "USD"})

        assert response.status_code == 201

    def test_requires_auth(self, client):
        response = client.post(ACCOUNTS, json={"name": "Cash", "currency": "USD"})

        assert response.status_code == 401


class TestReadAccounts:
    def test_list_accounts(self, client, headers, account):
        response = client.get(ACCOUNTS, headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert set(body[0]) == {"id", "name", "balance", "currency"}

    def test_list_without_accounts_is_not_found(self, client, headers):
        response = client.get(ACCOUNTS, headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "No accounts found for this user."

    def test_get_account_with_transactions(self, client, headers, account):
        client.post(f"{ACCOUNTS}/{account['id']}/transactions", headers=headers, json={"amount": 25})

        response = client.get(f"{ACCOUNTS}/{account['id']}", headers=headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == account["id"]
        assert Decimal(body["balance"]) == Decimal("25")
        assert len(body["transactions"]) == 1
        assert body["transactions"][0]["type"] == "INCOME"

    def test_repeated_reads_are_identical(self, client, headers, account):
        for amount in (10, -4, 7):
            client.post(f"{ACCOUNTS}/{account['id']}/transactions", headers=headers, json={"amount": amount})

        first = client.get(f"{ACCOUNTS}/{account['id']}", headers=headers).json()
        second = client.get(f"{ACCOUNTS}/{account['id']}", headers=headers).json()

        assert first == second

    def test_detail_caps_recent_transactions(self, client, headers, account, db):
        for _ in range(55):
            db.add(Transaction(account_id=account["id"], amount=Decimal("1"), type=TransactionType.INCOME))
        db.commit()

        response = client.get(f"{ACCOUNTS}/{account['id']}", headers=headers)

        assert len(response.json()["transactions"]) == 50

    def test_unknown_account(self, client, headers):
        response = client.get(f"{ACCOUNTS}/invalid-id", headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Account not found."


class TestUpdateAccount:
    def test_rename(self, client, headers, account, db):
        response = client.put(f"{ACCOUNTS}/{account['id']}", headers=headers, json={"name": "Wallet"})

        assert response.status_code == 200
        assert response.json()["account"]["name"] == "Wallet"
        assert db.get(Account, account["id"]).name == "Wallet"

    def test_change_currency(self, client, headers, account):
        response = client.put(f"{ACCOUNTS}/{account['id']}", headers=headers, json={"currency": "EUR"})

        assert response.status_code == 200
        assert response.json()["account"]["currency"] == "EUR"

    def test_keep_own_name(self, client, headers, account):
        response = client.put(
            f"{ACCOUNTS}/{account['id']}",
            headers=headers,
            json={"name": "Cash", "currency": "GBP"},
        )

        assert response.status_code == 200

    def test_invalid_currency(self, client, headers, account):
        response = client.put(f"{ACCOUNTS}/{account['id']}", headers=headers, json={"currency": "INVALID"})

        assert response.status_code == 400
        assert "Invalid currency" in response.json()["detail"]

    def test_no_fields(self, client, headers, account):
        response = client.put(f"{ACCOUNTS}/{account['id']}", headers=headers, json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "At least one field (name or currency) must be provided for update."

    def test_duplicate_name(self, client, headers, account):
        other = client.post(ACCOUNTS, headers=headers, json={"name": "Savings", "currency": "USD"}).json()

        response = client.put(f"{ACCOUNTS}/{other['id']}", headers=headers, json={"name": "Cash"})

        assert response.status_code == 409
        assert response.json()["detail"] == "An account with this name already exists for the user."

    def test_unknown_account(self, client, headers):
        response = client.put(f"{ACCOUNTS}/invalid-id", headers=headers, json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Account not found."


class TestDeleteAccount:
    def test_delete_cascades(self, client, headers, account, db):
        account_id = account["id"]
        category = client.post(
            f"{ACCOUNTS}/{account_id}/categories",
            headers=headers,
            json={"name": "Salary", "domain": "INCOME"},
        ).json()
        client.post(
            f"{ACCOUNTS}/{account_id}/transactions",
            headers=headers,
            json={"amount": 100, "categoryId": category["id"]},
        )

        response = client.delete(f"{ACCOUNTS}/{account_id}", headers=headers)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{ACCOUNTS}/{account_id}", headers=headers).status_code == 404
        db.expire_all()
        assert db.query(Category).filter(Category.account_id == account_id).count() == 0
        assert db.query(Transaction).filter(Transaction.account_id == account_id).count() == 0

    def test_unknown_account(self, client, headers):
        response = client.delete(f"{ACCOUNTS}/invalid-id", headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Account not found."
