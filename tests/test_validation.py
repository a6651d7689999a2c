"""
Unit tests for the validation layer and balance helpers.
"""

from decimal import Decimal

import pytest

from app.exceptions import ConflictError, ValidationError
from app.finance import balance, validation
from app.finance.accounts.models import Account
from app.finance.enums import CategoryDomain, Currency, TransactionType
from app.schemas import format_decimal


class TestPresence:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values(self, value):
        assert validation.is_present(value) is False

    @pytest.mark.parametrize("value", ["x", 0, Decimal("0"), False])
    def test_present_values(self, value):
        assert validation.is_present(value) is True

    def test_require_fields_raises_with_message(self):
        with pytest.raises(ValidationError) as exc:
            validation.require_fields(["Cash", None], "Name and currency are required")
        assert exc.value.status_code == 400
        assert exc.value.detail == "Name and currency are required"

    def test_require_any_field(self):
        validation.require_any_field([None, "desc"], "unused")
        with pytest.raises(ValidationError):
            validation.require_any_field([None, ""], "nothing to update")


class TestEnums:
    def test_valid_currency(self):
        assert validation.validate_currency("EUR") is Currency.EUR

    def test_invalid_currency(self):
        with pytest.raises(ValidationError) as exc:
            validation.validate_currency("XYZ")
        assert "USD" in exc.value.detail

    def test_valid_domain(self):
        assert validation.validate_domain("EXPENSE") is CategoryDomain.EXPENSE

    def test_invalid_domain(self):
        with pytest.raises(ValidationError) as exc:
            validation.validate_domain("GENERAL")
        assert exc.value.detail == "Invalid domain. Supported domains are: INCOME, EXPENSE"


class TestUniqueness:
    def test_conflict_excludes_self(self, db, user):
        account = Account(user_id=user.id, name="Cash", currency=Currency.USD, balance=Decimal("0"))
        db.add(account)
        db.commit()

        with pytest.raises(ConflictError):
            validation.ensure_unique(db, Account, Account.user_id, user.id, "Cash", "taken")

        validation.ensure_unique(
            db, Account, Account.user_id, user.id, "Cash", "taken", exclude_id=account.id
        )


class TestBalanceHelpers:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("0"), TransactionType.INCOME),
            (Decimal("0.01"), TransactionType.INCOME),
            (Decimal("-0.01"), TransactionType.EXPENSE),
            (-1, TransactionType.EXPENSE),
        ],
    )
    def test_derive_type(self, amount, expected):
        assert balance.derive_type(amount) is expected

    def test_deltas(self):
        assert balance.create_delta(Decimal("100")) == Decimal("100")
        assert balance.update_delta(Decimal("100"), Decimal("-30")) == Decimal("-130")
        assert balance.update_delta(Decimal("100"), None) == Decimal("0")
        assert balance.delete_delta(Decimal("-30")) == Decimal("30")

    def test_apply_delta_is_exact(self):
        account = Account(balance=Decimal("0"))
        for _ in range(10):
            balance.apply_delta(account, Decimal("0.1"))
        assert account.balance == Decimal("1.0")

    def test_apply_delta_rejects_out_of_range_balance(self):
        account = Account(balance=Decimal("99999999999999999999"))

        with pytest.raises(ValidationError):
            balance.apply_delta(account, Decimal("1"))
        assert account.balance == Decimal("99999999999999999999")

    def test_to_decimal_from_float_keeps_short_repr(self):
        assert balance.to_decimal(0.1) == Decimal("0.1")

    def test_recompute_balance_empty_account(self, db, user):
        account = Account(user_id=user.id, name="Empty", currency=Currency.USD, balance=Decimal("0"))
        db.add(account)
        db.commit()

        assert balance.recompute_balance(db, account.id) == Decimal("0")


class TestFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("100.00000000"), "100"),
            (Decimal("-30.50000000"), "-30.5"),
            (Decimal("0E-8"), "0"),
        ],
    )
    def test_format_decimal(self, value, expected):
        assert format_decimal(value) == expected
