"""
Balance bookkeeping.

``Account.balance`` is a cached running total of the account's transaction
amounts. ``apply_delta`` is the only code path that assigns it, and only the
transaction service calls it, inside the same unit of work as the
transaction row it accounts for.
"""
from decimal import Decimal
from typing import Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.exceptions import ValidationError
from app.finance.enums import TransactionType
from app.finance.transactions.models import Transaction
from app.schemas import MONEY_DIGITS, MONEY_PLACES

Number = Union[Decimal, int, float, str]

# exclusive bound of what the balance column can hold
BALANCE_LIMIT = Decimal(10) ** (MONEY_DIGITS - MONEY_PLACES)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through repr so 0.1 stays 0.1
        return Decimal(repr(value))
    return Decimal(value)


def derive_type(amount: Number) -> TransactionType:
    if to_decimal(amount) >= 0:
        return TransactionType.INCOME
    return TransactionType.EXPENSE


def create_delta(amount: Number) -> Decimal:
    return to_decimal(amount)


def update_delta(old_amount: Number, new_amount: Optional[Number]) -> Decimal:
    if new_amount is None:
        return Decimal("0")
    return to_decimal(new_amount) - to_decimal(old_amount)


def delete_delta(old_amount: Number) -> Decimal:
    return -to_decimal(old_amount)


def apply_delta(account, delta: Decimal) -> Decimal:
    """Add ``delta`` to the account balance; the caller commits."""
    new_balance = to_decimal(account.balance or 0) + to_decimal(delta)
    if abs(new_balance) >= BALANCE_LIMIT:
        raise ValidationError("Resulting account balance is out of range.")
    account.balance = new_balance
    return new_balance


def recompute_balance(db: Session, account_id: str) -> Decimal:
    total = (
        db.query(func.coalesce(func.sum(Transaction.amount), 0))
        .filter(Transaction.account_id == account_id)
        .scalar()
    )
    return to_decimal(total)
