"""
Ownership scoping for every account-scoped request.

The account is always resolved against the authenticated user first, and
nested resources only against that account. A resource belonging to
someone else is reported exactly like a missing one.
"""
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from app.finance.accounts.models import Account
from app.finance.categories.models import Category
from app.finance.transactions.models import Transaction


def get_owned_account(db: Session, account_id: str, user_id: str, for_update: bool = False) -> Account:
    query = db.query(Account).filter(Account.id == account_id, Account.user_id == user_id)
    if for_update:
        query = query.with_for_update()

    account = query.first()
    if not account:
        raise NotFoundError("Account not found.")
    return account


def get_account_category(db: Session, account_id: str, category_id: str) -> Category:
    category = (
        db.query(Category)
        .filter(Category.id == category_id, Category.account_id == account_id)
        .first()
    )
    if not category:
        raise NotFoundError("Category not found for this account.")
    return category


def get_account_transaction(db: Session, account_id: str, transaction_id: str) -> Transaction:
    transaction = (
        db.query(Transaction)
        .filter(Transaction.id == transaction_id, Transaction.account_id == account_id)
        .first()
    )
    if not transaction:
        raise NotFoundError("Transaction not found.")
    return transaction
