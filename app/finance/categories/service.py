from loguru import logger
from sqlalchemy.orm import Session

from app.database import commit_or_rollback
from app.finance import guard, validation
from . import models, schemas

DUPLICATE_NAME = "A category with this name already exists for the account."


# ================= CREATE =================
def create_category(db: Session, account_id: str, category: schemas.CategoryCreate, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)

    validation.require_fields(
        [category.name, category.domain],
        "Name and domain are required to create a category.",
    )
    domain = validation.validate_domain(category.domain)
    name = category.name.strip()

    validation.ensure_unique(
        db, models.Category, models.Category.account_id, account.id, name, DUPLICATE_NAME
    )

    db_category = models.Category(
        account_id=account.id,
        name=name,
        domain=domain,
        description=category.description or "",
    )
    db.add(db_category)
    commit_or_rollback(db, DUPLICATE_NAME)
    db.refresh(db_category)

    logger.info(f"Category {db_category.id} created in account {account.id}")
    return db_category


# ================= LIST =================
def list_categories(db: Session, account_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)
    categories = (
        db.query(models.Category)
        .filter(models.Category.account_id == account.id)
        .order_by(models.Category.name)
        .all()
    )
    return {"categories": categories}


def get_category(db: Session, account_id: str, category_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)
    return guard.get_account_category(db, account.id, category_id)


# ================= UPDATE =================
def update_category(
    db: Session,
    account_id: str,
    category_id: str,
    category: schemas.CategoryUpdate,
    user_id: str,
):
    account = guard.get_owned_account(db, account_id, user_id)
    db_category = guard.get_account_category(db, account.id, category_id)

    if validation.is_present(category.domain):
        validation.validate_domain(category.domain)

    validation.require_any_field(
        [category.name, category.description, category.domain],
        "At least one field (name, description or domain) must be provided for update.",
    )

    if validation.is_present(category.name):
        name = category.name.strip()
        validation.ensure_unique(
            db,
            models.Category,
            models.Category.account_id,
            account.id,
            name,
            DUPLICATE_NAME,
            exclude_id=db_category.id,
        )
        db_category.name = name

    if category.description is not None:
        db_category.description = category.description

    if validation.is_present(category.domain):
        db_category.domain = validation.validate_domain(category.domain)

    commit_or_rollback(db, DUPLICATE_NAME)
    db.refresh(db_category)
    return db_category


# ================= DELETE =================
def delete_category(db: Session, account_id: str, category_id: str, user_id: str):
    account = guard.get_owned_account(db, account_id, user_id)
    db_category = guard.get_account_category(db, account.id, category_id)

    # referencing transactions keep their amounts and lose the link
    db.delete(db_category)
    commit_or_rollback(db)

    logger.info(f"Category {category_id} deleted from account {account.id}")
