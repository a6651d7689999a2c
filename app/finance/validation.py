from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session

from app.exceptions import ConflictError, ValidationError
from app.finance.enums import CategoryDomain, Currency, supported_values


# =========================
# Presence
# =========================
def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def require_fields(values: Iterable[Any], message: str):
    if not all(is_present(v) for v in values):
        raise ValidationError(message)


def require_any_field(values: Iterable[Any], message: str):
    if not any(is_present(v) for v in values):
        raise ValidationError(message)


# =========================
# Enums
# =========================
def validate_currency(currency: str) -> Currency:
    if currency not in supported_values(Currency):
        raise ValidationError(
            "Invalid currency. Supported currencies are: "
            + ", ".join(supported_values(Currency))
        )
    return Currency(currency)


def validate_domain(domain: str) -> CategoryDomain:
    if domain not in supported_values(CategoryDomain):
        raise ValidationError(
            "Invalid domain. Supported domains are: "
            + ", ".join(supported_values(CategoryDomain))
        )
    return CategoryDomain(domain)


# =========================
# Uniqueness
# =========================
def ensure_unique(
    db: Session,
    model,
    scope_column,
    scope_value: str,
    name: str,
    message: str,
    exclude_id: Optional[str] = None,
):
    query = db.query(model).filter(scope_column == scope_value, model.name == name)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first():
        raise ConflictError(message)
