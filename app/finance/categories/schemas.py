from datetime import datetime
from typing import List, Optional

from app.finance.enums import CategoryDomain
from app.schemas import CamelSchema


# ================= CREATE =================
class CategoryCreate(CamelSchema):
    name: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None


# ================= UPDATE =================
class CategoryUpdate(CamelSchema):
    name: Optional[str] = None
    description: Optional[str] = None
    domain: Optional[str] = None


# ================= RESPONSE =================
class CategoryRef(CamelSchema):
    id: str
    name: str
    description: Optional[str] = None


class CategoryOut(CamelSchema):
    id: str
    account_id: str
    name: str
    domain: CategoryDomain
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CategoryList(CamelSchema):
    categories: List[CategoryOut]
