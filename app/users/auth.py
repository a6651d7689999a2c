from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Header
from jose import JWTError, jwt
from loguru import logger
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import AuthError
from app.security.passwords import verify_password
from app.users import crud as user_crud


def authenticate_user(db: Session, email: str, password: str):
    user = user_crud.get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password):
        return None
    return user


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> str:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthError("Invalid or expired token")

    user_id = payload.get("userId")
    if not user_id:
        raise AuthError("Invalid or expired token")
    return user_id


def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """Resolve the bearer credential to a user id; the id is trusted as-is."""
    if not authorization:
        raise AuthError("Authorization header missing")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        logger.warning("Rejected malformed Authorization header")
        raise AuthError("Invalid authorization format")

    return decode_access_token(parts[1])
