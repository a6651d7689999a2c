from datetime import timedelta

from sqlalchemy.orm import Session

from app.config import settings
from app.database import utcnow
from app.users.models import User, Token, TokenType


def create_user(db: Session, email: str, hashed_password: str):
    new_user = User(
        email=email,
        password=hashed_password,
        username=email.split("@")[0],
        is_verified=False,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return new_user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str):
    return db.query(User).filter(User.id == user_id).first()


# -------- TOKENS --------
def get_outstanding_token(db: Session, user_id: str, token_type: TokenType):
    """Newest unused, unexpired token of the given type, if any."""
    return (
        db.query(Token)
        .filter(
            Token.user_id == user_id,
            Token.type == token_type,
            Token.used_at.is_(None),
            Token.expires_at > utcnow(),
        )
        .order_by(Token.created_at.desc())
        .first()
    )


def get_or_create_verification_token(db: Session, user: User):
    token = get_outstanding_token(db, user.id, TokenType.EMAIL_VERIFICATION)
    if token:
        return token

    token = Token(
        user_id=user.id,
        type=TokenType.EMAIL_VERIFICATION,
        expires_at=utcnow() + timedelta(hours=settings.VERIFICATION_TOKEN_EXPIRE_HOURS),
    )
    db.add(token)
    db.commit()
    db.refresh(token)
    return token


def get_user_token(db: Session, user_id: str, token_id: str):
    return (
        db.query(Token)
        .filter(Token.id == token_id, Token.user_id == user_id)
        .first()
    )


def mark_verified(db: Session, user: User, token: Token):
    now = utcnow()
    token.used_at = now
    user.is_verified = True
    db.commit()
    db.refresh(user)
    return user
