from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db, utcnow
from app.exceptions import (
    ConflictError,
    DependencyError,
    ForbiddenError,
    AuthError,
    ValidationError,
)
from app.notifications.mailer import get_mailer
from app.security.passwords import hash_password
from app.users import crud as user_crud, schemas
from app.users.auth import authenticate_user, create_access_token, get_current_user_id
from app.users.models import TokenType

router = APIRouter()


def send_verification_email(mailer, user, token):
    result = mailer.send(
        user.email,
        "verify_email",
        {
            "subject": "Verify your email",
            "username": user.username,
            "token": token.id,
            "link": f"{settings.APP_URL}/verify?email={user.email}&token={token.id}",
            "expires_at": token.expires_at.strftime("%Y-%m-%d %H:%M"),
        },
    )
    if not result.success:
        # the user and token stay persisted; the client can call resend
        raise DependencyError("Failed to send verification email", result.error)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=schemas.MessageSchema)
def register(
    payload: schemas.CredentialsSchema,
    db: Session = Depends(get_db),
    mailer=Depends(get_mailer),
):
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required")

    if user_crud.get_user_by_email(db, payload.email):
        raise ConflictError("User already exists")

    user = user_crud.create_user(db, payload.email, hash_password(payload.password))
    token = user_crud.get_or_create_verification_token(db, user)
    logger.info(f"User registered: {user.id}")

    send_verification_email(mailer, user, token)
    return {"message": "User registered, check your email to verify your account"}


@router.post("/verify", response_model=schemas.MessageSchema)
def verify_email(payload: schemas.VerifyEmailSchema, db: Session = Depends(get_db)):
    if not payload.email or not payload.token:
        raise ValidationError("Email and token are required")

    user = user_crud.get_user_by_email(db, payload.email)
    if not user:
        raise ValidationError("Invalid email or token")

    if user.is_verified:
        raise ValidationError("Email is already verified")

    token = user_crud.get_user_token(db, user.id, payload.token)
    if not token or not token.is_valid_for(TokenType.EMAIL_VERIFICATION, utcnow()):
        logger.warning(f"Invalid verification token presented for user {user.id}")
        raise ValidationError("Invalid or expired token")

    user_crud.mark_verified(db, user, token)
    logger.info(f"User verified: {user.id}")
    return {"message": "Email verified successfully"}


@router.post("/resend-verification", response_model=schemas.MessageSchema)
def resend_verification(
    payload: schemas.ResendVerificationSchema,
    db: Session = Depends(get_db),
    mailer=Depends(get_mailer),
):
    if not payload.email:
        raise ValidationError("Email is required")

    user = user_crud.get_user_by_email(db, payload.email)
    if not user:
        raise ValidationError("Invalid email")

    if user.is_verified:
        raise ValidationError("Email is already verified")

    token = user_crud.get_or_create_verification_token(db, user)
    send_verification_email(mailer, user, token)
    return {"message": "Verification email resent"}


@router.post("/login", response_model=schemas.AccessTokenSchema)
def login(payload: schemas.CredentialsSchema, db: Session = Depends(get_db)):
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required")

    user = authenticate_user(db, payload.email, payload.password)
    if not user:
        logger.warning(f"Authentication denied for email: {payload.email}")
        raise AuthError("Invalid credentials")

    if not user.is_verified:
        raise ForbiddenError("Please verify your email before logging in")

    logger.info(f"User authenticated: {user.id}")
    return {"token": create_access_token(data={"userId": user.id})}


@router.get("/me", response_model=schemas.MeSchema)
def me(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    user = user_crud.get_user_by_id(db, user_id)
    if not user:
        raise AuthError("Invalid or expired token")
    return {"user": user}
