from pydantic import BaseModel, validator
from typing import Optional


# -------- REQUESTS --------
# Fields are optional so missing values reach the handlers and get the
# same 400 messages as empty ones.
class CredentialsSchema(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @validator("email")
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


class VerifyEmailSchema(BaseModel):
    email: Optional[str] = None
    token: Optional[str] = None

    @validator("email")
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


class ResendVerificationSchema(BaseModel):
    email: Optional[str] = None

    @validator("email")
    def normalize_email(cls, v):
        if v is None:
            return v
        return v.strip().lower()


# -------- RESPONSES --------
class MessageSchema(BaseModel):
    message: str


class AccessTokenSchema(BaseModel):
    token: str


class UserDisplaySchema(BaseModel):
    email: str
    username: str

    class Config:
        from_attributes = True


class MeSchema(BaseModel):
    user: UserDisplaySchema
