import enum

from sqlalchemy import Column, String, DateTime, ForeignKey, Boolean, Enum
from sqlalchemy.orm import relationship

from app.database import Base, generate_id, utcnow


class TokenType(str, enum.Enum):
    EMAIL_VERIFICATION = "EMAIL_VERIFICATION"
    PASSWORD_RESET = "PASSWORD_RESET"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    username = Column(String(100), nullable=False)
    is_verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    tokens = relationship(
        "Token",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    accounts = relationship(
        "Account",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Token(Base):
    __tablename__ = "tokens"

    # the id is what gets mailed to the user
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    type = Column(Enum(TokenType, name="token_type"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    used_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="tokens")

    def is_valid_for(self, token_type: TokenType, now) -> bool:
        return (
            self.used_at is None
            and self.expires_at > now
            and self.type == token_type
        )
