"""
User and session models for the auth service
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship, validates
from datetime import datetime, timezone

from app.models.base import BaseModel

DEFAULT_USER_ROLE = "user"

class User(BaseModel):
    """
    Application user profile plus its credential hash
    """
    __tablename__ = "users"
    __private_columns__ = ("password_hash",)

    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True
    )

    password_hash = Column(
        String(255),
        nullable=False,
        comment="PBKDF2 password hash, never serialized"
    )

    full_name = Column(
        String(255),
        nullable=True
    )

    role = Column(
        String(50),
        nullable=False,
        default=DEFAULT_USER_ROLE
    )

    # Relationships
    memberships = relationship("OrganizationMember", back_populates="user", cascade="all, delete-orphan")
    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")

    @validates('email')
    def validate_email(self, key: str, email: str) -> str:
        """
        Stored lower-cased; format is checked by the request schema
        """
        if not email or not email.strip():
            raise ValueError("Email cannot be empty")
        return email.strip().lower()

    def __repr__(self) -> str:
        return f"<User(email={self.email})>"


class AuthSession(BaseModel):
    """
    Bearer session issued on sign-in / sign-up
    """
    __tablename__ = "auth_sessions"
    __private_columns__ = ("token_hash",)

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    token_hash = Column(
        String(64),
        unique=True,
        nullable=False,
        index=True,
        comment="SHA-256 of the bearer token"
    )

    expires_at = Column(
        DateTime(timezone=True),
        nullable=False
    )

    revoked = Column(
        Boolean,
        default=False,
        nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="sessions")

    def is_active(self, now: datetime | None = None) -> bool:
        """
        Whether the session can still authenticate requests
        """
        if self.revoked:
            return False
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at > now

    def __repr__(self) -> str:
        return f"<AuthSession(user={self.user_id}, revoked={self.revoked})>"
