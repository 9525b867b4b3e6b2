"""
Password auth service: sign-up, sign-in, sign-out and session lookup
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import (
    generate_session_token,
    hash_password,
    hash_session_token,
    verify_password,
)
from app.models.user import AuthSession, User

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised for rejected credentials, duplicate accounts and bad sessions"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class AuthService:
    """Service for the password auth flow backed by the users table"""

    def __init__(self, db: Session):
        self.db = db
        self.session_ttl = timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Dict[str, Any]:
        """
        Create an account and open a session for it

        Args:
            email: Login email (stored lower-cased)
            password: Plaintext password
            full_name: Optional display name

        Returns:
            Dict with access_token, expires_at and user
        """
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            raise AuthError(
                f"Password should be at least {settings.PASSWORD_MIN_LENGTH} characters",
                status_code=422,
            )

        email = email.strip().lower()
        if self.db.query(User).filter(User.email == email).first():
            raise AuthError("User already registered", status_code=409)

        try:
            user = User(
                email=email,
                password_hash=hash_password(password),
                full_name=full_name.strip() if full_name and full_name.strip() else None,
            )
        except ValueError as e:
            raise AuthError(str(e), status_code=422)

        try:
            self.db.add(user)
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            raise AuthError("User already registered", status_code=409)

        token, auth_session = self._open_session(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return self._session_payload(token, auth_session, user)

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Verify credentials and open a new session

        Returns:
            Dict with access_token, expires_at and user
        """
        user = self.db.query(User).filter(User.email == email.strip().lower()).first()
        if not user or not verify_password(password, user.password_hash):
            logger.info("Rejected sign-in attempt")
            raise AuthError("Invalid login credentials", status_code=400)

        token, auth_session = self._open_session(user)
        self.db.commit()

        logger.info(f"User {user.id} signed in")
        return self._session_payload(token, auth_session, user)

    def sign_out(self, token: str) -> bool:
        """
        Revoke the session behind a bearer token

        Returns:
            True if an active session was revoked
        """
        auth_session = self._find_session(token)
        if not auth_session or auth_session.revoked:
            return False

        auth_session.revoked = True
        self.db.commit()
        logger.info(f"User {auth_session.user_id} signed out")
        return True

    def get_session_user(self, token: str) -> User:
        """
        Resolve a bearer token to its user

        Raises:
            AuthError(401) when the token is unknown, expired or revoked
        """
        auth_session = self._find_session(token)
        if not auth_session or not auth_session.is_active():
            raise AuthError("Invalid or expired session", status_code=401)
        return auth_session.user

    def _find_session(self, token: str) -> Optional[AuthSession]:
        if not token:
            return None
        return (
            self.db.query(AuthSession)
            .filter(AuthSession.token_hash == hash_session_token(token))
            .first()
        )

    def _open_session(self, user: User) -> Tuple[str, AuthSession]:
        token = generate_session_token()
        auth_session = AuthSession(
            user_id=user.id,
            token_hash=hash_session_token(token),
            expires_at=datetime.now(timezone.utc) + self.session_ttl,
        )
        self.db.add(auth_session)
        return token, auth_session

    @staticmethod
    def _session_payload(token: str, auth_session: AuthSession, user: User) -> Dict[str, Any]:
        return {
            "access_token": token,
            "token_type": "bearer",
            "expires_at": auth_session.expires_at,
            "user": user,
        }
