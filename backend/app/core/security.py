"""
Credential utilities for the auth service
Passwords are hashed with PBKDF2-HMAC-SHA256 from the cryptography library;
session tokens are opaque random strings stored only as HMAC-SHA256
digests keyed with SECRET_KEY
"""

import base64
import hashlib
import hmac
import logging
import os
import secrets
from typing import Optional

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from app.core.config import settings

logger = logging.getLogger(__name__)

HASH_SCHEME = "pbkdf2_sha256"
SALT_BYTES = 16
KEY_LENGTH = 32


class PasswordHashError(Exception):
    """Raised when a stored password hash cannot be parsed"""
    pass


class PasswordHasher:
    """
    Hashes and verifies user passwords

    Stored format: pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>
    """

    def __init__(self, iterations: Optional[int] = None):
        self.iterations = iterations or settings.PASSWORD_HASH_ITERATIONS

    @staticmethod
    def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=salt,
            iterations=iterations,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password

        Args:
            password: Plaintext password

        Returns:
            Encoded hash string safe to store
        """
        salt = os.urandom(SALT_BYTES)
        key = self._kdf(salt, self.iterations).derive(password.encode("utf-8"))
        return "$".join([
            HASH_SCHEME,
            str(self.iterations),
            base64.urlsafe_b64encode(salt).decode("ascii"),
            base64.urlsafe_b64encode(key).decode("ascii"),
        ])

    def verify(self, password: str, encoded: str) -> bool:
        """
        Check a plaintext password against a stored hash

        Args:
            password: Plaintext password from the sign-in form
            encoded: Value produced by hash()

        Returns:
            True if the password matches
        """
        try:
            scheme, iterations, salt_b64, key_b64 = encoded.split("$")
            if scheme != HASH_SCHEME:
                raise PasswordHashError(f"Unsupported hash scheme: {scheme}")
            salt = base64.urlsafe_b64decode(salt_b64)
            expected = base64.urlsafe_b64decode(key_b64)
            kdf = self._kdf(salt, int(iterations))
        except (ValueError, PasswordHashError) as e:
            logger.error(f"Unreadable password hash: {e}")
            return False

        try:
            kdf.verify(password.encode("utf-8"), expected)
            return True
        except InvalidKey:
            return False


def generate_session_token() -> str:
    """Create a new opaque bearer token"""
    return secrets.token_urlsafe(32)


def hash_session_token(token: str, secret_key: Optional[str] = None) -> str:
    """Digest stored in auth_sessions; the raw token is never persisted"""
    key = (secret_key or settings.SECRET_KEY).encode("utf-8")
    return hmac.new(key, token.encode("utf-8"), hashlib.sha256).hexdigest()


# Global hasher instance
password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """
    Convenience function to hash a password
    """
    return password_hasher.hash(password)


def verify_password(password: str, encoded: str) -> bool:
    """
    Convenience function to verify a password
    """
    return password_hasher.verify(password, encoded)
