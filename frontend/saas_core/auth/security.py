"""
SaaS Core — Document Encryption

Client-side Fernet encryption for the documents.encrypted_content column.
The service stores the ciphertext as-is and never sees the key.

Usage:
    from frontend.saas_core.auth.security import DocumentCipher
    cipher = DocumentCipher()            # key from DOCUMENT_ENC_KEY
    token = cipher.encrypt("quarterly numbers")

Key Management:
    - DOCUMENT_ENC_KEY must hold a Fernet key (generate_key() creates one).
    - Without a key the cipher is unavailable and encrypt() raises;
      plaintext is never written to encrypted_content.
    - NEVER rotate DOCUMENT_ENC_KEY without re-encrypting existing documents.
"""
import os
import logging

from cryptography.fernet import Fernet, InvalidToken

from frontend.config import DOCUMENT_ENC_KEY_VAR

logger = logging.getLogger(__name__)


class EncryptionError(Exception):
    """Raised when a document cannot be encrypted or decrypted"""
    pass


class DocumentCipher:
    """Fernet wrapper keyed from the environment (or an explicit key)."""

    def __init__(self, key: str | None = None):
        if key is None:
            key = os.environ.get(DOCUMENT_ENC_KEY_VAR, "")
        self._fernet = self._load_fernet(key)

    @staticmethod
    def _load_fernet(key: str) -> Fernet | None:
        if not key:
            logger.info("%s not set — document encryption unavailable.", DOCUMENT_ENC_KEY_VAR)
            return None
        try:
            return Fernet(key.encode() if isinstance(key, str) else key)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid %s: %s — document encryption unavailable.", DOCUMENT_ENC_KEY_VAR, e)
            return None

    @property
    def available(self) -> bool:
        return self._fernet is not None

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a document body. Raises EncryptionError without a key."""
        if self._fernet is None:
            raise EncryptionError(f"{DOCUMENT_ENC_KEY_VAR} is not configured")
        return self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a stored ciphertext. Raises EncryptionError on a bad key or token."""
        if self._fernet is None:
            raise EncryptionError(f"{DOCUMENT_ENC_KEY_VAR} is not configured")
        try:
            return self._fernet.decrypt(ciphertext.encode()).decode()
        except InvalidToken as e:
            raise EncryptionError("Ciphertext is invalid or was encrypted with another key") from e


def generate_key() -> str:
    """
    Generate a new Fernet key (base64-encoded string).
    Use this to create a DOCUMENT_ENC_KEY for .env.
    """
    return Fernet.generate_key().decode()
