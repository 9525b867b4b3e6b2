"""SaaS Core — Auth module (session context + document encryption)."""
from .context import AuthContext
from .security import DocumentCipher, EncryptionError, generate_key

__all__ = [
    "AuthContext",
    "DocumentCipher",
    "EncryptionError",
    "generate_key",
]
