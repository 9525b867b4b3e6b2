import hashlib

import pytest

from app.core.config import settings
from app.core.security import (
    PasswordHasher,
    generate_session_token,
    hash_session_token,
)


@pytest.fixture
def hasher():
    return PasswordHasher(iterations=1000)


def test_hash_and_verify(hasher):
    stored = hasher.hash("correct horse")
    assert stored.startswith("pbkdf2_sha256$1000$")
    assert hasher.verify("correct horse", stored)
    assert not hasher.verify("wrong horse", stored)


def test_same_password_gets_distinct_salts(hasher):
    assert hasher.hash("secret123") != hasher.hash("secret123")


def test_malformed_hash_does_not_verify(hasher):
    assert not hasher.verify("secret123", "not-a-hash")
    assert not hasher.verify("secret123", "")
    assert not hasher.verify("secret123", "md5$1000$abc$def")


def test_session_tokens_are_random_and_hashed():
    first, second = generate_session_token(), generate_session_token()
    assert first != second
    assert hash_session_token(first) == hash_session_token(first)
    assert hash_session_token(first) != first
    assert len(hash_session_token(first)) == 64


def test_session_token_digest_is_keyed():
    token = generate_session_token()
    assert hash_session_token(token, "key-one") != hash_session_token(token, "key-two")
    assert hash_session_token(token, "key-one") != hashlib.sha256(token.encode()).hexdigest()
    assert hash_session_token(token) == hash_session_token(token, settings.SECRET_KEY)
