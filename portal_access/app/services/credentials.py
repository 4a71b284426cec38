"""
Credential and token helpers.

Password hashing is bcrypt; opaque tokens (sessions, invitations) are random
URL-safe strings of which only the SHA-256 hex digest is persisted.
"""

import hashlib
import secrets
from functools import lru_cache
from typing import Optional

import bcrypt

from config import ApplicationConfig

MAX_TOKEN_LENGTH = 512
# bcrypt only reads the first 72 bytes and refuses anything longer
MAX_PASSWORD_BYTES = 72


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_weak_password(password: Optional[str]) -> bool:
    if not password or len(password) < ApplicationConfig.MIN_PASSWORD_LENGTH:
        return True
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    ).decode("utf-8")


@lru_cache(maxsize=1)
def _dummy_hash() -> bytes:
    return bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Check a password against a stored hash in roughly constant time.

    With no stored hash (unknown email) a dummy hash is still checked so both
    failure paths cost the same.

    Over-long passwords are compared on their first 72 bytes and then
    rejected, so they fail the same way whether or not the email exists.
    """
    encoded = password.encode("utf-8")
    candidate = encoded[:MAX_PASSWORD_BYTES]
    if password_hash is None:
        bcrypt.checkpw(candidate, _dummy_hash())
        return False
    try:
        matched = bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError:
        return False
    return matched and len(encoded) <= MAX_PASSWORD_BYTES


def generate_token() -> str:
    # 32 bytes = 256 bits of entropy
    return secrets.token_urlsafe(32)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def is_well_formed_token(token: object) -> bool:
    return isinstance(token, str) and 0 < len(token.strip()) <= MAX_TOKEN_LENGTH
