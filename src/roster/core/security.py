"""Password transform used to store and compare credentials.

The transform is one-way and deterministic: the same plaintext always maps to
the same stored value, so authentication compares transformed values instead
of verifying against a per-record salt.
"""
from __future__ import annotations

import hashlib
import hmac
from typing import Protocol

from roster.core.config import get_settings

__all__ = [
    "CredentialTransform",
    "Pbkdf2CredentialTransform",
    "credentials_match",
    "get_credential_transform",
]


class CredentialTransform(Protocol):
    def transform(self, plaintext: str) -> str: ...


class Pbkdf2CredentialTransform:
    """PBKDF2-HMAC-SHA256 with a fixed, configured salt; hex encoded output."""

    def __init__(self, salt: str, iterations: int = 600_000) -> None:
        if not salt:
            raise ValueError("credential salt must not be empty")
        if iterations < 1:
            raise ValueError("credential iterations must be positive")
        self._salt = salt.encode("utf-8")
        self._iterations = iterations

    def transform(self, plaintext: str) -> str:
        digest = hashlib.pbkdf2_hmac("sha256", plaintext.encode("utf-8"), self._salt, self._iterations)
        return digest.hex()


def credentials_match(stored: str, candidate: str) -> bool:
    """Constant-time comparison of two transformed credentials."""
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))


def get_credential_transform() -> Pbkdf2CredentialTransform:
    settings = get_settings()
    return Pbkdf2CredentialTransform(
        settings.credential_salt.get_secret_value(),
        iterations=settings.credential_iterations,
    )
