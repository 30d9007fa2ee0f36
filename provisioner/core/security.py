"""Credential policy: email shape checks and bcrypt password hashing."""

from __future__ import annotations

import re

import bcrypt

from provisioner.core.config import DEFAULT_SALT_ROUNDS, Settings, get_settings
from provisioner.core.errors import HashingError

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_PASSWORD_BYTES = 72


def is_valid_email(email: str) -> bool:
    """Return True when ``email`` has a ``local@domain.tld`` shape."""

    return bool(_EMAIL_PATTERN.match(email or ""))


def _encode_secret(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class CredentialPolicy:
    """Validates account inputs and produces storable credential hashes."""

    def __init__(self, cost_factor: int = DEFAULT_SALT_ROUNDS) -> None:
        self._cost_factor = cost_factor

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> CredentialPolicy:
        active_settings = settings or get_settings()
        return cls(cost_factor=active_settings.salt_rounds)

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def validate_email(self, email: str) -> bool:
        return is_valid_email(email)

    def hash(self, plaintext: str) -> str:
        """Hash ``plaintext`` with a fresh bcrypt salt at the configured cost."""

        if not plaintext:
            raise HashingError("Password must not be empty")

        try:
            salt = bcrypt.gensalt(rounds=self._cost_factor)
            hashed = bcrypt.hashpw(_encode_secret(plaintext), salt)
        except (ValueError, TypeError) as exc:
            raise HashingError(f"Password hashing failed: {exc}") from exc
        return hashed.decode("utf-8")

    def verify(self, plaintext: str, credential_hash: str) -> bool:
        """Check ``plaintext`` against a stored bcrypt hash."""

        try:
            return bcrypt.checkpw(_encode_secret(plaintext), credential_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False
