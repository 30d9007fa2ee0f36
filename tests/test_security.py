"""Unit tests for the credential policy."""

from __future__ import annotations

import pytest

from provisioner.core.config import Settings
from provisioner.core.errors import HashingError
from provisioner.core.security import CredentialPolicy, is_valid_email


@pytest.fixture()
def policy() -> CredentialPolicy:
    return CredentialPolicy(cost_factor=4)


@pytest.mark.parametrize("email", ["a@b.co", "admin@example.com", "first.last@mail.example.org"])
def test_is_valid_email_accepts_basic_shape(email: str) -> None:
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["a@b", "a.com", "a @b.com", "", "a@b .com", "a@@b.com"])
def test_is_valid_email_rejects_malformed_values(email: str) -> None:
    assert not is_valid_email(email)


def test_hash_never_returns_plaintext_and_verifies(policy: CredentialPolicy) -> None:
    hashed = policy.hash("secret")

    assert hashed != "secret"
    assert hashed.startswith("$2")
    assert policy.verify("secret", hashed)
    assert not policy.verify("wrong", hashed)


def test_hash_is_salted(policy: CredentialPolicy) -> None:
    first = policy.hash("secret")
    second = policy.hash("secret")

    assert first != second
    assert policy.verify("secret", first)
    assert policy.verify("secret", second)


def test_hash_embeds_cost_factor(policy: CredentialPolicy) -> None:
    assert policy.hash("secret").split("$")[2] == "04"


def test_hash_rejects_invalid_cost_factor() -> None:
    with pytest.raises(HashingError, match="Password hashing failed"):
        CredentialPolicy(cost_factor=3).hash("secret")


def test_hash_rejects_empty_password(policy: CredentialPolicy) -> None:
    with pytest.raises(HashingError, match="must not be empty"):
        policy.hash("")


def test_verify_returns_false_for_malformed_hash(policy: CredentialPolicy) -> None:
    assert policy.verify("secret", "not-a-bcrypt-hash") is False


def test_from_settings_uses_configured_salt_rounds() -> None:
    policy = CredentialPolicy.from_settings(Settings(salt_rounds=5))

    assert policy.cost_factor == 5


def test_long_password_is_truncated_to_bcrypt_limit(policy: CredentialPolicy) -> None:
    password = "x" * 100
    hashed = policy.hash(password)

    assert policy.verify(password, hashed)
    assert policy.verify("x" * 72, hashed)
    assert not policy.verify("x" * 71, hashed)


def test_truncation_counts_encoded_bytes(policy: CredentialPolicy) -> None:
    password = "é" * 40  # 80 bytes in UTF-8
    hashed = policy.hash(password)

    assert policy.verify(password, hashed)
    assert policy.verify("é" * 36, hashed)
