"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from provisioner.core.config import DEFAULT_SALT_ROUNDS, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SALT_ROUNDS",
        "PROVISIONER_SALT_ROUNDS",
        "PROVISIONER_USERS_KEY",
        "PROVISIONER_DATABASE_URL",
        "PROVISIONER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.salt_rounds == DEFAULT_SALT_ROUNDS == 10
    assert settings.users_key == "users"
    assert settings.database_url.startswith("sqlite")
    assert settings.log_level == "INFO"


def test_salt_rounds_from_bare_environment_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALT_ROUNDS", "12")

    assert Settings(_env_file=None).salt_rounds == 12


def test_prefixed_salt_rounds_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALT_ROUNDS", "12")
    monkeypatch.setenv("PROVISIONER_SALT_ROUNDS", "6")

    assert Settings(_env_file=None).salt_rounds == 6


def test_blank_salt_rounds_fall_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALT_ROUNDS", "")

    assert Settings(_env_file=None).salt_rounds == DEFAULT_SALT_ROUNDS


def test_prefixed_fields_and_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROVISIONER_USERS_KEY", "admins")
    monkeypatch.setenv("PROVISIONER_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.users_key == "admins"
    assert settings.log_level == "DEBUG"
