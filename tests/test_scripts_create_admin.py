"""Tests for the create-admin command."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from provisioner.core.config import get_settings
from provisioner.core.security import CredentialPolicy
from provisioner.scripts import create_admin
from provisioner.services.store import SqlKeyValueStore
from provisioner.services.terminal import Terminal


@pytest.fixture(autouse=True)
def low_cost_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("PROVISIONER_SALT_ROUNDS", "4")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def session_local(monkeypatch: pytest.MonkeyPatch) -> sessionmaker[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    monkeypatch.setattr(create_admin, "SessionLocal", factory)
    return factory


def _stored_users(session_local: sessionmaker[Session]) -> list[dict]:
    return SqlKeyValueStore(session_local).get("users")


def test_main_creates_admin_from_arguments(
    session_local: sessionmaker[Session], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = create_admin.main(
        ["--username", "admin", "--email", "admin@example.com", "--password", "secret"]
    )

    assert exit_code == 0
    users = _stored_users(session_local)
    assert len(users) == 1
    assert users[0]["username"] == "admin"
    assert users[0]["admin"] is True
    assert users[0]["password"].startswith("$2b$04$")
    assert CredentialPolicy(cost_factor=4).verify("secret", users[0]["password"])
    assert f"Admin user created with id={users[0]['userId']}" in capsys.readouterr().out


def test_main_accepts_equals_style_arguments(session_local: sessionmaker[Session]) -> None:
    exit_code = create_admin.main(
        ["--username=admin", "--email=admin@example.com", "--password=secret"]
    )

    assert exit_code == 0
    assert _stored_users(session_local)[0]["email"] == "admin@example.com"


def test_main_reports_duplicates(session_local: sessionmaker[Session]) -> None:
    argv = ["--username", "admin", "--email", "admin@example.com", "--password", "secret"]
    assert create_admin.main(argv) == 0

    assert create_admin.main(argv) == 3
    assert len(_stored_users(session_local)) == 1


def test_main_rejects_invalid_interactive_email(session_local: sessionmaker[Session]) -> None:
    terminal = Terminal(stdin=io.StringIO("admin\nnot-an-email\n"), stdout=io.StringIO())

    assert create_admin.main([], terminal=terminal) == 2
    assert _stored_users(session_local) is None


def test_main_uses_database_url_override(tmp_path: Path) -> None:
    database_path = tmp_path / "store.db"

    exit_code = create_admin.main(
        [
            "--username",
            "admin",
            "--email",
            "admin@example.com",
            "--password",
            "secret",
            "--database-url",
            f"sqlite+pysqlite:///{database_path}",
        ]
    )

    assert exit_code == 0
    assert database_path.exists()


def test_main_reports_version(capsys: pytest.CaptureFixture[str]) -> None:
    settings = get_settings()

    with pytest.raises(SystemExit) as excinfo:
        create_admin.main(["--version"])

    assert excinfo.value.code == 0
    assert settings.app_version in capsys.readouterr().out
