"""Command for provisioning an administrator account in the user store."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.orm import Session, sessionmaker

from provisioner.core.config import Settings, get_settings
from provisioner.core.errors import PersistenceError
from provisioner.core.security import CredentialPolicy
from provisioner.db import SessionLocal, create_session_factory
from provisioner.services.directory import UserDirectory
from provisioner.services.provisioner import AccountProvisioner, ProvisioningState
from provisioner.services.store import SqlKeyValueStore
from provisioner.services.terminal import Terminal

logger = logging.getLogger(__name__)

EXIT_CODES: dict[ProvisioningState, int] = {
    ProvisioningState.COMPLETED: 0,
    ProvisioningState.FAILED_VALIDATION: 2,
    ProvisioningState.FAILED_DUPLICATE: 3,
    ProvisioningState.FAILED_PERSISTENCE: 4,
}
EXIT_UNEXPECTED = 1


def build_provisioner(
    settings: Settings,
    session_factory: sessionmaker[Session],
    terminal: Terminal | None = None,
) -> AccountProvisioner:
    """Wire the SQL-backed directory and credential policy for ``settings``."""

    store = SqlKeyValueStore(session_factory)
    store.ensure_schema()
    directory = UserDirectory(store, key=settings.users_key)
    return AccountProvisioner(
        directory,
        CredentialPolicy.from_settings(settings),
        terminal=terminal,
    )


def _resolve_cli_args(settings: Settings, argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{settings.app_name}: create a new admin user")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {settings.app_version}"
    )
    parser.add_argument("--username", help="Username for the admin user")
    parser.add_argument("--email", help="Email address for the admin user")
    parser.add_argument(
        "--password",
        help="Password for the admin user (omit any of the three to be prompted for all)",
    )
    parser.add_argument(
        "--database-url",
        help="SQLAlchemy URL of the user store (defaults to PROVISIONER_DATABASE_URL)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, *, terminal: Terminal | None = None) -> int:
    settings = get_settings()
    args = _resolve_cli_args(settings, argv)
    logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")

    session_factory = (
        create_session_factory(args.database_url) if args.database_url else SessionLocal
    )

    try:
        provisioner = build_provisioner(settings, session_factory, terminal)
        result = provisioner.run(args.username, args.email, args.password)
    except PersistenceError as exc:
        logger.error("Error creating user: %s", exc)
        return EXIT_CODES[ProvisioningState.FAILED_PERSISTENCE]
    except KeyboardInterrupt:
        logger.error("Aborted.")
        return EXIT_UNEXPECTED
    except Exception as exc:
        logger.error("Unexpected error: %s", exc)
        return EXIT_UNEXPECTED

    if result.account is not None:
        print(f"Admin user created with id={result.account.id}")
    return EXIT_CODES[result.state]


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
