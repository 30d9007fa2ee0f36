"""Alembic environment for the provisioner key-value schema.

The database URL comes from ``PROVISIONER_DATABASE_URL`` unless overridden
with ``alembic -x database_url=...``.
"""

from __future__ import annotations

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from provisioner.core.config import get_settings
from provisioner.db import base

# Import models so Alembic picks them up for autogenerate
from provisioner.models import kv  # noqa: F401  # pylint: disable=unused-import

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

database_url = context.get_x_argument(as_dictionary=True).get(
    "database_url", get_settings().database_url
)
target_metadata = base.metadata


def run_migrations_offline() -> None:
    """Emit SQL for the kv_store schema without connecting."""

    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations against ``database_url``."""

    connectable = engine_from_config(
        {"sqlalchemy.url": database_url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
