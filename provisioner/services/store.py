"""Key-value persistence backends for the user collection."""

from __future__ import annotations

import copy
import logging
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from provisioner.core.errors import PersistenceError
from provisioner.db.base import Base
from provisioner.models.kv import KeyValueEntry
from provisioner.repositories.kv import KeyValueRepository

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Whole-value store; each ``set`` is assumed to be atomic."""

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key`` or ``None``."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under ``key``."""
        ...


class SqlKeyValueStore:
    """SQLAlchemy-backed store keeping one JSON document per key."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._repository = KeyValueRepository()

    def ensure_schema(self) -> None:
        """Create the backing table when it does not exist yet."""

        try:
            with self._session_factory() as session:
                bind = session.get_bind()
                Base.metadata.create_all(bind=bind, tables=[KeyValueEntry.__table__])
        except SQLAlchemyError as exc:
            raise PersistenceError("schema", KeyValueEntry.__tablename__, str(exc)) from exc

    def get(self, key: str) -> Any | None:
        try:
            with self._session_factory() as session:
                return self._repository.get_value(session, key)
        except SQLAlchemyError as exc:
            logger.error("Failed to read key %s: %s", key, exc)
            raise PersistenceError("read", key, str(exc)) from exc

    def set(self, key: str, value: Any) -> None:
        try:
            with self._session_factory() as session:
                with session.begin():
                    self._repository.put_value(session, key, value)
        except SQLAlchemyError as exc:
            logger.error("Failed to write key %s: %s", key, exc)
            raise PersistenceError("write", key, str(exc)) from exc
        logger.debug("Stored key %s", key)


class InMemoryKeyValueStore:
    """Process-local store used for dry runs and tests."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)
