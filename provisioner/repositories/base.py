"""Shared repository helpers used by concrete persistence classes."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Small abstraction around SQLAlchemy session interactions."""

    def __init__(self, model: type[T]):
        self._model = model

    def add(self, session: Session, instance: T) -> T:
        """Stage a new instance and flush it so database defaults are populated."""

        session.add(instance)
        session.flush()
        return instance

    def get(self, session: Session, identifier: Any) -> T | None:
        """Fetch a single instance by primary key."""

        return session.get(self._model, identifier)
