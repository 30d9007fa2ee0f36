"""Repository utilities for named key-value slots."""

from __future__ import annotations

import copy
from typing import Any

from sqlalchemy.orm import Session

from provisioner.models.kv import KeyValueEntry
from provisioner.repositories.base import BaseRepository


class KeyValueRepository(BaseRepository[KeyValueEntry]):
    """Data-access helper for whole-value reads and writes."""

    def __init__(self) -> None:
        super().__init__(model=KeyValueEntry)

    def get_value(self, session: Session, key: str) -> Any | None:
        """Return the document stored under ``key`` or ``None`` when absent."""

        entry = self.get(session, key)
        if entry is None:
            return None
        return copy.deepcopy(entry.value)

    def put_value(self, session: Session, key: str, value: Any) -> KeyValueEntry:
        """Replace the document under ``key``, creating the slot if needed."""

        entry = self.get(session, key)
        if entry is None:
            return self.add(session, KeyValueEntry(key=key, value=copy.deepcopy(value)))

        entry.value = copy.deepcopy(value)
        session.flush()
        return entry
