"""User directory over the persisted account collection."""

from __future__ import annotations

import logging
from typing import Any

from provisioner.core.errors import PersistenceError
from provisioner.models.account import Account
from provisioner.services.store import KeyValueStore

logger = logging.getLogger(__name__)


class UserDirectory:
    """Reads and mutates the account collection stored under one key.

    The collection is read and written wholesale. Checks and writes are not
    transactional across processes: two concurrent runs may both pass the
    uniqueness checks and both append. Closing that gap needs a
    compare-and-set primitive on the store.
    """

    def __init__(self, store: KeyValueStore, key: str = "users") -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def _load(self) -> list[dict[str, Any]] | None:
        raw = self._store.get(self._key)
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise PersistenceError(
                "read", self._key, f"expected a list of accounts, found {type(raw).__name__}"
            )
        return raw

    def exists(self) -> bool:
        """Return True when the collection key holds a value, even an empty list."""

        return self._load() is not None

    def username_taken(self, username: str) -> bool:
        records = self._load()
        if records is None:
            return False
        return any(record.get("username") == username for record in records)

    def email_taken(self, email: str) -> bool:
        records = self._load()
        if records is None:
            return False
        return any(record.get("email") == email for record in records)

    def list_accounts(self) -> list[Account]:
        records = self._load()
        if records is None:
            return []
        return [Account.from_dict(record) for record in records]

    def create_initial(self, account: Account) -> None:
        """Write a one-element collection. Only valid while the key is absent."""

        self._store.set(self._key, [account.to_dict()])
        logger.info("Initialised user collection '%s'", self._key)

    def append(self, account: Account) -> None:
        """Read the collection, add ``account`` and write the whole list back."""

        records = self._load()
        if records is None:
            raise PersistenceError("append", self._key, "user collection does not exist")
        records.append(account.to_dict())
        self._store.set(self._key, records)
        logger.debug("Appended account to '%s' (%d total)", self._key, len(records))

    def upsert_append(self, account: Account) -> None:
        """Create the collection with ``account`` or append it to the existing one."""

        if self.exists():
            self.append(account)
        else:
            self.create_initial(account)
