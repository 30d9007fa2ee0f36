"""Account record stored inside the user collection."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Account:
    """A provisioned identity with its credential hash and admin flag."""

    id: str
    username: str
    email: str
    credential_hash: str
    access_to: tuple[str, ...] = field(default_factory=tuple)
    is_admin: bool = True
    is_verified: bool = True

    @classmethod
    def new_admin(cls, *, username: str, email: str, credential_hash: str) -> Account:
        """Build a verified administrator with a fresh identifier and no access grants."""
        return cls(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            credential_hash=credential_hash,
            access_to=(),
            is_admin=True,
            is_verified=True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the field names the panel reads from the store."""
        return {
            "userId": self.id,
            "username": self.username,
            "email": self.email,
            "password": self.credential_hash,
            "accessTo": list(self.access_to),
            "admin": self.is_admin,
            "verified": self.is_verified,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        return cls(
            id=data["userId"],
            username=data["username"],
            email=data["email"],
            credential_hash=data["password"],
            access_to=tuple(data.get("accessTo") or ()),
            is_admin=bool(data.get("admin", False)),
            is_verified=bool(data.get("verified", False)),
        )
