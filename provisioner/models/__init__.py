"""Data models package."""

from .account import Account
from .kv import KeyValueEntry

__all__ = ["Account", "KeyValueEntry"]
