"""Repository exports."""

from .kv import KeyValueRepository

__all__ = ["KeyValueRepository"]
