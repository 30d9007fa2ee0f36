"""Database helpers and base objects."""

from .base import Base, metadata
from .session import SessionLocal, create_session_factory, engine

__all__ = [
    "Base",
    "SessionLocal",
    "create_session_factory",
    "engine",
    "metadata",
]
