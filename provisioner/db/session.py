from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from provisioner.core.config import get_settings


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Build a session factory bound to a fresh engine for ``database_url``."""
    bound_engine = create_engine(database_url, echo=False, future=True)
    return sessionmaker(bind=bound_engine, autocommit=False, autoflush=False)


settings = get_settings()

engine = create_engine(settings.database_url, echo=False, future=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
