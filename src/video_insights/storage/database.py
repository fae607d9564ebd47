"""Database operations and session management."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from ..analyzer.exceptions import StorageError
from ..config import settings
from .models import Preference, utc_now

# Create engine lazily
_engine: Engine | None = None


def get_engine() -> Engine:
    """Get or create database engine."""
    global _engine
    if _engine is None:
        settings.database_path.parent.mkdir(parents=True, exist_ok=True)
        _engine = create_engine(
            f"sqlite:///{settings.database_path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return _engine


def reset_engine() -> None:
    """Dispose the engine so the next call reopens the configured database."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def init_db(engine: Engine | None = None) -> None:
    """Initialize database tables."""
    SQLModel.metadata.create_all(engine or get_engine())


@contextmanager
def get_session(engine: Engine | None = None) -> Generator[Session, None, None]:
    """Get database session context manager."""
    with Session(engine or get_engine()) as session:
        yield session


class DatabasePreferenceStore:
    """Preference store persisted in the SQLite database."""

    def __init__(self, engine: Engine | None = None):
        self.engine = engine or get_engine()
        try:
            init_db(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to open preference store: {e}") from e

    def get(self, key: str) -> str | None:
        try:
            with get_session(self.engine) as session:
                pref = session.get(Preference, key)
                return pref.value if pref else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read preference '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with get_session(self.engine) as session:
                pref = session.get(Preference, key)
                if pref is None:
                    pref = Preference(key=key, value=value)
                else:
                    pref.value = value
                    pref.updated_at = utc_now()
                session.add(pref)
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write preference '{key}': {e}") from e
