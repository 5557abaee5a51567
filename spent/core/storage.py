"""
Key-value storage backends for durable settings.

Two implementations share one interface: a SQLAlchemy-backed durable
store and a no-op stub used when no persistence-capable environment is
available (persistence disabled, unwritable data directory, broken
database URL). The backend is chosen once, at store construction time.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from spent.core.config import Settings
from spent.core.logging import get_logger
from spent.db.base import Base
from spent.db.models import AppState

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when a storage backend fails to read or write."""

    pass


class KeyValueStorage:
    """Base class for key-value storage backends."""

    #: Whether values written here survive a restart
    available: bool = False

    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored text or None if the key is absent

        Raises:
            StorageError: If the backend fails
        """
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, overwriting any previous value.

        Args:
            key: Storage key
            value: Serialized value

        Raises:
            StorageError: If the backend fails
        """
        raise NotImplementedError


class NullStorage(KeyValueStorage):
    """
    Storage stub for environments without a persistence backend.

    Nothing is stored; every read reports an absent key.
    """

    available = False

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        logger.debug(f"Persistence unavailable, not storing key: {key}")


class SqlKeyValueStorage(KeyValueStorage):
    """
    Durable key-value storage in a relational database.

    Uses the app_state table; SQLite by default.
    """

    available = True

    def __init__(self, engine: Engine) -> None:
        """
        Initialize storage and create tables if needed.

        Args:
            engine: SQLAlchemy engine

        Raises:
            StorageError: If the schema cannot be created
        """
        self.engine = engine
        try:
            Base.metadata.create_all(engine)
        except SQLAlchemyError as e:
            engine.dispose()
            raise StorageError(f"Failed to initialize storage: {e}") from e

    @classmethod
    def from_url(cls, database_url: str) -> "SqlKeyValueStorage":
        """
        Create storage for a database URL.

        Creates the parent directory of a SQLite database file.

        Args:
            database_url: SQLAlchemy database URL

        Returns:
            Storage instance

        Raises:
            StorageError: If the database cannot be opened
        """
        if database_url.startswith("sqlite:///"):
            db_path = database_url.replace("sqlite:///", "", 1)
            if db_path and db_path != ":memory:":
                try:
                    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise StorageError(f"Cannot create database directory: {e}") from e

        try:
            engine = create_engine(database_url, echo=False)
        except (SQLAlchemyError, ImportError, ValueError) as e:
            raise StorageError(f"Invalid database URL: {e}") from e

        return cls(engine)

    def get(self, key: str) -> Optional[str]:
        try:
            with Session(self.engine) as session:
                state = session.get(AppState, key)
                return state.value if state else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key {key}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with Session(self.engine) as session:
                state = session.get(AppState, key)

                if state:
                    state.value = value
                    state.updated_at = datetime.now()
                else:
                    state = AppState(key=key, value=value, updated_at=datetime.now())
                    session.add(state)

                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write key {key}: {e}") from e


def open_storage(settings: Settings) -> KeyValueStorage:
    """
    Select the storage backend for the current environment.

    Falls back to NullStorage when persistence is disabled or the
    configured database cannot be opened.

    Args:
        settings: Application settings

    Returns:
        Storage backend
    """
    if not settings.persist_currency:
        logger.info("Currency persistence disabled, settings are kept in memory only")
        return NullStorage()

    try:
        storage = SqlKeyValueStorage.from_url(settings.database_url)
    except StorageError as e:
        logger.warning(
            f"Durable storage unavailable, settings are kept in memory only: {e}",
            extra={"database_url": settings.database_url},
        )
        return NullStorage()

    logger.debug("Durable storage ready", extra={"database_url": settings.database_url})
    return storage
