"""
Pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Optional

import pytest

from spent.core.catalog import find_currency_option
from spent.core.config import Settings
from spent.core.currency import CurrencySettings, SymbolPosition
from spent.core.storage import KeyValueStorage, SqlKeyValueStorage, StorageError


class RecordingStorage(KeyValueStorage):
    """In-memory storage that records every write."""

    available = True

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value


class FailingStorage(KeyValueStorage):
    """Storage whose backend fails on every call."""

    available = True

    def get(self, key: str) -> Optional[str]:
        raise StorageError("database is locked")

    def set(self, key: str, value: str) -> None:
        raise StorageError("database is locked")


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """SQLite database URL in a temporary directory."""
    return f"sqlite:///{tmp_path / 'data' / 'spent.db'}"


@pytest.fixture
def sql_storage(database_url: str) -> SqlKeyValueStorage:
    """Durable storage backed by a temporary SQLite file."""
    return SqlKeyValueStorage.from_url(database_url)


@pytest.fixture
def recording_storage() -> RecordingStorage:
    """Storage that records writes."""
    return RecordingStorage()


@pytest.fixture
def failing_storage() -> FailingStorage:
    """Storage that always fails."""
    return FailingStorage()


@pytest.fixture
def test_settings(database_url: str) -> Settings:
    """Application settings pointing at the temporary database."""
    return Settings(database_url=database_url, persist_currency=True)


@pytest.fixture
def usd_settings() -> CurrencySettings:
    """Default US dollar settings."""
    return CurrencySettings(
        code="USD", symbol="$", position=SymbolPosition.BEFORE, locale="en-US"
    )


@pytest.fixture
def sek_settings() -> CurrencySettings:
    """Swedish krona settings with the symbol after the amount."""
    return CurrencySettings(
        code="SEK", symbol="kr", position=SymbolPosition.AFTER, locale="sv-SE"
    )


@pytest.fixture
def eur_settings() -> CurrencySettings:
    """Euro settings taken from the catalog."""
    return find_currency_option("EUR").to_settings()
