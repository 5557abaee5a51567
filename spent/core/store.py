"""
Observable store for the active currency settings.

Holds exactly one CurrencySettings value, notifies subscribers on every
change and persists each new value to key-value storage. Storage failures
never reach callers: reads fall back to DEFAULT_CURRENCY, writes are
logged and dropped while the in-memory value stays updated.
"""

from typing import Callable, Optional

from pydantic import ValidationError

from spent.core.config import Settings
from spent.core.config import settings as default_settings
from spent.core.currency import DEFAULT_CURRENCY, CurrencySettings
from spent.core.logging import audit_logger, get_logger
from spent.core.storage import KeyValueStorage, StorageError, open_storage

logger = get_logger(__name__)

Observer = Callable[[CurrencySettings], None]
Unsubscribe = Callable[[], None]

DEFAULT_STORAGE_KEY = "spent_currency"


class CurrencySettingsStore:
    """
    Process-wide holder of the active currency settings.

    Lifecycle: construct with a storage backend, call initialize() once,
    then use get(), set() and subscribe().

    Usage:
        store = CurrencySettingsStore(spent.core.storage.NullStorage())
        store.initialize()
        unsubscribe = store.subscribe(print)
        store.set(spent.core.catalog.find_currency_option("EUR"))
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        """
        Initialize store.

        Args:
            storage: Backend used to persist the active settings
            key: Storage key of the persisted record
        """
        self.storage = storage
        self.key = key
        self._value: CurrencySettings = DEFAULT_CURRENCY
        self._observers: list[tuple[object, Observer]] = []

    def initialize(self) -> CurrencySettings:
        """
        Load the persisted settings, falling back to DEFAULT_CURRENCY.

        Never raises. Missing, unreadable or invalid records are treated
        as absent.

        Returns:
            The settings that are now active
        """
        self._value = self._load()
        logger.debug(
            "Currency settings initialized",
            extra={"code": self._value.code, "persistent": self.storage.available},
        )
        return self._value

    def _load(self) -> CurrencySettings:
        try:
            stored = self.storage.get(self.key)
        except StorageError as e:
            logger.warning(f"Failed to read stored currency, using default: {e}")
            return DEFAULT_CURRENCY

        if not stored:
            return DEFAULT_CURRENCY

        try:
            return CurrencySettings.model_validate_json(stored)
        except ValidationError as e:
            logger.warning(
                f"Failed to parse stored currency, using default: {e.error_count()} error(s)",
                extra={"storage_key": self.key},
            )
            return DEFAULT_CURRENCY

    def get(self) -> CurrencySettings:
        """Return the active settings."""
        return self._value

    def set(self, new_value: CurrencySettings) -> None:
        """
        Replace the active settings.

        The new value is persisted first, then every subscriber is
        notified in subscription order. A failed write is logged and
        does not undo the change.

        Args:
            new_value: Complete replacement settings (catalog entries are
                reduced to their settings fields)
        """
        if not isinstance(new_value, CurrencySettings):
            raise TypeError(
                f"Expected CurrencySettings, got {type(new_value).__name__}"
            )

        if type(new_value) is not CurrencySettings:
            new_value = CurrencySettings(
                code=new_value.code,
                symbol=new_value.symbol,
                position=new_value.position,
                locale=new_value.locale,
            )

        previous = self._value
        self._value = new_value

        persisted = self._persist(new_value)
        audit_logger.log_currency_changed(
            previous_code=previous.code,
            code=new_value.code,
            persisted=persisted,
        )

        self._notify(new_value)

    def _persist(self, value: CurrencySettings) -> bool:
        if not self.storage.available:
            return False

        try:
            self.storage.set(self.key, value.model_dump_json())
        except StorageError as e:
            logger.warning(f"Failed to persist currency settings: {e}")
            return False

        return True

    def _notify(self, value: CurrencySettings) -> None:
        # Snapshot so observers may unsubscribe while being notified
        for _, observer in list(self._observers):
            try:
                observer(value)
            except Exception as e:
                audit_logger.log_error("currency_observer", e, code=value.code)

    def subscribe(self, observer: Observer) -> Unsubscribe:
        """
        Register an observer of the active settings.

        The observer is called immediately with the current value and
        then after every set().

        Args:
            observer: Callable receiving the new settings

        Returns:
            Function that removes this observer again
        """
        observer(self._value)
        # One entry per subscription, removed by identity
        entry = (object(), observer)
        self._observers.append(entry)

        def unsubscribe() -> None:
            for index, registered in enumerate(self._observers):
                if registered is entry:
                    del self._observers[index]
                    return

        return unsubscribe

    @property
    def observer_count(self) -> int:
        """Number of registered observers."""
        return len(self._observers)


def create_currency_store(settings: Optional[Settings] = None) -> CurrencySettingsStore:
    """
    Create and initialize the currency store for this environment.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        Initialized store
    """
    settings = settings or default_settings
    store = CurrencySettingsStore(open_storage(settings), key=settings.currency_storage_key)
    store.initialize()
    return store
