"""Core application modules."""

from spent.core.config import settings
from spent.core.currency import (
    DEFAULT_CURRENCY,
    CurrencySettings,
    SymbolPosition,
    format_currency,
)
from spent.core.catalog import CURRENCY_OPTIONS, CurrencyOption, find_currency_option
from spent.core.logging import get_logger, setup_logging, audit_logger
from spent.core.store import CurrencySettingsStore, create_currency_store

__all__ = [
    "settings",
    "get_logger",
    "setup_logging",
    "audit_logger",
    "DEFAULT_CURRENCY",
    "CurrencySettings",
    "SymbolPosition",
    "format_currency",
    "CURRENCY_OPTIONS",
    "CurrencyOption",
    "find_currency_option",
    "CurrencySettingsStore",
    "create_currency_store",
]
