"""
Catalog of supported currencies and their default display conventions.

The catalog seeds currency selection lists. Entries are read-only and
structurally compatible with CurrencySettings.
"""

from collections import Counter
from typing import Iterable, Optional

from pydantic import Field

from spent.core.currency import CurrencySettings, SymbolPosition


class CatalogError(Exception):
    """Raised when the currency catalog violates its invariants."""

    pass


class CurrencyOption(CurrencySettings):
    """Catalog entry: currency settings plus a human-readable name."""

    name: str = Field(min_length=1, description="Display name, e.g. 'US Dollar'")

    def to_settings(self) -> CurrencySettings:
        """Return the plain settings part of this entry."""
        return CurrencySettings(
            code=self.code,
            symbol=self.symbol,
            position=self.position,
            locale=self.locale,
        )


_BEFORE = SymbolPosition.BEFORE
_AFTER = SymbolPosition.AFTER

CURRENCY_OPTIONS: tuple[CurrencyOption, ...] = (
    CurrencyOption(code="USD", symbol="$", name="US Dollar", position=_BEFORE, locale="en-US"),
    CurrencyOption(code="EUR", symbol="€", name="Euro", position=_AFTER, locale="de-DE"),
    CurrencyOption(code="GBP", symbol="£", name="British Pound", position=_BEFORE, locale="en-GB"),
    CurrencyOption(code="JPY", symbol="¥", name="Japanese Yen", position=_BEFORE, locale="ja-JP"),
    CurrencyOption(code="CAD", symbol="CA$", name="Canadian Dollar", position=_BEFORE, locale="en-CA"),
    CurrencyOption(code="AUD", symbol="A$", name="Australian Dollar", position=_BEFORE, locale="en-AU"),
    CurrencyOption(code="CHF", symbol="CHF", name="Swiss Franc", position=_BEFORE, locale="de-CH"),
    CurrencyOption(code="CNY", symbol="¥", name="Chinese Yuan", position=_BEFORE, locale="zh-CN"),
    CurrencyOption(code="INR", symbol="₹", name="Indian Rupee", position=_BEFORE, locale="en-IN"),
    CurrencyOption(code="BRL", symbol="R$", name="Brazilian Real", position=_BEFORE, locale="pt-BR"),
    CurrencyOption(code="MXN", symbol="MX$", name="Mexican Peso", position=_BEFORE, locale="es-MX"),
    CurrencyOption(code="ZAR", symbol="R", name="South African Rand", position=_BEFORE, locale="en-ZA"),
    CurrencyOption(code="KRW", symbol="₩", name="South Korean Won", position=_BEFORE, locale="ko-KR"),
    CurrencyOption(code="SEK", symbol="kr", name="Swedish Krona", position=_AFTER, locale="sv-SE"),
    CurrencyOption(code="NOK", symbol="kr", name="Norwegian Krone", position=_AFTER, locale="nb-NO"),
    CurrencyOption(code="DKK", symbol="kr", name="Danish Krone", position=_AFTER, locale="da-DK"),
    CurrencyOption(code="PLN", symbol="zł", name="Polish Złoty", position=_AFTER, locale="pl-PL"),
    CurrencyOption(code="RUB", symbol="₽", name="Russian Ruble", position=_AFTER, locale="ru-RU"),
)


def find_currency_option(
    code: str, options: Iterable[CurrencyOption] = CURRENCY_OPTIONS
) -> Optional[CurrencyOption]:
    """
    Look up a catalog entry by currency code.

    Args:
        code: Currency code (case-insensitive)
        options: Catalog to search

    Returns:
        Matching entry or None if the code is not in the catalog
    """
    wanted = code.strip().upper()
    for option in options:
        if option.code == wanted:
            return option
    return None


def validate_catalog(options: Iterable[CurrencyOption] = CURRENCY_OPTIONS) -> None:
    """
    Check that every currency code appears only once in the catalog.

    Args:
        options: Catalog to validate

    Raises:
        CatalogError: If duplicate codes are found
    """
    counts = Counter(option.code for option in options)
    duplicates = sorted(code for code, count in counts.items() if count > 1)
    if duplicates:
        raise CatalogError(f"Duplicate currency codes in catalog: {', '.join(duplicates)}")
