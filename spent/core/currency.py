"""
Currency display settings and amount formatting.

Amounts are handled as integer minor units (cents) and rendered with the
grouping and decimal separator conventions of a locale, using Babel's CLDR
data. Formatting is pure: no conversion, no exchange rates, no state.
"""

import copy
import math
from decimal import Decimal, localcontext
from enum import Enum
from functools import lru_cache
from typing import Union

from babel import Locale, UnknownLocaleError
from babel.numbers import NumberPattern
from pydantic import BaseModel, ConfigDict, Field

# U+2212, not the ASCII hyphen
MINUS_SIGN = "−"

# Conventions used when a locale identifier is unknown or malformed
FALLBACK_LOCALE = "en_US"

FRACTION_DIGITS = 2


class SymbolPosition(str, Enum):
    """Placement of the currency symbol relative to the amount."""

    BEFORE = "before"
    AFTER = "after"


class CurrencySettings(BaseModel):
    """
    Active display configuration for amounts.

    Instances are immutable and replaced wholesale on update.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=3, max_length=3, description="ISO 4217 currency code")
    symbol: str = Field(min_length=1, description="Display symbol, e.g. '$' or 'kr'")
    position: SymbolPosition = Field(description="Symbol before or after the amount")
    locale: str = Field(min_length=1, description="Locale identifier, e.g. 'en-US'")


DEFAULT_CURRENCY = CurrencySettings(
    code="USD",
    symbol="$",
    position=SymbolPosition.BEFORE,
    locale="en-US",
)


@lru_cache(maxsize=64)
def resolve_locale(identifier: str) -> Locale:
    """
    Resolve a locale identifier to a Babel locale.

    Accepts both BCP 47 style ("de-DE") and POSIX style ("de_DE")
    identifiers. Unknown or malformed identifiers resolve to
    FALLBACK_LOCALE instead of raising.

    Args:
        identifier: Locale identifier

    Returns:
        Babel Locale instance
    """
    for separator in ("-", "_"):
        try:
            return Locale.parse(identifier, sep=separator)
        except (UnknownLocaleError, ValueError, TypeError):
            continue
    return Locale.parse(FALLBACK_LOCALE)


@lru_cache(maxsize=64)
def _fixed_point_pattern(locale: str) -> NumberPattern:
    """Locale decimal pattern with exactly FRACTION_DIGITS fraction digits."""
    pattern = copy.copy(resolve_locale(locale).decimal_formats[None])
    pattern.frac_prec = (FRACTION_DIGITS, FRACTION_DIGITS)
    return pattern


def _as_minor_units(amount: Union[int, float, Decimal]) -> int:
    """Validate a minor-unit amount and return it as int."""
    if isinstance(amount, bool):
        raise TypeError("amount must be an integer number of minor units, not bool")

    if isinstance(amount, int):
        return amount

    if isinstance(amount, Decimal):
        if not amount.is_finite():
            raise ValueError(f"amount must be finite, got {amount}")
        if amount != amount.to_integral_value():
            raise ValueError(f"amount must be whole minor units, got {amount}")
        return int(amount)

    if isinstance(amount, float):
        if not math.isfinite(amount):
            raise ValueError(f"amount must be finite, got {amount}")
        if not amount.is_integer():
            raise ValueError(f"amount must be whole minor units, got {amount}")
        return int(amount)

    raise TypeError(f"amount must be an integer number of minor units, got {type(amount).__name__}")


def format_number(value: Decimal, locale: str) -> str:
    """
    Format a non-negative decimal with exactly two fraction digits.

    Args:
        value: Value to format
        locale: Locale identifier

    Returns:
        Locale-grouped number string (e.g., "1.234,56" for de-DE)
    """
    babel_locale = resolve_locale(locale)
    return _fixed_point_pattern(locale).apply(value, babel_locale)


def format_currency(amount: Union[int, float, Decimal], settings: CurrencySettings) -> str:
    """
    Format an amount of minor units for display.

    Args:
        amount: Signed amount in minor units (e.g., cents)
        settings: Currency display settings

    Returns:
        Display string (e.g., "−$5.00" or "1 500,00 kr")

    Raises:
        TypeError: If amount is not a number
        ValueError: If amount is not finite or has fractional minor units

    Examples:
        >>> format_currency(-500, DEFAULT_CURRENCY)
        '−$5.00'
    """
    minor_units = _as_minor_units(amount)
    sign = MINUS_SIGN if minor_units < 0 else ""

    # Exact for any integer size, not only within the default 28 digits
    digits = len(str(abs(minor_units))) + FRACTION_DIGITS
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        magnitude = Decimal(abs(minor_units)).scaleb(-FRACTION_DIGITS)
        formatted = format_number(magnitude, settings.locale)

    if settings.position == SymbolPosition.BEFORE:
        return f"{sign}{settings.symbol}{formatted}"
    return f"{sign}{formatted} {settings.symbol}"
