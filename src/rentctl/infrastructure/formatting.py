"""Locale-aware currency and date formatting backed by Babel.

Formatters are small callables-with-state so the pricing service can
receive them by injection and tests can compare against the same
instance the service uses.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from babel.dates import format_date
from babel.numbers import format_currency

DEFAULT_LOCALE = "pt_BR"
DEFAULT_CURRENCY = "BRL"

_CENTS = Decimal("0.01")


class CurrencyFormatter:
    """Format a decimal amount as a currency string with two places."""

    def __init__(self, currency: str = DEFAULT_CURRENCY, locale: str = DEFAULT_LOCALE) -> None:
        self.currency = currency
        self.locale = locale

    def format(self, amount: Decimal | int | float) -> str:
        value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return format_currency(value, self.currency, locale=self.locale)

    def __repr__(self) -> str:
        return f"CurrencyFormatter(currency={self.currency!r}, locale={self.locale!r})"


class DateFormatter:
    """Format a date in one of Babel's named styles (``short`` … ``full``)."""

    def __init__(self, locale: str = DEFAULT_LOCALE, style: str = "long") -> None:
        self.locale = locale
        self.style = style

    def format(self, value: date) -> str:
        return format_date(value, format=self.style, locale=self.locale)

    def __repr__(self) -> str:
        return f"DateFormatter(locale={self.locale!r}, style={self.style!r})"
