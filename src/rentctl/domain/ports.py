"""Collaborator protocols consumed by the pricing service.

Implementations live in :mod:`rentctl.infrastructure`; tests substitute
fakes or stubs.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol

from rentctl.domain.models import Car


class CarRepository(Protocol):
    """Resolves a car by id. Raises ``CarNotFoundError`` when absent."""

    async def find(self, item_id: str) -> Car: ...


class Clock(Protocol):
    """Protocol for getting the current time. Inject a fake in tests."""

    def now(self) -> datetime: ...


class CurrencyFormat(Protocol):
    def format(self, amount: Decimal) -> str: ...


class DateFormat(Protocol):
    def format(self, value: date) -> str: ...


class PositionPicker(Protocol):
    """Returns an index into a non-empty sequence."""

    def __call__(self, items: Sequence[Any], /) -> int: ...
