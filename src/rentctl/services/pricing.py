"""PricingService — car selection, age-based pricing, and transaction assembly.

This is the rental core. It depends only on the collaborator protocols in
:mod:`rentctl.domain.ports`:

- a car repository with ``async find(car_id)``,
- a clock with ``now()``,
- currency and date formatters,
- a random-position strategy (defaults to :func:`random.randrange`).

INVARIANT: Errors are never caught here. Repository failures, empty
categories, and uncovered ages surface to the caller unchanged.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from rentctl.domain.errors import EmptyCategoryError, RentalPeriodError
from rentctl.domain.models import Car, CarCategory, Customer, Transaction
from rentctl.domain.tax import DEFAULT_TAX_BRACKETS, TaxBracket, find_tax_bracket
from rentctl.infrastructure.clock import SystemClock
from rentctl.infrastructure.formatting import CurrencyFormatter, DateFormatter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rentctl.domain.ports import (
        CarRepository,
        Clock,
        CurrencyFormat,
        DateFormat,
        PositionPicker,
    )

logger = logging.getLogger(__name__)


def random_position(items: Sequence[Any]) -> int:
    """Uniform index into *items*."""
    return random.randrange(len(items))


class PricingService:
    """Prices and assembles rentals for a single car repository."""

    def __init__(
        self,
        car_repository: CarRepository,
        *,
        clock: Clock | None = None,
        currency_format: CurrencyFormat | None = None,
        date_format: DateFormat | None = None,
        tax_brackets: Iterable[TaxBracket] | None = None,
        position_picker: PositionPicker | None = None,
    ) -> None:
        self.car_repository = car_repository
        self.clock: Clock = clock or SystemClock()
        self.currency_format: CurrencyFormat = currency_format or CurrencyFormatter()
        self.date_format: DateFormat = date_format or DateFormatter()
        self._position_picker: PositionPicker = position_picker or random_position
        self._taxes_based_on_age: tuple[TaxBracket, ...] = tuple(
            DEFAULT_TAX_BRACKETS if tax_brackets is None else tax_brackets
        )

    @property
    def taxes_based_on_age(self) -> tuple[TaxBracket, ...]:
        """Ordered bracket table; first match wins."""
        return self._taxes_based_on_age

    @taxes_based_on_age.setter
    def taxes_based_on_age(self, brackets: Iterable[TaxBracket]) -> None:
        self._taxes_based_on_age = tuple(brackets)

    # ------------------------------------------------------------------
    # Car selection
    # ------------------------------------------------------------------

    def get_random_position_from_array(self, items: Sequence[Any]) -> int:
        """Return an index in ``[0, len(items) - 1]``."""
        if not items:
            raise EmptyCategoryError()
        return self._position_picker(items)

    def choose_random_car(self, category: CarCategory) -> str:
        if not category.car_ids:
            raise EmptyCategoryError(category.name)
        index = self.get_random_position_from_array(category.car_ids)
        return category.car_ids[index]

    async def get_available_car(self, category: CarCategory) -> Car:
        """Pick a car id from *category* and resolve it through the repository.

        "Available" means resolvable; no reservation state is consulted.
        """
        car_id = self.choose_random_car(category)
        logger.debug("Chose car %s from category %s", car_id, category.name or category.id)
        return await self.car_repository.find(car_id)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def tax_multiplier(self, customer: Customer) -> Decimal:
        return find_tax_bracket(self.taxes_based_on_age, customer.age).then

    def final_price(self, customer: Customer, category: CarCategory, number_of_days: int) -> Decimal:
        """Unformatted ``price * multiplier * days``."""
        return category.price * self.tax_multiplier(customer) * number_of_days

    def calculate_final_price(
        self, customer: Customer, category: CarCategory, number_of_days: int
    ) -> str:
        """Final price for the rental, formatted as currency."""
        return self.currency_format.format(self.final_price(customer, category, number_of_days))

    # ------------------------------------------------------------------
    # Rental
    # ------------------------------------------------------------------

    async def rent(
        self, customer: Customer, category: CarCategory, number_of_days: int
    ) -> Transaction:
        """Select a car, price it, and return the transaction receipt.

        The due date is ``today + number_of_days`` in calendar days. A
        period reaching past :attr:`datetime.date.max` raises
        :class:`RentalPeriodError`.
        """
        car = await self.get_available_car(category)
        amount = self.calculate_final_price(customer, category, number_of_days)

        today = self.clock.now().date()
        try:
            due = today + timedelta(days=number_of_days)
        except OverflowError as exc:
            raise RentalPeriodError(number_of_days) from exc
        due_date = self.date_format.format(due)

        return Transaction(customer=customer, car=car, amount=amount, due_date=due_date)
