"""Fleet — the data root every rental service is built on.

The Fleet owns the three JSON repositories (cars, categories, customers),
the clock, and the locale formatters, all derived from
:class:`~rentctl.config.settings.RentSettings`. It is the single dependency
injected into every service.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rentctl.infrastructure.clock import SystemClock
from rentctl.infrastructure.formatting import CurrencyFormatter, DateFormatter
from rentctl.infrastructure.repository import (
    CarRepository,
    CategoryRepository,
    CustomerRepository,
)

if TYPE_CHECKING:
    from rentctl.config.settings import RentSettings
    from rentctl.domain.ports import Clock

logger = logging.getLogger(__name__)


class Fleet:
    """Repositories, clock, and formatters for one fleet root."""

    def __init__(self, settings: RentSettings, *, clock: Clock | None = None) -> None:
        self.settings = settings
        db = settings.database
        base = settings.database_dir

        self.cars = CarRepository(base / db.cars)
        self.categories = CategoryRepository(base / db.categories)
        self.customers = CustomerRepository(base / db.customers)

        self.clock: Clock = clock or SystemClock()
        pricing = settings.pricing
        self.currency_format = CurrencyFormatter(pricing.currency, pricing.locale)
        self.date_format = DateFormatter(pricing.locale, pricing.date_style)

        logger.debug("Fleet opened at %s", base)

    @property
    def root(self) -> Path:
        return self.settings.root
