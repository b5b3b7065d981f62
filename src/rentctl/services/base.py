"""BaseService — abstract foundation for fleet-backed services.

Every service receives a :class:`Fleet` at construction time. The Fleet
provides the JSON repositories, the clock, and the locale formatters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rentctl.infrastructure.fleet import Fleet


class BaseService:
    """Abstract base for service-layer classes that read from a fleet.

    Usage::

        class RentalService(BaseService):
            async def quote(self, ...) -> ServiceResult:
                customer = await self._fleet.customers.find(customer_id)
                ...
    """

    def __init__(self, fleet: Fleet) -> None:
        self._fleet = fleet
