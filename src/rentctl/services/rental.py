"""RentalService — id-based quotes, rentals, and lookups over a fleet.

Resolves customers and categories through the fleet repositories, hands
them to :class:`~rentctl.services.pricing.PricingService`, and wraps the
outcome in a :class:`ServiceResult`. Domain errors become failed results;
anything else propagates.
"""

from __future__ import annotations

from typing import Any

import structlog

from rentctl.domain.errors import RentalError
from rentctl.services.base import BaseService
from rentctl.services.pricing import PricingService
from rentctl.services.result import ServiceResult

log = structlog.get_logger(__name__)


class RentalService(BaseService):
    """Rental operations addressed by repository ids."""

    def pricing(self) -> PricingService:
        """Build a pricing service wired to the fleet's collaborators."""
        fleet = self._fleet
        return PricingService(
            fleet.cars,
            clock=fleet.clock,
            currency_format=fleet.currency_format,
            date_format=fleet.date_format,
            tax_brackets=fleet.settings.pricing.tax_brackets,
        )

    def _meta(self) -> dict[str, Any]:
        pricing = self._fleet.settings.pricing
        return {"locale": pricing.locale, "currency": pricing.currency}

    # ------------------------------------------------------------------
    # Pricing operations
    # ------------------------------------------------------------------

    async def quote(self, customer_id: str, category_id: str, days: int) -> ServiceResult:
        """Price a rental without selecting a car."""
        op = "quote"
        pricing = self.pricing()
        try:
            customer = await self._fleet.customers.find(customer_id)
            category = await self._fleet.categories.find(category_id)
            multiplier = pricing.tax_multiplier(customer)
            amount = pricing.calculate_final_price(customer, category, days)
        except RentalError as exc:
            log.debug("quote.failed", code=exc.code, error=str(exc))
            return ServiceResult.failure(
                op, exc, customer_id=customer_id, category_id=category_id
            )

        log.debug("quote.complete", customer_id=customer_id, category_id=category_id, days=days)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "customer_id": customer_id,
                "category_id": category_id,
                "category": category.name,
                "days": days,
                "daily_price": str(category.price),
                "multiplier": str(multiplier),
                "amount": amount,
            },
            meta=self._meta(),
        )

    async def rent(self, customer_id: str, category_id: str, days: int) -> ServiceResult:
        """Select a car from the category and return the transaction receipt."""
        op = "rent"
        warnings: list[str] = []
        try:
            customer = await self._fleet.customers.find(customer_id)
            category = await self._fleet.categories.find(category_id)
            transaction = await self.pricing().rent(customer, category, days)
        except RentalError as exc:
            log.debug("rent.failed", code=exc.code, error=str(exc))
            return ServiceResult.failure(
                op, exc, customer_id=customer_id, category_id=category_id
            )

        if not transaction.car.available:
            warnings.append(f"Car {transaction.car.id} is flagged unavailable in the database")

        log.info(
            "rent.complete",
            customer_id=customer_id,
            car_id=transaction.car.id,
            days=days,
            amount=transaction.amount,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=transaction.model_dump(mode="json"),
            warnings=warnings,
            meta=self._meta(),
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def get_car(self, car_id: str) -> ServiceResult:
        return await self._get("get_car", self._fleet.cars, car_id)

    async def get_category(self, category_id: str) -> ServiceResult:
        return await self._get("get_category", self._fleet.categories, category_id)

    async def get_customer(self, customer_id: str) -> ServiceResult:
        return await self._get("get_customer", self._fleet.customers, customer_id)

    async def list_categories(self) -> ServiceResult:
        op = "list_categories"
        try:
            categories = await self._fleet.categories.find()
        except RentalError as exc:
            return ServiceResult.failure(op, exc)

        items = [c.model_dump(mode="json") for c in categories]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    async def _get(self, op: str, repository: Any, item_id: str) -> ServiceResult:
        try:
            item = await repository.find(item_id)
        except RentalError as exc:
            return ServiceResult.failure(op, exc, id=item_id)
        return ServiceResult(ok=True, op=op, data=item.model_dump(mode="json"))
