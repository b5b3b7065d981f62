"""Tests for RentalService — id-based operations over a fleet."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest

from rentctl.domain.tax import TaxBracket
from rentctl.infrastructure.fleet import Fleet
from rentctl.services.base import BaseService
from rentctl.services.pricing import PricingService
from rentctl.services.rental import RentalService


class TestPricingFactory:
    def test_inherits_base_service(self) -> None:
        assert issubclass(RentalService, BaseService)

    def test_pricing_uses_fleet_collaborators(self, fleet: Fleet) -> None:
        pricing = RentalService(fleet).pricing()
        assert isinstance(pricing, PricingService)
        assert pricing.car_repository is fleet.cars
        assert pricing.clock is fleet.clock
        assert pricing.currency_format is fleet.currency_format
        assert pricing.taxes_based_on_age == fleet.settings.pricing.tax_brackets


class TestQuote:
    @pytest.mark.asyncio
    async def test_quote_success(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).quote("cust-young", "cat-economy", 5)
        assert result.ok, result.error
        assert result.op == "quote"
        assert result.data["multiplier"] == "1.1"
        assert result.data["days"] == 5
        assert result.data["category"] == "Economy"
        assert result.data["amount"] == fleet.currency_format.format(Decimal("206.8"))
        assert result.meta == {"locale": "pt_BR", "currency": "BRL"}

    @pytest.mark.asyncio
    async def test_quote_unknown_customer(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).quote("nobody", "cat-economy", 5)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert "customer" in result.error.message
        assert result.error.detail == {"customer_id": "nobody", "category_id": "cat-economy"}

    @pytest.mark.asyncio
    async def test_quote_unknown_category(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).quote("cust-young", "cat-nope", 5)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert "category" in result.error.message

    @pytest.mark.asyncio
    async def test_quote_age_outside_brackets(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).quote("cust-minor", "cat-economy", 2)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_TAX_BRACKET"
        assert "16" in result.error.message


class TestRent:
    @pytest.mark.asyncio
    async def test_rent_success(self, fleet: Fleet) -> None:
        svc = RentalService(fleet)
        with patch("rentctl.services.pricing.random_position", return_value=1):
            result = await svc.rent("cust-young", "cat-economy", 5)

        assert result.ok, result.error
        assert result.op == "rent"
        assert result.data["car"]["id"] == "car-002"
        assert result.data["customer"]["id"] == "cust-young"
        assert result.data["amount"] == fleet.currency_format.format(Decimal("206.8"))
        assert result.data["due_date"] == "14 de março de 2021"
        assert result.warnings == []

    @pytest.mark.asyncio
    async def test_rent_flags_unavailable_car(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).rent("cust-senior", "cat-suv", 1)
        assert result.ok
        assert result.data["car"]["id"] == "car-003"
        assert len(result.warnings) == 1
        assert "car-003" in result.warnings[0]

    @pytest.mark.asyncio
    async def test_rent_empty_category(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).rent("cust-young", "cat-empty", 1)
        assert result.error is not None
        assert result.error.code == "EMPTY_CATEGORY"

    @pytest.mark.asyncio
    async def test_rent_dangling_car_id(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).rent("cust-young", "cat-ghost", 1)
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert "car-999" in result.error.message

    @pytest.mark.asyncio
    async def test_rent_missing_database(self, fleet: Fleet) -> None:
        (fleet.settings.database_dir / "cars.json").unlink()
        result = await RentalService(fleet).rent("cust-young", "cat-economy", 1)
        assert result.error is not None
        assert result.error.code == "DATABASE_ERROR"

    @pytest.mark.asyncio
    async def test_rent_period_out_of_range(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).rent("cust-young", "cat-economy", 5_000_000)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_PERIOD"
        assert result.error.detail == {"customer_id": "cust-young", "category_id": "cat-economy"}


class TestConfiguredBrackets:
    @pytest.mark.asyncio
    async def test_settings_brackets_apply(self, fleet: Fleet) -> None:
        pricing = fleet.settings.pricing.model_copy(
            update={"tax_brackets": (TaxBracket(from_age=0, to_age=120, then=Decimal("2")),)}
        )
        fleet.settings = fleet.settings.model_copy(update={"pricing": pricing})
        result = await RentalService(fleet).quote("cust-minor", "cat-economy", 1)
        assert result.ok
        assert result.data["multiplier"] == "2"
        assert result.data["amount"] == fleet.currency_format.format(Decimal("75.2"))


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_car(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).get_car("car-001")
        assert result.ok
        assert result.data["name"] == "Fiat Uno"
        assert result.data["release_year"] == 2019

    @pytest.mark.asyncio
    async def test_get_car_missing(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).get_car("car-404")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {"id": "car-404"}

    @pytest.mark.asyncio
    async def test_get_category(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).get_category("cat-suv")
        assert result.ok
        assert result.data["car_ids"] == ["car-003"]
        assert result.data["price"] == "89.9"

    @pytest.mark.asyncio
    async def test_get_customer(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).get_customer("cust-senior")
        assert result.ok
        assert result.data["age"] == 50

    @pytest.mark.asyncio
    async def test_list_categories(self, fleet: Fleet) -> None:
        result = await RentalService(fleet).list_categories()
        assert result.ok
        assert result.data["count"] == 4
        assert [c["id"] for c in result.data["items"]][:2] == ["cat-economy", "cat-suv"]
