"""Shared pytest fixtures and test helpers for rentctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from rentctl.config.settings import RentSettings
from rentctl.domain.models import Car, CarCategory, Customer
from rentctl.infrastructure.clock import FixedClock
from rentctl.infrastructure.fleet import Fleet
from rentctl.infrastructure.repository import write_records

CARS = [
    Car(id="car-001", name="Fiat Uno", release_year=2019),
    Car(id="car-002", name="Chevrolet Onix", release_year=2021),
    Car(id="car-003", name="Jeep Renegade", release_year=2021, available=False),
]

CATEGORIES = [
    CarCategory(
        id="cat-economy",
        name="Economy",
        car_ids=("car-001", "car-002"),
        price=Decimal("37.6"),
    ),
    CarCategory(id="cat-suv", name="SUV", car_ids=("car-003",), price=Decimal("89.9")),
    CarCategory(id="cat-empty", name="Empty", car_ids=(), price=Decimal("10")),
    CarCategory(id="cat-ghost", name="Ghost", car_ids=("car-999",), price=Decimal("10")),
]

CUSTOMERS = [
    Customer(id="cust-young", name="Ana Souza", age=20),
    Customer(id="cust-senior", name="Carla Dias", age=50),
    Customer(id="cust-minor", name="Davi Reis", age=16),
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fleet_root(tmp_path: Path) -> Path:
    """Temporary fleet directory with a populated JSON database.

    This is the single source of truth for the test database contents.
    All fleet-related fixtures (fleet, _isolated_fleet) build on this.
    """
    db_dir = tmp_path / "database"
    write_records(db_dir / "cars.json", CARS)
    write_records(db_dir / "carCategory.json", CATEGORIES)
    write_records(db_dir / "customers.json", CUSTOMERS)
    return tmp_path


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2021-03-09."""
    return FixedClock(datetime(2021, 3, 9))


@pytest.fixture
def fleet(fleet_root: Path, fixed_clock: FixedClock) -> Fleet:
    """Fleet over the test database with a frozen clock."""
    settings = RentSettings.from_cli(root=fleet_root)
    return Fleet(settings, clock=fixed_clock)


@pytest.fixture
def _isolated_fleet(fleet_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Change CWD to the temp fleet root so the CLI reads the test database.

    Use via ``@pytest.mark.usefixtures("_isolated_fleet")`` on command test
    classes.
    """
    monkeypatch.chdir(fleet_root)
    monkeypatch.delenv("RENTCTL_CONFIG", raising=False)
    yield
