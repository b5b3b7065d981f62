"""Tests for InitService — fleet scaffolding."""

from __future__ import annotations

from pathlib import Path

import pytest

from rentctl.config.settings import RentSettings
from rentctl.infrastructure.fleet import Fleet
from rentctl.services.init import SAMPLE_CARS, SAMPLE_CATEGORIES, InitService
from rentctl.services.rental import RentalService


class TestInitFleet:
    def test_writes_all_files(self, tmp_path: Path) -> None:
        result = InitService.init_fleet(tmp_path)
        assert result.ok, result.error
        assert sorted(result.data["files"]) == [
            "database/carCategory.json",
            "database/cars.json",
            "database/customers.json",
            "rentctl.toml",
        ]
        assert (tmp_path / "rentctl.toml").is_file()

    def test_sample_categories_reference_sample_cars(self) -> None:
        car_ids = {car.id for car in SAMPLE_CARS}
        for category in SAMPLE_CATEGORIES:
            assert category.car_ids
            assert set(category.car_ids) <= car_ids

    def test_keeps_existing_files(self, tmp_path: Path) -> None:
        InitService.init_fleet(tmp_path)
        (tmp_path / "rentctl.toml").write_text("# mine\n")
        result = InitService.init_fleet(tmp_path)
        assert result.ok
        assert result.data["files"] == []
        assert len(result.warnings) == 4
        assert (tmp_path / "rentctl.toml").read_text() == "# mine\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        InitService.init_fleet(tmp_path)
        (tmp_path / "rentctl.toml").write_text("# mine\n")
        result = InitService.init_fleet(tmp_path, force=True)
        assert len(result.data["files"]) == 4
        assert "[database]" in (tmp_path / "rentctl.toml").read_text()

    def test_rejects_file_path(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("")
        result = InitService.init_fleet(target)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PATH"

    @pytest.mark.asyncio
    async def test_initialized_fleet_is_usable(self, tmp_path: Path) -> None:
        InitService.init_fleet(tmp_path)
        fleet = Fleet(RentSettings.from_cli(root=tmp_path))
        result = await RentalService(fleet).quote("cust-001", "cat-economy", 5)
        assert result.ok, result.error
        assert result.data["multiplier"] == "1.1"
