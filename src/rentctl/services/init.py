"""InitService — scaffold a fleet directory with config and sample data.

Writes ``rentctl.toml`` (sparse: only the database directory) plus the
three JSON database files. Existing files are left alone unless
``force`` is set.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel

from rentctl.config.discovery import CONFIG_FILENAME
from rentctl.config.models import DatabaseConfig
from rentctl.domain.models import Car, CarCategory, Customer
from rentctl.infrastructure.repository import write_records
from rentctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

SAMPLE_CARS: tuple[Car, ...] = (
    Car(id="car-001", name="Fiat Uno", release_year=2019),
    Car(id="car-002", name="Chevrolet Onix", release_year=2021),
    Car(id="car-003", name="Volkswagen Gol", release_year=2020),
    Car(id="car-004", name="Jeep Renegade", release_year=2021),
    Car(id="car-005", name="Hyundai Creta", release_year=2022),
)

SAMPLE_CATEGORIES: tuple[CarCategory, ...] = (
    CarCategory(
        id="cat-economy",
        name="Economy",
        car_ids=("car-001", "car-002", "car-003"),
        price=Decimal("37.6"),
    ),
    CarCategory(
        id="cat-suv",
        name="SUV",
        car_ids=("car-004", "car-005"),
        price=Decimal("89.9"),
    ),
)

SAMPLE_CUSTOMERS: tuple[Customer, ...] = (
    Customer(id="cust-001", name="Ana Souza", age=20),
    Customer(id="cust-002", name="Bruno Lima", age=28),
    Customer(id="cust-003", name="Carla Dias", age=50),
)

_CONFIG_TEMPLATE = """\
# rentctl fleet configuration. Only overrides belong here.

[database]
dir = "{dir}"
"""


class InitService:
    """Fleet scaffolding. Stateless: no fleet exists yet."""

    @staticmethod
    def init_fleet(path: Path, *, force: bool = False) -> ServiceResult:
        op = "init_fleet"
        if path.exists() and not path.is_dir():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_PATH",
                    message=f"Not a directory: {path}",
                    detail={"path": str(path)},
                ),
            )

        db = DatabaseConfig()
        db_dir = path / db.dir
        files: dict[Path, tuple[BaseModel, ...]] = {
            db_dir / db.cars: SAMPLE_CARS,
            db_dir / db.categories: SAMPLE_CATEGORIES,
            db_dir / db.customers: SAMPLE_CUSTOMERS,
        }

        written: list[str] = []
        warnings: list[str] = []
        for file_path, records in files.items():
            if file_path.exists() and not force:
                warnings.append(f"Kept existing {file_path.relative_to(path)}")
                continue
            write_records(file_path, list(records))
            written.append(str(file_path.relative_to(path)))

        config_file = path / CONFIG_FILENAME
        if not config_file.exists() or force:
            config_file.write_text(_CONFIG_TEMPLATE.format(dir=db.dir), encoding="utf-8")
            written.append(CONFIG_FILENAME)
        else:
            warnings.append(f"Kept existing {CONFIG_FILENAME}")

        logger.debug("Initialized fleet at %s (%d files written)", path, len(written))
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "files": written},
            warnings=warnings,
        )
