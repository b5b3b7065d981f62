"""JSON-file repositories for cars, categories, and customers.

Each database file is a JSON array of records keyed by ``id``. Files are
re-read on every lookup (the data is small and may be edited by hand);
reads happen in a worker thread so callers can await them from an event
loop. Numbers with a fraction are parsed as :class:`~decimal.Decimal`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, ClassVar, Generic, TypeVar, overload

from pydantic import BaseModel, ValidationError

from rentctl.domain.errors import (
    CarNotFoundError,
    CategoryNotFoundError,
    CustomerNotFoundError,
    DatabaseFileError,
    NotFoundError,
)
from rentctl.domain.models import Car, CarCategory, Customer

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_records(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects from *path*."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Database file not found: {path}"
        raise DatabaseFileError(msg) from exc
    try:
        data = json.loads(raw, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise DatabaseFileError(msg) from exc
    if not isinstance(data, list):
        msg = f"Expected a JSON array in {path}, got {type(data).__name__}"
        raise DatabaseFileError(msg)
    return data


def _encode(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def write_records(path: Path, records: list[BaseModel]) -> None:
    """Write models to *path* as a JSON array, keyed by alias.

    Decimals are written as JSON numbers. Creates parent directories if
    they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.model_dump(by_alias=True, exclude_none=True) for r in records]
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=_encode)
    path.write_text(text + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


class JsonRepository(Generic[T]):
    """Read-only repository over one JSON database file.

    Subclasses set ``model`` and ``not_found``.
    """

    model: ClassVar[type[BaseModel]]
    not_found: ClassVar[type[NotFoundError]] = NotFoundError

    def __init__(self, path: Path) -> None:
        self.path = path

    @overload
    async def find(self, item_id: str) -> T: ...

    @overload
    async def find(self, item_id: None = None) -> list[T]: ...

    async def find(self, item_id: str | None = None) -> T | list[T]:
        """Return the item with *item_id*, or every item when no id is given.

        Raises:
            NotFoundError: (subclass per repository) when *item_id* is absent.
            DatabaseFileError: The file is missing or malformed.
        """
        records = await asyncio.to_thread(read_records, self.path)
        if item_id is None:
            return [self._parse(r) for r in records]
        for record in records:
            if record.get("id") == item_id:
                return self._parse(record)
        logger.debug("Lookup miss in %s for %s", self.path.name, item_id)
        raise self.not_found(item_id)

    def _parse(self, record: dict[str, Any]) -> T:
        try:
            return self.model.model_validate(record)  # type: ignore[return-value]
        except ValidationError as exc:
            msg = f"Invalid record in {self.path}: {exc}"
            raise DatabaseFileError(msg) from exc


class CarRepository(JsonRepository[Car]):
    model = Car
    not_found = CarNotFoundError


class CategoryRepository(JsonRepository[CarCategory]):
    model = CarCategory
    not_found = CategoryNotFoundError


class CustomerRepository(JsonRepository[Customer]):
    model = Customer
    not_found = CustomerNotFoundError
