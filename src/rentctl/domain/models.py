"""Rental value objects: cars, categories, customers, and transactions.

Every model is frozen. Repositories own cars and categories; the pricing
service only reads them. Unknown keys in the JSON database are ignored so
records may carry extra fields.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Car(BaseModel):
    """A rentable car. Only ``id`` matters to pricing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str | None = None
    release_year: int | None = Field(default=None, alias="releaseYear")
    available: bool = True
    gas_available: bool = Field(default=True, alias="gasAvailable")


class CarCategory(BaseModel):
    """A class of cars sharing a per-day base price."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    name: str = ""
    car_ids: tuple[str, ...] = Field(default=(), alias="carIds")
    price: Decimal


class Customer(BaseModel):
    """The person renting a car."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    age: int


class Transaction(BaseModel):
    """Receipt produced by a rental. Amount and due date are pre-formatted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    customer: Customer
    car: Car
    amount: str
    due_date: str = Field(alias="dueDate")
