"""Command group: look up cars, categories, and customers by id."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rentctl.commands._base import RentGroup

if TYPE_CHECKING:
    from rentctl.commands._context import AppContext


@click.group(
    cls=RentGroup,
    examples="""\
  rentctl show categories
  rentctl show car car-001
  rentctl --json show category cat-suv
  rentctl show customer cust-001""",
)
def show() -> None:
    """Show fleet records."""


@show.command(examples="  rentctl show car car-001")
@click.argument("car_id")
@click.pass_obj
def car(app: AppContext, car_id: str) -> None:
    """Show a car by ID."""
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).get_car(car_id)))


@show.command(examples="  rentctl show category cat-suv")
@click.argument("category_id")
@click.pass_obj
def category(app: AppContext, category_id: str) -> None:
    """Show a car category by ID."""
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).get_category(category_id)))


@show.command(examples="  rentctl show customer cust-001")
@click.argument("customer_id")
@click.pass_obj
def customer(app: AppContext, customer_id: str) -> None:
    """Show a customer by ID."""
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).get_customer(customer_id)))


@show.command(examples="  rentctl show categories\n  rentctl -v show categories")
@click.pass_obj
def categories(app: AppContext) -> None:
    """List every car category."""
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).list_categories()))
