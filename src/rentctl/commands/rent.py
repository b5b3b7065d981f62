"""Command: rent a car from a category and print the transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rentctl.commands._base import MAX_RENTAL_DAYS, RentCommand

if TYPE_CHECKING:
    from rentctl.commands._context import AppContext


@click.command(
    cls=RentCommand,
    examples="""\
  rentctl rent cust-001 cat-suv --days 5
  rentctl --json rent cust-001 cat-economy -d 3""",
)
@click.argument("customer_id")
@click.argument("category_id")
@click.option(
    "-d",
    "--days",
    type=click.IntRange(min=1, max=MAX_RENTAL_DAYS),
    required=True,
    help="Number of rental days.",
)
@click.pass_obj
def rent(app: AppContext, customer_id: str, category_id: str, days: int) -> None:
    """Rent a car from CATEGORY_ID for CUSTOMER_ID and print the receipt.

    A car is picked at random from the category. Nothing is persisted.
    """
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).rent(customer_id, category_id, days)))
