"""Command: price a rental without selecting a car."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rentctl.commands._base import MAX_RENTAL_DAYS, RentCommand

if TYPE_CHECKING:
    from rentctl.commands._context import AppContext


@click.command(
    cls=RentCommand,
    examples="""\
  rentctl quote cust-001 cat-suv --days 5
  rentctl --json quote cust-001 cat-economy -d 3
  rentctl -q quote cust-002 cat-suv --days 10""",
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
def quote(app: AppContext, customer_id: str, category_id: str, days: int) -> None:
    """Quote the final price for CUSTOMER_ID renting from CATEGORY_ID."""
    from rentctl.services.rental import RentalService

    app.emit(app.run(RentalService(app.fleet).quote(customer_id, category_id, days)))
