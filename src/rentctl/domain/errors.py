"""Rental exception hierarchy.

Every error carries a stable ``code`` that the service layer copies into
``ServiceError.code``. The pricing core never catches these; they surface
to whoever called it.
"""

from __future__ import annotations


class RentalError(Exception):
    """Base class for all rental failures."""

    code = "RENTAL_ERROR"


class NotFoundError(RentalError):
    """A repository lookup did not resolve."""

    code = "NOT_FOUND"
    kind = "item"

    def __init__(self, item_id: str) -> None:
        super().__init__(f"No {self.kind} found with ID: {item_id}")
        self.item_id = item_id


class CarNotFoundError(NotFoundError):
    kind = "car"


class CategoryNotFoundError(NotFoundError):
    kind = "category"


class CustomerNotFoundError(NotFoundError):
    kind = "customer"


class EmptyCategoryError(RentalError):
    """Car selection was attempted on a category without car ids."""

    code = "EMPTY_CATEGORY"

    def __init__(self, category_name: str = "") -> None:
        label = f" {category_name!r}" if category_name else ""
        super().__init__(f"Category{label} has no cars to choose from")
        self.category_name = category_name


class NoMatchingTaxBracketError(RentalError):
    """The customer's age falls outside every configured bracket."""

    code = "NO_TAX_BRACKET"

    def __init__(self, age: int) -> None:
        super().__init__(f"No tax bracket covers customer age {age}")
        self.age = age


class DatabaseFileError(RentalError):
    """A JSON database file is missing or unreadable."""

    code = "DATABASE_ERROR"


class RentalPeriodError(RentalError):
    """The rental length cannot produce a due date."""

    code = "INVALID_PERIOD"

    def __init__(self, number_of_days: int) -> None:
        super().__init__(f"Cannot rent for {number_of_days} days: due date out of range")
        self.number_of_days = number_of_days
