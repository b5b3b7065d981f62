"""Age-based tax brackets.

A bracket maps an inclusive age range to a price multiplier. Lookup is
first-match over an ordered table, so overlapping tables resolve to the
earliest entry.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rentctl.domain.errors import NoMatchingTaxBracketError


class TaxBracket(BaseModel):
    """``[from_age, to_age]`` (inclusive) → ``then`` multiplier."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_age: int = Field(alias="from")
    to_age: int = Field(alias="to")
    then: Decimal

    @model_validator(mode="after")
    def _check_range(self) -> TaxBracket:
        if self.from_age > self.to_age:
            msg = f"Tax bracket lower bound {self.from_age} exceeds upper bound {self.to_age}"
            raise ValueError(msg)
        return self

    def contains(self, age: int) -> bool:
        return self.from_age <= age <= self.to_age


DEFAULT_TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(from_age=18, to_age=25, then=Decimal("1.1")),
    TaxBracket(from_age=26, to_age=30, then=Decimal("1.5")),
    TaxBracket(from_age=31, to_age=100, then=Decimal("1.3")),
)


def find_tax_bracket(brackets: Iterable[TaxBracket], age: int) -> TaxBracket:
    """Return the first bracket containing *age*.

    Raises:
        NoMatchingTaxBracketError: No bracket covers *age*.
    """
    for bracket in brackets:
        if bracket.contains(age):
            return bracket
    raise NoMatchingTaxBracketError(age)
