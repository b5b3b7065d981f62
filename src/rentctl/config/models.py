"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rentctl.toml only contains
overrides. A fresh fleet directory needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from rentctl.domain.tax import DEFAULT_TAX_BRACKETS, TaxBracket

# --- rentctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section. Paths are relative to the fleet root."""

    model_config = {"frozen": True}

    dir: str = "database"
    cars: str = "cars.json"
    categories: str = "carCategory.json"
    customers: str = "customers.json"


class PricingConfig(BaseModel):
    """[pricing] section."""

    model_config = {"frozen": True}

    locale: str = "pt_BR"
    currency: str = "BRL"
    date_style: str = "long"
    tax_brackets: tuple[TaxBracket, ...] = Field(default=DEFAULT_TAX_BRACKETS)


class RentConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
