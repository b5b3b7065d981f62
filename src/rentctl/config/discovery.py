"""Locate and read ``rentctl.toml``.

A fleet directory is recognised by its config file, searched for from the
working directory towards the filesystem root. ``RENTCTL_CONFIG`` names a
file directly and disables the search; ``--config`` bypasses both.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path
from typing import Any

from rentctl.config.models import RentConfig

CONFIG_FILENAME = "rentctl.toml"
CONFIG_ENV_VAR = "RENTCTL_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    """Yield *start* and each of its ancestors, nearest first."""
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    When ``RENTCTL_CONFIG`` is set it is the only candidate: a dangling
    value yields None rather than falling back to the search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override)
        return candidate if candidate.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def parse_toml(raw: str) -> dict[str, Any]:
    """Parse TOML text, reading floats as Decimal (prices, multipliers)."""
    return tomllib.loads(raw, parse_float=Decimal)


def load_config(path: Path | None = None, cwd: Path | None = None) -> RentConfig:
    """Validate the config sections found at *path*, or by searching from *cwd*.

    No file means every section keeps its defaults.
    """
    source = path or find_config(cwd)
    if source is None:
        return RentConfig()
    return RentConfig.model_validate(parse_toml(source.read_text(encoding="utf-8")))
