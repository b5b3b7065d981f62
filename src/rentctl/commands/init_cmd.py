"""Command: fleet initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from rentctl.commands._base import RentCommand

if TYPE_CHECKING:
    from rentctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  rentctl init
  rentctl init /path/to/fleet
  rentctl init . --force"""


@click.command("init", cls=RentCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--force", is_flag=True, help="Overwrite existing database files.")
@click.pass_obj
def init_cmd(app: AppContext, path: str, force: bool) -> None:
    """Initialize a fleet directory with rentctl.toml and a sample database."""
    from rentctl.services.init import InitService

    app.emit(InitService.init_fleet(Path(path).resolve(), force=force))
