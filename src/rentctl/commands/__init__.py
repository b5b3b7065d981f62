"""Subcommand modules for rentctl.

Provides register_commands() which uses deferred imports to keep
``rentctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``show`` group and the standalone commands on the root CLI group."""
    # --- Groups ---
    from rentctl.commands.show import show

    cli.add_command(show)

    # --- Standalone commands ---
    from rentctl.commands.init_cmd import init_cmd
    from rentctl.commands.quote import quote
    from rentctl.commands.rent import rent

    cli.add_command(quote)
    cli.add_command(rent)
    cli.add_command(init_cmd)
