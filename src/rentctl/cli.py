"""Root ``rentctl`` group: global output flags, config override, subcommands."""

from __future__ import annotations

import click

from rentctl import __version__
from rentctl.commands import register_commands
from rentctl.commands._base import RentGroup
from rentctl.commands._context import AppContext
from rentctl.config.settings import RentSettings

_ROOT_EXAMPLES = """\
  rentctl init
  rentctl show categories
  rentctl quote cust-001 cat-economy --days 5
  rentctl --json rent cust-002 cat-suv -d 3
  rentctl -c /srv/fleet/rentctl.toml show customer cust-003"""


@click.group(
    cls=RentGroup,
    examples=_ROOT_EXAMPLES,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="rentctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this rentctl.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """rentctl — car-rental pricing and transactions."""
    # Only flags given on the command line outrank RENTCTL_* env vars and TOML.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    cli_flags = {name: True for name, value in flags.items() if value}
    ctx.obj = AppContext(RentSettings.from_cli(config_path=config_path, **cli_flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
