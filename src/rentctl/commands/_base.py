"""Click command and group classes carrying an ``--examples`` flag.

``rentctl <cmd> --examples`` prints sample invocations and exits before
any argument validation, so required arguments need not be supplied.
``--help`` only mentions that examples exist.
"""

from __future__ import annotations

from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples for sample invocations."

# Upper bound for --days on quote and rent.
MAX_RENTAL_DAYS = 3650


class _ExamplesMixin:
    """Shared ``--examples`` wiring for commands and groups."""

    params: list[click.Parameter]
    examples: str | None

    def _init_examples(self, examples: str | None, kwargs: dict[str, Any]) -> None:
        self.examples = examples
        if examples and not kwargs.get("epilog"):
            kwargs["epilog"] = _EXAMPLES_HINT

    def _attach_examples_option(self) -> None:
        if not self.examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class RentCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples=`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self._init_examples(examples, kwargs)
        super().__init__(*args, **kwargs)
        self._attach_examples_option()


class RentGroup(_ExamplesMixin, click.Group):
    """Group accepting an ``examples=`` keyword.

    Subcommands declared with ``@group.command`` default to RentCommand.
    """

    command_class = RentCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self._init_examples(examples, kwargs)
        super().__init__(*args, **kwargs)
        self._attach_examples_option()
