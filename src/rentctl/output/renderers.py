"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rentctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rentctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "quote":
        return str(result.data.get("amount", ""))
    if result.op == "rent":
        car = result.data.get("car") or {}
        fields = (car.get("id", ""), result.data.get("amount", ""), result.data.get("due_date", ""))
        return "\t".join(str(f) for f in fields)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id"))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rent.ok")
    op = Text(f"  {result.op}", style="rent.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rent.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="rent.id")
    elif key == "amount":
        v = Text(str(value), style="rent.amount")
    elif key == "due_date":
        v = Text(str(value), style="rent.date")
    elif key == "name":
        v = Text(str(value), style="rent.name")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rent.error")
    op = Text(f"  {result.op}", style="rent.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Pricing renderers ─────────────────────────────────────────────────


def _render_quote(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a price quote: inputs, multiplier, and the final amount."""
    _status_line(console, result)
    for key in ("customer_id", "category_id", "category", "days", "daily_price", "multiplier"):
        if key in result.data:
            _field(console, key, result.data[key])
    _field(console, "amount", result.data.get("amount", ""))
    if verbose:
        _render_meta(console, result)


def _render_rent(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a rental transaction as a receipt panel."""
    d = result.data
    customer = d.get("customer") or {}
    car = d.get("car") or {}

    lines = [
        f"customer: {customer.get('name') or customer.get('id', '?')}"
        f" (age {customer.get('age', '?')})",
        f"car: {car.get('name') or car.get('id', '?')} ({car.get('id', '?')})",
        f"amount: {d.get('amount', '')}",
        f"due date: {d.get('due_date', '')}",
    ]
    _status_line(console, result)
    panel = Panel(Text("\n".join(lines)), title="Transaction", border_style="green", expand=False)
    console.print(panel)
    if verbose:
        _render_meta(console, result)


# ── Lookup renderers ──────────────────────────────────────────────────


def _render_category_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list_categories results as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="rent.id", no_wrap=True)
    table.add_column("Name", style="rent.name")
    table.add_column("Price", justify="right")
    table.add_column("Cars", justify="right")
    if verbose:
        table.add_column("Car IDs", style="dim")

    for item in items:
        car_ids = item.get("car_ids", [])
        row = [
            Text(str(item.get("id", ""))),
            Text(str(item.get("name", ""))),
            Text(str(item.get("price", ""))),
            Text(str(len(car_ids))),
        ]
        if verbose:
            row.append(Text(", ".join(car_ids)))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} categories")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "quote": _render_quote,
    "rent": _render_rent,
    "list_categories": _render_category_table,
}
