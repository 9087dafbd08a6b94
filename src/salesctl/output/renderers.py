"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from salesctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from salesctl.services.result import ServiceResult


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

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id"))
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line with the outcome message."""
    label = Text("OK", style="sales.ok")
    op = Text(f"  {result.op}", style="sales.op")
    console.print(label, op, end="")
    if result.message:
        console.print(Text(f"  {result.message}"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sales.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="sales.id")
    elif key == "name":
        v = Text(str(value), style="sales.name")
    elif key == "company_name":
        v = Text(str(value), style="sales.company")
    elif key.endswith("_date"):
        v = Text(str(value), style="sales.date")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else (result.message or "Unknown error")
    label = Text("ERROR", style="sales.error")
    op = Text(f"  {result.op}", style="sales.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err is None:
        return
    # Field-level validation problems are always worth showing.
    for line in err.detail.get("errors", []):
        console.print(f"  {line}")
    if verbose:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            if k != "errors":
                console.print(f"    {k}: {v}")


# ── Renderers ─────────────────────────────────────────────────────────

_CUSTOMER_FIELDS = (
    "id",
    "name",
    "company_name",
    "company_id",
    "address",
    "phone",
    "email",
    "created_date",
    "modified_date",
)


def _render_customer(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single customer (get/add/update)."""
    _status_line(console, result)
    for key in _CUSTOMER_FIELDS:
        val = result.data.get(key)
        if val is None:
            continue
        if key.endswith("_date") and not verbose:
            continue
        _field(console, key, val)


def _render_customer_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        _status_line(console, result)
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sales.id", no_wrap=True)
    table.add_column("Name", style="sales.name")
    table.add_column("Company", style="sales.company")
    table.add_column("Phone")
    if verbose:
        table.add_column("Created", style="sales.date")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("company_name") or ""),
            str(item.get("phone") or ""),
        ]
        if verbose:
            row.append(str(item.get("created_date", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} customers")


def _render_company_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items = result.data.get("items", [])
    if not items:
        _status_line(console, result)
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sales.id", no_wrap=True)
    table.add_column("Name", style="sales.name")
    table.add_column("Phone")
    if verbose:
        table.add_column("Created", style="sales.date")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("phone") or ""),
        ]
        if verbose:
            row.append(str(item.get("created_date", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} companies")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus flat key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        if value is not None:
            _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "list_customers": _render_customer_table,
    "get_customer": _render_customer,
    "add_customer": _render_customer,
    "update_customer": _render_customer,
    "list_companies": _render_company_table,
}
