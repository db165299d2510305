"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from isoval.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from isoval.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet`` mode."""
    if not result.ok:
        code = result.error.code if result.error else "ERROR"
        return f"ERROR: {result.op} {code}"
    if result.op == "encode":
        return str(result.data.get("xml", "")).rstrip("\n")
    return f"OK: {result.op}"


# --- Helpers ---


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="iso.ok"), Text(f"  {result.op}", style="iso.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="iso.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    for key, value in (result.meta or {}).items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="iso.error"),
        Text(f"  {result.op}", style="iso.op"),
        Text(" - "),
        Text(msg),
        sep="",
    )
    if err is None:
        return
    code = err.detail.get("code")
    if code is not None:
        console.print(
            Text("  ", style="iso.key"),
            Text(f"[{code}] {err.detail.get('category', '')}", style="iso.code"),
            Text(f"  at {err.detail.get('path') or '<root>'}", style="iso.path"),
            sep="",
        )
    elif verbose and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# --- Op renderers ---


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "message", result.data.get("message_id") or "-")
    _field(console, "root", result.data.get("root"))
    if verbose:
        _render_meta(console, result)


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "message", result.data.get("message_id"))
    record = json.dumps(result.data.get("record", {}), indent=2)
    console.print(record, markup=False, soft_wrap=True)
    if verbose:
        _render_meta(console, result)


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(str(result.data.get("xml", "")).rstrip("\n"), markup=False, soft_wrap=True)
    if verbose:
        _render_meta(console, result)


def _render_messages(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Message")
    table.add_column("Root")
    table.add_column("Record")
    table.add_column("Description")
    for item in result.data.get("messages", []):
        table.add_row(
            item["message_id"], item["root_tag"], item["record_type"], item["description"]
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "decode": _render_decode,
    "encode": _render_encode,
    "messages": _render_messages,
}
