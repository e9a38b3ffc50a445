"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich, colors when on a
terminal), for scripts (--quiet, one entry per line), or for machines
(--json). Human renderers are dispatched by ``result.op``.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from passmatch.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from passmatch.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags, copied from PassSettings by the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


# ── Human renderers ───────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pm.ok"), Text(result.op, style="pm.op"))


def _render_entries(result: ServiceResult, console: Console) -> None:
    items: list[str] = result.data.get("items", [])
    if not items:
        console.print(Text("  no entries", style="pm.key"))
        return
    for item in items:
        domain, sep, user = item.rpartition("/")
        line = Text("  ")
        if sep:
            line.append(domain, style="pm.domain")
            line.append("/")
        line.append(user, style="pm.user")
        console.print(line)


def _render_sites(result: ServiceResult, console: Console) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("  no sites", style="pm.key"))
        return
    for site in items:
        line = Text("  ")
        line.append(site["domain"], style="pm.domain")
        line.append(f" ({len(site['users'])})", style="pm.key")
        if site["users"]:
            line.append(": ")
            line.append(", ".join(site["users"]), style="pm.user")
        console.print(line)


def _render_generic(result: ServiceResult, console: Console) -> None:
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}: ", style="pm.key"), Text(str(value)), sep="")


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "lookup": _render_entries,
    "search": _render_entries,
    "sites": _render_sites,
}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        _status_line(console, result)
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
    else:
        msg = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "ERROR"
        console.print(
            Text("ERROR", style="pm.error"), Text(result.op, style="pm.op"), Text(f"[{code}]")
        )
        console.print(Text(f"  {msg}"))

    if verbose and result.meta and "telemetry" in result.meta:
        span = result.meta["telemetry"]
        console.print(Text(f"  {span['name']}: {span['duration_ms']}ms", style="pm.key"))

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: one entry (or domain) per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(
            item["domain"] if isinstance(item, dict) else str(item) for item in items
        )
    return f"OK: {result.op}"


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When omitted, *json_output* alone decides.
        json_output: Shorthand used when no *settings* are given.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
