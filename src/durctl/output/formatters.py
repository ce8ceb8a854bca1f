"""Render a ServiceResult as JSON or human text.

JSON mode dumps the whole envelope. Human mode prints a status line and
the data as aligned key/value pairs; quiet mode prints only the primary
value of the operation (``ends_at`` for add, ``iso`` for parse).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from durctl.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from durctl.services.result import ServiceResult

PRIMARY_FIELDS: dict[str, str] = {
    "add_duration": "ends_at",
    "parse_duration": "iso",
}


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int = 100


def _value_text(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=not settings.color, width=settings.width)
    if result.ok:
        console.print(f"[dur.ok]OK[/] [dur.op]{result.op}[/]")
        width = max((len(key) for key in result.data), default=0)
        for key, value in result.data.items():
            style = style_for_key(key) or "none"
            text = escape(_value_text(value))
            line = f"  [dur.key]{key.ljust(width)}[/]  [{style}]{text}[/]"
            console.print(line, soft_wrap=True)
    else:
        message = result.error.message if result.error else "Unknown error"
        line = f"[dur.error]ERROR[/] [dur.op]{result.op}[/]: {escape(message)}"
        console.print(line, soft_wrap=True)
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(f"  [dur.key]{key}[/]  {escape(_value_text(value))}", soft_wrap=True)
    if settings.verbose and result.meta and "telemetry" in result.meta:
        telemetry = escape(_value_text(result.meta["telemetry"]))
        console.print(f"  [dur.key]telemetry[/]  {telemetry}", soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        if not result.ok:
            return result.error.message if result.error else "Unknown error"
        primary = PRIMARY_FIELDS.get(result.op)
        if primary and primary in result.data:
            return str(result.data[primary])
    return _format_human(result, settings)
