"""Result formatting for the CLI.

Human mode renders through a Rich console; JSON mode dumps the pydantic
model. Quiet mode prints only the bare payload value (or error code).
"""

from __future__ import annotations

import json as _json
from io import StringIO
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from samplelib.services.result import Failure

if TYPE_CHECKING:
    from samplelib.services.result import Result

# Style names used in the markup of human output.
RESULT_THEME = Theme(
    {
        "result.ok": "bold green",
        "result.error": "bold red",
        "result.op": "bold cyan",
        "result.field": "dim",
        "result.code": "bold magenta",
    }
)


class OutputSettings(BaseModel):
    """Output flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _plain(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return data


def _render_quiet(result: Result[Any]) -> str:
    if isinstance(result, Failure):
        return str(result.code)
    data = _plain(result.data)
    if isinstance(data, dict):
        return "\n".join(str(v) for v in data.values())
    return str(data)


def _human_lines(result: Result[Any], op: str) -> list[str]:
    if isinstance(result, Failure):
        return [
            f"[result.error]ERROR[/result.error]: [result.op]{escape(op)}[/result.op] "
            f"[result.code]{result.code}[/result.code] {escape(result.error)}"
        ]

    lines = [f"[result.ok]OK[/result.ok]: [result.op]{escape(op)}[/result.op]"]
    data = _plain(result.data)
    fields = data.items() if isinstance(data, dict) else [("value", data)]
    for key, value in fields:
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        lines.append(f"  [result.field]{escape(str(key))}[/result.field]: {escape(str(value))}")
    return lines


def _render_human(result: Result[Any], op: str) -> str:
    # Colorless; soft_wrap keeps each field on one line.
    console = Console(
        file=StringIO(), theme=RESULT_THEME, no_color=True, highlight=False, soft_wrap=True
    )
    for line in _human_lines(result, op):
        console.print(line)
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def format_result(
    result: Result[Any],
    *,
    op: str,
    settings: OutputSettings | None = None,
) -> str:
    """Format a Result for display.

    Args:
        result: Success or Failure to render.
        op: Operation name shown in human output and added to JSON output.
        settings: Output flags; defaults to human mode.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        payload = {"op": op, **result.model_dump(mode="json")}
        return _json.dumps(payload, indent=2, ensure_ascii=False)
    if settings.quiet:
        return _render_quiet(result)
    return _render_human(result, op)
