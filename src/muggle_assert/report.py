from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from muggle_assert.config.loader import get_settings
from muggle_assert.errors import AssertionError
from muggle_assert.util.jsonable import to_jsonable, truncate


def failure_to_dict(error: AssertionError, max_repr: int | None = None) -> dict[str, Any]:
    if max_repr is None:
        max_repr = get_settings().report.max_repr
    return {
        "name": error.name,
        "operator": error.operator,
        "message": truncate(error.message, max_repr),
        "expected": to_jsonable(error.expected, max_repr),
        "actual": to_jsonable(error.actual, max_repr),
    }


def _describe(value: Any, max_repr: int) -> str:
    return truncate(repr(value), max_repr)


def render_failure(error: AssertionError, max_repr: int | None = None) -> str:
    if max_repr is None:
        max_repr = get_settings().report.max_repr
    lines = [f"{error.name}: {error.message}", f"  operator: {error.operator}"]
    if error.operator not in (None, "true"):
        lines.append(f"  expected: {_describe(error.expected, max_repr)}")
        lines.append(f"  actual:   {_describe(error.actual, max_repr)}")
    if error.stack:
        lines.append("  stack:")
        lines.extend(f"    {line}" for line in error.stack.rstrip().splitlines())
    return "\n".join(lines)


def print_failure(error: AssertionError, console: Console | None = None) -> None:
    console = console or Console()
    max_repr = get_settings().report.max_repr
    table = Table(title=error.name, show_lines=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("operator", Text(str(error.operator)))
    table.add_row("message", Text(truncate(error.message, max_repr)))
    table.add_row("expected", Text(_describe(error.expected, max_repr)))
    table.add_row("actual", Text(_describe(error.actual, max_repr)))
    console.print(table)
