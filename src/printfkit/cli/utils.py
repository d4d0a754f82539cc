# topmark:header:start
#
#   project      : PrintfKit
#   file         : utils.py
#   file_relpath : src/printfkit/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    import click

    from printfkit.cli.console import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def is_verbose(ctx: click.Context) -> bool:
    """True when at least one ``-v`` was given on the group."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING)) <= logging.INFO


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.

    Returns:
        str: The table, ending with a newline.

    Raises:
        ValueError: If a row does not have one cell per header.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{cells[i]:<{widths[i]}}" for i in range(ncols)) + " |"

    lines: list[str] = [_line(headers), _line(["-" * w for w in widths])]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
