# topmark:header:start
#
#   project      : PrintfKit
#   file         : verbs.py
#   file_relpath : src/printfkit/cli/commands/verbs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit `verbs` command.

Lists the conversion verbs understood by the format engine with their family
and a short description.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from printfkit.cli.options import output_format_option
from printfkit.cli.utils import get_console, render_markdown_table
from printfkit.core.formats import OutputFormat
from printfkit.engine.model import Verb

if TYPE_CHECKING:
    from printfkit.cli.console import ConsoleLike


def verb_rows() -> list[dict[str, str]]:
    """Return one record per verb, in table order."""
    return [
        {"verb": v.key, "name": v.name.lower(), "family": v.family.value, "description": v.label}
        for v in Verb
    ]


@click.command(
    name="verbs",
    help="List the conversion verbs.",
)
@output_format_option
def verbs_command(*, output_format: OutputFormat) -> None:
    """List the conversion verbs.

    Args:
        output_format (OutputFormat): ``text``, ``markdown`` or ``json``.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    rows: list[dict[str, str]] = verb_rows()

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(rows, indent=2))
    elif output_format == OutputFormat.MARKDOWN:
        console.print("# Verbs\n")
        console.print(
            render_markdown_table(
                ["Verb", "Family", "Description"],
                [[f"`%{r['verb']}`", r["family"], r["description"]] for r in rows],
            ),
            nl=False,
        )
    else:
        width: int = max(len(r["family"]) for r in rows)
        for r in rows:
            verb: str = console.styled(f"%{r['verb']}", bold=True)
            console.print(f"{verb}  {r['family']:<{width}}  {r['description']}")
