# topmark:header:start
#
#   project      : PrintfKit
#   file         : version.py
#   file_relpath : src/printfkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit `version` command.

Prints the PrintfKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from printfkit.cli.options import output_format_option
from printfkit.cli.utils import get_console, is_verbose
from printfkit.constants import PRINTFKIT_VERSION
from printfkit.core.formats import OutputFormat

if TYPE_CHECKING:
    from printfkit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PrintfKit.",
)
@output_format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of PrintfKit.

    Args:
        output_format (OutputFormat): ``text``, ``markdown`` or ``json``.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": PRINTFKIT_VERSION}))
    elif output_format == OutputFormat.MARKDOWN:
        console.print("# PrintfKit Version\n")
        console.print(f"**PrintfKit version: {PRINTFKIT_VERSION}**")
    elif is_verbose(ctx):
        console.print(console.styled("PrintfKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PRINTFKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(PRINTFKIT_VERSION, bold=True))
