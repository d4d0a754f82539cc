# topmark:header:start
#
#   project      : PrintfKit
#   file         : config.py
#   file_relpath : src/printfkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit `config` command.

Prints the effective format policy as TOML: the defaults overlaid with the
policy file given with ``--config`` or discovered in the working directory.
The output is a valid ``printfkit.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from printfkit.cli.commands.format import resolve_policy
from printfkit.cli.options import config_option
from printfkit.cli.utils import get_console
from printfkit.config.io import policy_to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from printfkit.cli.console import ConsoleLike
    from printfkit.config.policy import FormatPolicy


@click.command(
    name="config",
    help="Print the effective format policy as TOML.",
)
@config_option
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the keys under [tool.printfkit] for pasting into pyproject.toml.",
)
def config_command(*, config_path: Path | None, for_pyproject: bool) -> None:
    """Print the effective policy.

    Args:
        config_path (Path | None): Explicit policy file.
        for_pyproject (bool): Render for ``pyproject.toml``.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    policy: FormatPolicy = resolve_policy(config_path)
    console.print(policy_to_toml(policy, for_pyproject=for_pyproject), nl=False)
