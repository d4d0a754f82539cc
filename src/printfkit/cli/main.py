# topmark:header:start
#
#   project      : PrintfKit
#   file         : main.py
#   file_relpath : src/printfkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the `printfkit` command line interface.

Group-level options (verbosity, colour) are resolved once and stored in
``ctx.obj`` together with the console used by the subcommands. Internal logging
is configured from the ``PRINTFKIT_LOG_LEVEL`` environment variable and goes to
stderr.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from printfkit.cli.commands.config import config_command
from printfkit.cli.commands.format import format_command
from printfkit.cli.commands.verbs import verbs_command
from printfkit.cli.commands.version import version_command
from printfkit.cli.console import ClickConsole
from printfkit.cli.errors import PrintfkitUnexpectedError
from printfkit.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from printfkit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from printfkit.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, colour, console) on the context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit colour mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces colour off.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PrintfKit: printf-style formatting from the command line.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the PrintfKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'printfkit format TEMPLATE [ARGS]...' to render a template.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)

cli.add_command(verbs_command)

cli.add_command(config_command)

cli.add_command(version_command)


def main() -> None:
    """Run the CLI; errors escaping the commands exit with `ExitCode.UNEXPECTED_ERROR`."""
    try:
        cli.main(prog_name="printfkit")
    except Exception as exc:
        logger.exception("Unexpected error")
        err = PrintfkitUnexpectedError(f"Unexpected error: {exc}")
        err.show()
        sys.exit(err.exit_code)


if __name__ == "__main__":
    main()
