# topmark:header:start
#
#   project      : PrintfKit
#   file         : format.py
#   file_relpath : src/printfkit/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit `format` command.

Renders a template with the given arguments and writes the result to stdout,
like the shell's ``printf`` but with the PrintfKit verb set::

    printfkit format 'Hello %s, you are %d' World 42
    printfkit format --raw '%s' 42           # argument stays the string "42"
    printfkit format '%<5d' '[1, 2, 3]'      # spread a JSON array
"""

from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from printfkit.cli.errors import (
    PrintfkitConfigError,
    PrintfkitFormatError,
    PrintfkitIOError,
    PrintfkitUsageError,
)
from printfkit.cli.options import config_option
from printfkit.cli.utils import get_console, is_verbose
from printfkit.config.io import discover_config, load_policy
from printfkit.config.logging import get_logger
from printfkit.core.errors import PolicyConfigError
from printfkit.ops import render, write

if TYPE_CHECKING:
    from printfkit.cli.console import ConsoleLike
    from printfkit.config.logging import PrintfkitLogger
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.result import Result
    from printfkit.engine.assembler import Rendering

logger: PrintfkitLogger = get_logger(__name__)


def parse_typed_argument(raw: str) -> object:
    """Interpret ``raw`` as a JSON literal, falling back to the string itself.

    ``"255"`` becomes ``255``, ``"[1, 2]"`` a list and ``"true"`` ``True``, while
    ``"hello"`` stays a string.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def interpret_escapes(text: str) -> str:
    """Expand backslash escapes (``\\n``, ``\\t``, ``\\x41``, ``\\u00e9``) in ``text``.

    Raises:
        PrintfkitUsageError: If ``text`` contains a malformed escape sequence.
    """
    try:
        # backslashreplace keeps non-Latin-1 characters intact through the codec.
        return codecs.decode(text.encode("latin-1", "backslashreplace"), "unicode_escape")
    except UnicodeDecodeError as exc:
        raise PrintfkitUsageError(f"Invalid escape sequence in template: {exc.reason}") from exc


def resolve_policy(config_path: Path | None) -> FormatPolicy:
    """Load the policy from ``config_path`` or from the working directory."""
    path: Path | None = config_path or discover_config(Path.cwd())
    try:
        return load_policy(path)
    except PolicyConfigError as exc:
        raise PrintfkitConfigError(str(exc)) from exc


@click.command(
    name="format",
    help="Render TEMPLATE with ARGS and write the result to stdout.",
    epilog="""
Arguments are parsed as JSON literals by default (--typed): 42 is an integer, 1.5 a float,
true a boolean and [1, 2] a list; anything else is passed as a string. Use --raw to pass
every argument as a string.
""",
)
@click.argument("template")
@click.argument("args", nargs=-1)
@click.option(
    "--typed/--raw",
    default=True,
    show_default=True,
    help="Parse arguments as JSON literals (--typed) or pass them as strings (--raw).",
)
@click.option(
    "--escapes/--no-escapes",
    default=True,
    show_default=True,
    help="Interpret backslash escapes such as \\n and \\t in TEMPLATE.",
)
@click.option("-n", "--newline", is_flag=True, help="Append a newline to the output.")
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 65 when the output contains error tokens.",
)
@config_option
def format_command(
    *,
    template: str,
    args: tuple[str, ...],
    typed: bool,
    escapes: bool,
    newline: bool,
    strict: bool,
    config_path: Path | None,
) -> None:
    """Render a template and write it to stdout.

    Args:
        template (str): The format string.
        args (tuple[str, ...]): Raw command line arguments for the directives.
        typed (bool): Parse arguments as JSON literals.
        escapes (bool): Expand backslash escapes in ``template``.
        newline (bool): Append a newline.
        strict (bool): Fail with `ExitCode.FORMAT_ERROR` when tokens were emitted.
        config_path (Path | None): Explicit policy file.

    Raises:
        PrintfkitIOError: If stdout cannot be written.
        PrintfkitFormatError: In strict mode, if the render emitted error tokens.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    policy: FormatPolicy = resolve_policy(config_path)
    if escapes:
        template = interpret_escapes(template)
    values: list[object] = [parse_typed_argument(a) if typed else a for a in args]
    logger.debug("Rendering %r with %d argument(s)", template, len(values))

    rendering: Rendering = render(template, *values, policy=policy)
    text: str = rendering.text + ("\n" if newline else "")
    # The rendered text goes in as an argument so it is not scanned a second time.
    outcome: Result[None, Exception] = write(
        click.get_binary_stream("stdout"), "%s", text, policy=policy
    )
    if outcome.is_err():
        raise PrintfkitIOError(f"Cannot write output: {outcome.unwrap_err()}")

    if rendering.errors and is_verbose(ctx):
        for token in rendering.errors:
            console.warn(f"error token: {token}")
    if strict and not rendering.ok:
        raise PrintfkitFormatError(f"Output contains {len(rendering.errors)} error token(s).")
