# topmark:header:start
#
#   project      : PrintfKit
#   file         : errors.py
#   file_relpath : src/printfkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PrintfKit CLI.

Commands raise these to exit with a message and a `sysexits`-aligned code. When
the Click context carries the project console, messages are printed through it
in bright red; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from printfkit.cli.exit_codes import ExitCode


class PrintfkitCliError(click.ClickException):
    """Base class for all PrintfKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colour is applied by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class PrintfkitUsageError(PrintfkitCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class PrintfkitFormatError(PrintfkitCliError):
    """A ``--strict`` render emitted error tokens."""

    exit_code = ExitCode.FORMAT_ERROR


class PrintfkitIOError(PrintfkitCliError):
    """Writing the rendered output failed."""

    exit_code = ExitCode.IO_ERROR


class PrintfkitConfigError(PrintfkitCliError):
    """Configuration error (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PrintfkitUnexpectedError(PrintfkitCliError):
    """Unhandled error (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
