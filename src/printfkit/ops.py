# topmark:header:start
#
#   project      : PrintfKit
#   file         : ops.py
#   file_relpath : src/printfkit/ops.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public formatting operations.

- [`format`][printfkit.ops.format]: render a template to a string.
- [`render`][printfkit.ops.render]: render and also report the error tokens emitted.
- [`write`][printfkit.ops.write]: render, encode as UTF-8 and write to a byte sink.

A template is literal text with ``%``-directives::

    %[n]<flags><width>.<precision><verb>

For example ``format("%-8s|%05.1f", "pi", 3.14159)`` yields ``"pi      |003.1"``.
Problems in the template or the arguments never raise; they are rendered in
place as error tokens such as ``%!(BAD VERB 'h')`` or ``%!(MISSING 'd')``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printfkit.config.logging import get_logger
from printfkit.config.policy import DEFAULT_POLICY
from printfkit.core.result import Err, Ok
from printfkit.engine import assembler

if TYPE_CHECKING:
    from printfkit.config.logging import PrintfkitLogger
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.display import WriterSync
    from printfkit.core.result import Result
    from printfkit.engine.assembler import Rendering

logger: PrintfkitLogger = get_logger(__name__)


def render(template: str, *args: object, policy: FormatPolicy | None = None) -> Rendering:
    """Render ``template`` with ``args`` and report the error tokens emitted.

    Args:
        template (str): The format string.
        *args (object): Arguments referenced by the directives.
        policy (FormatPolicy | None): Policy points; defaults to `DEFAULT_POLICY`.

    Returns:
        Rendering: The rendered text and its error tokens.
    """
    return assembler.render(template, args, policy or DEFAULT_POLICY)


def format(template: str, *args: object, policy: FormatPolicy | None = None) -> str:  # noqa: A001
    """Render ``template`` with ``args``.

    This function is total: it returns a string for any template and arguments.

    Args:
        template (str): The format string.
        *args (object): Arguments referenced by the directives.
        policy (FormatPolicy | None): Policy points; defaults to `DEFAULT_POLICY`.

    Returns:
        str: The rendered text.
    """
    return assembler.render(template, args, policy or DEFAULT_POLICY).text


def write(
    sink: WriterSync,
    template: str,
    *args: object,
    policy: FormatPolicy | None = None,
) -> Result[None, Exception]:
    """Render ``template`` and write it to ``sink`` as UTF-8.

    The sink receives a single ``write()`` call, followed by ``flush()`` when it
    has one. Failures are not retried.

    Args:
        sink (WriterSync): Byte sink, e.g. ``sys.stdout.buffer`` or `io.BytesIO`.
        template (str): The format string.
        *args (object): Arguments referenced by the directives.
        policy (FormatPolicy | None): Policy points; defaults to `DEFAULT_POLICY`.

    Returns:
        Result[None, Exception]: ``Ok(None)``, or ``Err(exc)`` with the exception the
        sink raised.
    """
    text: str = format(template, *args, policy=policy)
    try:
        sink.write(text.encode("utf-8"))
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except Exception as exc:
        logger.debug("Write of %d characters failed: %s", len(text), exc)
        return Err(exc)
    return Ok(None)
