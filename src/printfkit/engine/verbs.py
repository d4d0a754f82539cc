# topmark:header:start
#
#   project      : PrintfKit
#   file         : verbs.py
#   file_relpath : src/printfkit/engine/verbs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verb table and per-argument conversion.

`VERB_TABLE` maps every `Verb` that reads an argument to its converter. A
converter takes the resolved `Conversion`, the argument and the active policy
and returns ``Ok(Piece)`` or ``Err(ErrorToken)``.

`render_argument()` is the entry point used by the assembler: it applies the
``<`` spread flag, guards against exceptions escaping user code
(``__str__``, ``__repr__``, ``fmt``) and pads the result.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from printfkit.core.display import Display
from printfkit.core.result import Err, Ok
from printfkit.engine.model import Conversion, Flags, Piece, Verb
from printfkit.engine.numeric import format_char, format_float, format_integer
from printfkit.engine.padder import pad
from printfkit.engine.serialize import (
    TEXT_TYPES,
    format_bool,
    format_default,
    format_hex_text,
    format_inspect,
    format_json,
    format_string,
    format_type,
    truncate,
)
from printfkit.engine.tokens import ErrorToken, TokenKind, bad_type, panicked

if TYPE_CHECKING:
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.result import Result

Converter = Callable[[Conversion, object, "FormatPolicy"], "Result[Piece, ErrorToken]"]


def format_hex(conv: Conversion, value: object, policy: FormatPolicy) -> Result[Piece, ErrorToken]:
    """``x`` / ``X``: hex digits of an integer, or hex dump of text and bytes."""
    if isinstance(value, TEXT_TYPES):
        return format_hex_text(conv, value, policy)
    return format_integer(conv, value, policy)


def format_display(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """``?``: render through the argument's `Display.fmt()` into a memory sink.

    Args:
        conv (Conversion): Resolved directive.
        value (object): Argument expected to implement `Display`.
        policy (FormatPolicy): Active policy (unused).

    Returns:
        Result[Piece, ErrorToken]: The decoded output, ``BAD DISPLAY`` when the
        argument has no ``fmt``, or ``DISPLAY ERROR`` when ``fmt`` returned ``Err``.

    Raises:
        TypeError: If ``fmt`` returns something other than ``Ok``/``Err``.
    """
    if not isinstance(value, Display):
        return Err(ErrorToken(TokenKind.BAD_DISPLAY, conv.verb.value, type(value).__name__))
    sink = io.BytesIO()
    outcome: object = value.fmt(sink)
    if isinstance(outcome, Err):
        return Err(ErrorToken(TokenKind.DISPLAY_ERROR, conv.verb.value, str(outcome.error)))
    if not isinstance(outcome, Ok):
        raise TypeError(f"fmt() returned {type(outcome).__name__}, expected Ok or Err")
    text: str = sink.getvalue().decode("utf-8", errors="replace")
    return Ok(Piece(truncate(text, conv.precision)))


VERB_TABLE: dict[Verb, Converter] = {
    Verb.BOOL: format_bool,
    Verb.BINARY: format_integer,
    Verb.CHAR: format_char,
    Verb.DECIMAL: format_integer,
    Verb.OCTAL: format_integer,
    Verb.HEX: format_hex,
    Verb.HEX_UPPER: format_hex,
    Verb.EXP: format_float,
    Verb.EXP_UPPER: format_float,
    Verb.FIXED: format_float,
    Verb.FIXED_UPPER: format_float,
    Verb.GENERAL: format_float,
    Verb.GENERAL_UPPER: format_float,
    Verb.STRING: format_string,
    Verb.TYPE: format_type,
    Verb.VALUE: format_default,
    Verb.JSON: format_json,
    Verb.JSON_EXPANDED: format_json,
    Verb.INSPECT: format_inspect,
    Verb.INSPECT_EXPANDED: format_inspect,
    Verb.DISPLAY: format_display,
}


def convert(conv: Conversion, value: object, policy: FormatPolicy) -> Result[Piece, ErrorToken]:
    """Run the converter for ``conv.verb``; exceptions become ``PANIC`` tokens."""
    if conv.verb is Verb.PERCENT:
        return Ok(Piece("%"))
    converter: Converter = VERB_TABLE[conv.verb]
    try:
        return converter(conv, value, policy)
    except Exception as exc:
        return Err(panicked(conv.verb.value, exc))


def is_spreadable(value: object) -> bool:
    """True for sequences whose elements the ``<`` flag formats one by one."""
    return isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES)


def render_argument(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[str, ErrorToken]:
    """Convert and pad one argument, spreading it over its elements for ``<``.

    With the ``<`` flag each element is converted and padded on its own and the
    results are joined with the policy's spread delimiters. The first element
    that fails makes the whole directive fail with that element's token.

    Args:
        conv (Conversion): Resolved directive.
        value (object): The directive's argument.
        policy (FormatPolicy): Active policy.

    Returns:
        Result[str, ErrorToken]: The padded text, or the token to render instead.
    """
    if not conv.has(Flags.SPREAD):
        return convert(conv, value, policy).map(lambda piece: pad(piece, conv))

    if not is_spreadable(value):
        return Err(bad_type(conv.verb.value, value))
    parts: list[str] = []
    for element in value:  # type: ignore[attr-defined]
        outcome: Result[Piece, ErrorToken] = convert(conv, element, policy)
        if isinstance(outcome, Err):
            return outcome
        parts.append(pad(outcome.value, conv))
    return Ok(policy.spread_open + policy.spread_separator.join(parts) + policy.spread_close)
