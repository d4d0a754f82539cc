# topmark:header:start
#
#   project      : PrintfKit
#   file         : directive.py
#   file_relpath : src/printfkit/engine/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive parser.

Turns a [`DirectiveSpan`][printfkit.engine.scanner.DirectiveSpan] into a
structured `Directive`. Indices in the template are 1-based (``%[1]d``) and are
stored 0-based on the directive.

Width and precision are described by a `CountSpec`:

- ``None``: absent,
- `LiteralCount`: digits written in the template,
- `NextArgument`: ``*``, read from the next sequential argument,
- `ArgumentAt`: ``*[n]``, read from argument ``n`` without moving the cursor.

Widths, precisions and indices above `MAX_COUNT` are rejected.

Parsing never raises; failures are returned as `ParseFailure` values carrying
the error token and how many arguments the failed directive still consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from printfkit.constants import MAX_COUNT
from printfkit.core.result import Err, Ok
from printfkit.engine.model import Flags, Verb
from printfkit.engine.scanner import DIRECTIVE_PATTERN
from printfkit.engine.tokens import ErrorToken, TokenKind

if TYPE_CHECKING:
    import re

    from printfkit.core.result import Result
    from printfkit.engine.scanner import DirectiveSpan


@dataclass(frozen=True)
class LiteralCount:
    """Width or precision written as digits in the template."""

    value: int


@dataclass(frozen=True)
class NextArgument:
    """Width or precision read from the next sequential argument (``*``)."""


@dataclass(frozen=True)
class ArgumentAt:
    """Width or precision read from a fixed argument (``*[n]``), 0-based."""

    position: int


CountSpec = Union[LiteralCount, NextArgument, ArgumentAt, None]


@dataclass(frozen=True)
class Directive:
    """One parsed ``%...verb`` unit.

    Attributes:
        verb (Verb): Conversion verb.
        flags (Flags): Modifier flags.
        width (CountSpec): Width specification.
        precision (CountSpec): Precision specification.
        explicit_index (int | None): 0-based argument index from ``[n]``.
        text (str): Raw directive text, for diagnostics.
    """

    verb: Verb
    flags: Flags = Flags.NONE
    width: CountSpec = None
    precision: CountSpec = None
    explicit_index: int | None = None
    text: str = ""


@dataclass(frozen=True)
class ParseFailure:
    """A directive that could not be parsed.

    Attributes:
        token (ErrorToken): Token rendered in place of the directive.
        explicit_index (int | None): The directive's explicit index, if it had a
            valid one.
        consumes_argument (bool): Whether the failed directive still consumes the
            argument it would have formatted.
    """

    token: ErrorToken
    explicit_index: int | None = None
    consumes_argument: bool = False


def parse_number(raw: str) -> int | None:
    """Parse an ASCII digit run; ``None`` when it is not one or exceeds `MAX_COUNT`."""
    if not raw.isascii() or not raw.isdigit():
        return None
    digits: str = raw.lstrip("0") or "0"
    if len(digits) > len(str(MAX_COUNT)):
        return None
    value: int = int(digits)
    return value if value <= MAX_COUNT else None


def parse_index(raw: str) -> int | None:
    """Convert a 1-based template index to a 0-based position.

    Args:
        raw (str): Text between the brackets.

    Returns:
        int | None: The 0-based position, or ``None`` when ``raw`` is not a
        positive decimal number up to `MAX_COUNT`.
    """
    value: int | None = parse_number(raw)
    return value - 1 if value else None


def _parse_count(raw: str | None, kind: TokenKind, verb: str) -> Result[CountSpec, ErrorToken]:
    if raw is None:
        return Ok(None)
    if not raw.startswith("*"):
        value: int | None = parse_number(raw)
        if value is None:
            return Err(ErrorToken(kind, verb, raw))
        return Ok(LiteralCount(value))
    if raw == "*":
        return Ok(NextArgument())
    position: int | None = parse_index(raw[2:-1])
    if position is None:
        return Err(ErrorToken(TokenKind.BAD_INDEX))
    return Ok(ArgumentAt(position))


def _count_failure(
    token: ErrorToken, explicit_index: int | None, verb: Verb | None
) -> ParseFailure:
    # An oversized literal still consumes the directive's argument; a bad `*[n]` does not.
    consumes: bool = token.kind is not TokenKind.BAD_INDEX and (
        verb is None or verb.consumes_argument
    )
    return ParseFailure(token, explicit_index=explicit_index, consumes_argument=consumes)


def parse_directive(span: DirectiveSpan) -> Result[Directive, ParseFailure]:
    """Parse one directive span.

    Args:
        span (DirectiveSpan): Raw directive text from the scanner.

    Returns:
        Result[Directive, ParseFailure]: The parsed directive, or the failure to
        render in its place.
    """
    m: re.Match[str] | None = DIRECTIVE_PATTERN.fullmatch(span.text)
    if m is None or m.group("verb") is None:
        return Err(ParseFailure(ErrorToken(TokenKind.NO_VERB)))

    explicit_index: int | None = None
    raw_index: str | None = m.group("index")
    if raw_index is not None:
        explicit_index = parse_index(raw_index)
        if explicit_index is None:
            return Err(ParseFailure(ErrorToken(TokenKind.BAD_INDEX)))

    verb_char: str = m.group("verb")
    verb: Verb | None = Verb.from_char(verb_char)

    width: Result[CountSpec, ErrorToken] = _parse_count(
        m.group("width"), TokenKind.BAD_WIDTH, verb_char
    )
    if width.is_err():
        return Err(_count_failure(width.unwrap_err(), explicit_index, verb))

    precision: Result[CountSpec, ErrorToken]
    if m.group("dot") is None:
        precision = Ok(None)
    elif m.group("precision") is None:
        # A bare '.' means precision zero.
        precision = Ok(LiteralCount(0))
    else:
        precision = _parse_count(m.group("precision"), TokenKind.BAD_PRECISION, verb_char)
    if precision.is_err():
        return Err(_count_failure(precision.unwrap_err(), explicit_index, verb))

    if verb is None:
        return Err(
            ParseFailure(
                ErrorToken(TokenKind.BAD_VERB, verb_char),
                explicit_index=explicit_index,
                consumes_argument=True,
            )
        )

    return Ok(
        Directive(
            verb=verb,
            flags=Flags.from_chars(m.group("flags")),
            width=width.unwrap(),
            precision=precision.unwrap(),
            explicit_index=explicit_index,
            text=span.text,
        )
    )
