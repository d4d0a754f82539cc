# topmark:header:start
#
#   project      : PrintfKit
#   file         : assembler.py
#   file_relpath : src/printfkit/engine/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assembler: drive the pipeline and fold failures into error tokens.

For every directive the assembler resolves, in order:

1. the ``*`` width, then the ``*`` precision,
2. the directive's own argument (explicit ``[n]`` or sequential),
3. the conversion and padding.

Any failure along the way is rendered in place as an
[`ErrorToken`][printfkit.engine.tokens.ErrorToken]; a render never raises for
template or argument problems. Arguments left unread are reported once, at the
end, with an ``EXTRA`` token (unless explicit indices were used or the policy
disables it).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from printfkit.config.logging import get_logger
from printfkit.config.policy import DEFAULT_POLICY
from printfkit.constants import MAX_COUNT
from printfkit.core.result import Err, Ok
from printfkit.engine.cursor import ArgCursor, MissingArgument
from printfkit.engine.directive import (
    ArgumentAt,
    Directive,
    LiteralCount,
    NextArgument,
    parse_directive,
)
from printfkit.engine.model import Conversion, Flags
from printfkit.engine.numeric import coerce_int
from printfkit.engine.scanner import DirectiveSpan, LiteralRun, MalformedSpan, scan
from printfkit.engine.tokens import ErrorToken, TokenKind, panicked
from printfkit.engine.verbs import render_argument

if TYPE_CHECKING:
    from collections.abc import Sequence

    from printfkit.config.logging import PrintfkitLogger
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.result import Result
    from printfkit.engine.directive import CountSpec

logger: PrintfkitLogger = get_logger(__name__)


@dataclass(frozen=True)
class Rendering:
    """Result of a render.

    Attributes:
        text (str): The rendered string, error tokens included.
        errors (tuple[ErrorToken, ...]): The tokens emitted, in output order.
    """

    text: str
    errors: tuple[ErrorToken, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no error token was emitted."""
        return not self.errors

    def __str__(self) -> str:
        return self.text


def describe(value: object) -> str:
    """Return ``str(value)``, or a ``PANIC`` token if ``__str__`` raises."""
    try:
        return str(value)
    except Exception as exc:
        return panicked("v", exc).render()


def _resolve_count(
    spec: CountSpec,
    cursor: ArgCursor,
    directive: Directive,
    kind: TokenKind,
) -> Result[int | None, ErrorToken]:
    """Resolve a width or precision spec to an integer (``None`` when absent).

    Argument values outside ``[-MAX_COUNT, MAX_COUNT]`` are rejected like
    non-integers.
    """
    if spec is None:
        return Ok(None)
    if isinstance(spec, LiteralCount):
        return Ok(spec.value)

    fetched: Result[object, MissingArgument]
    if isinstance(spec, NextArgument):
        fetched = cursor.next_arg()
    else:
        assert isinstance(spec, ArgumentAt)
        fetched = cursor.arg_at(spec.position)
    if isinstance(fetched, Err):
        return Err(ErrorToken(TokenKind.MISSING, directive.verb.value))

    value: object = fetched.value
    count: int | None = None if isinstance(value, bool) else coerce_int(value)
    if count is None or abs(count) > MAX_COUNT:
        return Err(ErrorToken(kind, directive.verb.value, describe(value)))
    return Ok(count)


def _fetch_argument(directive: Directive, cursor: ArgCursor) -> Result[object, ErrorToken]:
    if not directive.verb.consumes_argument:
        return Ok(None)
    fetched: Result[object, MissingArgument]
    if directive.explicit_index is not None:
        fetched = cursor.arg_at(directive.explicit_index, attach=True)
    else:
        fetched = cursor.next_arg()
    return fetched.map_err(lambda _missing: ErrorToken(TokenKind.MISSING, directive.verb.value))


def render_directive(
    span: DirectiveSpan,
    cursor: ArgCursor,
    policy: FormatPolicy,
) -> Result[str, ErrorToken]:
    """Render one directive span against the cursor.

    Args:
        span (DirectiveSpan): Raw directive text.
        cursor (ArgCursor): Per-render argument cursor.
        policy (FormatPolicy): Active policy.

    Returns:
        Result[str, ErrorToken]: The padded output or the token to render instead.
    """
    parsed = parse_directive(span)
    if isinstance(parsed, Err):
        failure = parsed.error
        if failure.consumes_argument:
            cursor.skip(failure.explicit_index)
        return Err(failure.token)

    directive: Directive = parsed.value
    logger.trace("Parsed %r at offset %d: %r", span.text, span.offset, directive)

    width = _resolve_count(directive.width, cursor, directive, TokenKind.BAD_WIDTH)
    precision = _resolve_count(directive.precision, cursor, directive, TokenKind.BAD_PRECISION)
    failure: ErrorToken | None = None
    if isinstance(width, Err):
        failure = width.error
    elif isinstance(precision, Err):
        failure = precision.error
    if failure is not None:
        # The directive's own argument is still consumed so later directives line up.
        if directive.verb.consumes_argument:
            cursor.skip(directive.explicit_index)
        return Err(failure)

    flags: Flags = directive.flags
    width_value: int | None = width.unwrap()
    if width_value is not None and width_value < 0:
        flags |= Flags.MINUS
        width_value = -width_value
    precision_value: int | None = precision.unwrap()
    if precision_value is not None and precision_value < 0:
        precision_value = None

    argument = _fetch_argument(directive, cursor)
    if isinstance(argument, Err):
        return argument

    conv = Conversion(directive.verb, flags, width_value, precision_value)
    return render_argument(conv, argument.value, policy)


def _extra_token(unused: Sequence[object]) -> ErrorToken:
    detail: str = ", ".join(f"{type(a).__name__}={describe(a)}" for a in unused)
    return ErrorToken(TokenKind.EXTRA, detail=detail)


def render(
    template: str,
    args: Sequence[object] = (),
    policy: FormatPolicy = DEFAULT_POLICY,
) -> Rendering:
    """Render ``template`` against ``args``.

    Args:
        template (str): The format string.
        args (Sequence[object]): Positional arguments.
        policy (FormatPolicy): Policy points for verb behaviors.

    Returns:
        Rendering: The output text and the error tokens it contains.
    """
    cursor = ArgCursor(args)
    out: list[str] = []
    errors: list[ErrorToken] = []

    def emit(token: ErrorToken) -> None:
        logger.debug("Error token %s", token)
        errors.append(token)
        out.append(token.render())

    for segment in scan(template):
        if isinstance(segment, LiteralRun):
            out.append(segment.text)
        elif isinstance(segment, MalformedSpan):
            emit(ErrorToken(TokenKind.NO_VERB))
        else:
            outcome = render_directive(segment, cursor, policy)
            if isinstance(outcome, Ok):
                out.append(outcome.value)
            else:
                emit(outcome.error)

    if policy.report_extra_args and not cursor.reordered:
        unused: list[object] = cursor.unused()
        if unused:
            emit(_extra_token(unused))

    return Rendering("".join(out), tuple(errors))


def sprintf(
    template: str,
    args: Sequence[object] = (),
    policy: FormatPolicy = DEFAULT_POLICY,
) -> str:
    """Render ``template`` against ``args`` and return the text only."""
    return render(template, args, policy).text
