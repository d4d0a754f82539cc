# topmark:header:start
#
#   project      : PrintfKit
#   file         : scanner.py
#   file_relpath : src/printfkit/engine/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner splitting a template into literal runs and directive spans.

The scanner walks the template once, left to right, and lazily yields:

- ``LiteralRun``: text copied verbatim (``%%`` yields a literal ``%``),
- ``DirectiveSpan``: the raw text of one directive, from ``%`` up to and
  including its verb character,
- ``MalformedSpan``: a directive that reaches the end of the template before a
  verb.

The span grammar is shared with [`printfkit.engine.directive`][] through
``DIRECTIVE_PATTERN``::

    '%' ['[' INDEX ']'] FLAGS* WIDTH ['.' PRECISION] VERB
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

if TYPE_CHECKING:
    from collections.abc import Iterator

PERCENT: Final[str] = "%"

# Leading zeros are flags, so a literal width starts with 1-9. An unterminated
# '[' swallows the rest of the template (no verb follows).
DIRECTIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    %
    (?:\[(?P<index>[^\]]*)(?P<index_close>\])?)?
    (?P<flags>[-+\#\ 0<]*)
    (?P<width>[1-9][0-9]*|\*(?:\[[^\]]*\])?)?
    (?P<dot>\.(?P<precision>[0-9]+|\*(?:\[[^\]]*\])?)?)?
    (?P<verb>.)?
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class LiteralRun:
    """Verbatim template text."""

    text: str


@dataclass(frozen=True)
class DirectiveSpan:
    """Raw directive text (``%`` through the verb) and its offset in the template."""

    text: str
    offset: int


@dataclass(frozen=True)
class MalformedSpan:
    """Directive text cut off by the end of the template."""

    text: str
    offset: int


Segment = Union[LiteralRun, DirectiveSpan, MalformedSpan]


def scan(template: str) -> Iterator[Segment]:
    """Yield the segments of ``template`` in order.

    Args:
        template (str): The format string.

    Yields:
        Segment: Literal runs and directive spans, left to right.
    """
    pos: int = 0
    end: int = len(template)
    while pos < end:
        start: int = template.find(PERCENT, pos)
        if start < 0:
            yield LiteralRun(template[pos:])
            return
        if start > pos:
            yield LiteralRun(template[pos:start])

        if template.startswith("%%", start):
            yield LiteralRun(PERCENT)
            pos = start + 2
            continue

        m: re.Match[str] | None = DIRECTIVE_PATTERN.match(template, start)
        # The pattern always matches at a '%'; only the verb may be missing.
        assert m is not None
        if m.group("verb") is None:
            yield MalformedSpan(template[start:], start)
            return
        yield DirectiveSpan(m.group(0), start)
        pos = m.end()
