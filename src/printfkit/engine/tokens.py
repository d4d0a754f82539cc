# topmark:header:start
#
#   project      : PrintfKit
#   file         : tokens.py
#   file_relpath : src/printfkit/engine/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-band error tokens.

A directive that cannot be resolved is replaced by a fixed-format token such as
``%!(BAD VERB 'h')`` instead of aborting the render. Tokens are plain values:
the parser, cursor and converters return them inside ``Err(...)`` and the
assembler folds them into the output text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Recoverable template-level failures."""

    BAD_VERB = "bad_verb"
    MISSING = "missing"
    BAD_INDEX = "bad_index"
    NO_VERB = "no_verb"
    BAD_WIDTH = "bad_width"
    BAD_PRECISION = "bad_precision"
    BAD_TYPE = "bad_type"
    BAD_DISPLAY = "bad_display"
    DISPLAY_ERROR = "display_error"
    PANIC = "panic"
    EXTRA = "extra"


@dataclass(frozen=True)
class ErrorToken:
    """One rendered failure.

    Attributes:
        kind (TokenKind): The failure category.
        verb (str): The directive's verb character ("" when not known).
        detail (str): Kind-specific detail (offending value, type name, message).
    """

    kind: TokenKind
    verb: str = ""
    detail: str = ""

    def render(self) -> str:
        """Return the token text inserted into the output."""
        match self.kind:
            case TokenKind.BAD_VERB:
                return f"%!(BAD VERB '{self.verb}')"
            case TokenKind.MISSING:
                return f"%!(MISSING '{self.verb}')"
            case TokenKind.BAD_INDEX:
                return "%!(BAD INDEX)"
            case TokenKind.NO_VERB:
                return "%!(NOVERB)"
            case TokenKind.BAD_WIDTH:
                return f"%!(BAD WIDTH '{self.detail}')"
            case TokenKind.BAD_PRECISION:
                return f"%!(BAD PREC '{self.detail}')"
            case TokenKind.BAD_TYPE:
                return f"%!(BAD TYPE '{self.verb}' {self.detail})"
            case TokenKind.BAD_DISPLAY:
                return f"%!(BAD DISPLAY '{self.verb}' {self.detail})"
            case TokenKind.DISPLAY_ERROR:
                return f"%!(DISPLAY ERROR '{self.verb}': {self.detail})"
            case TokenKind.PANIC:
                return f"%!(PANIC '{self.verb}': {self.detail})"
            case TokenKind.EXTRA:
                return f"%!(EXTRA {self.detail})"

    def __str__(self) -> str:
        return self.render()


def bad_type(verb: str, value: object) -> ErrorToken:
    """Token for a verb applied to a value it cannot convert."""
    return ErrorToken(TokenKind.BAD_TYPE, verb, type(value).__name__)


def panicked(verb: str, exc: Exception) -> ErrorToken:
    """Token for an exception escaping user code during conversion."""
    return ErrorToken(TokenKind.PANIC, verb, f"{type(exc).__name__}: {exc}")
