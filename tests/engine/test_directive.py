# topmark:header:start
#
#   project      : PrintfKit
#   file         : test_directive.py
#   file_relpath : tests/engine/test_directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the directive parser."""

from __future__ import annotations

from printfkit.core.result import Err, Ok
from printfkit.engine.directive import (
    ArgumentAt,
    Directive,
    LiteralCount,
    NextArgument,
    ParseFailure,
    parse_directive,
    parse_index,
    parse_number,
)
from printfkit.engine.model import Flags, Verb
from printfkit.engine.scanner import DirectiveSpan
from printfkit.engine.tokens import ErrorToken, TokenKind
from tests.conftest import parametrize


def _parse(text: str) -> Directive:
    outcome = parse_directive(DirectiveSpan(text, 0))
    assert isinstance(outcome, Ok), outcome
    return outcome.value


def _fail(text: str) -> ParseFailure:
    outcome = parse_directive(DirectiveSpan(text, 0))
    assert isinstance(outcome, Err), outcome
    return outcome.error


def test_parse_plain_verb() -> None:
    assert _parse("%d") == Directive(verb=Verb.DECIMAL, text="%d")


def test_parse_all_parts() -> None:
    d: Directive = _parse("%-+# 0<10.3x")
    assert d.verb is Verb.HEX
    assert d.flags == (
        Flags.MINUS | Flags.PLUS | Flags.SHARP | Flags.SPACE | Flags.ZERO | Flags.SPREAD
    )
    assert d.width == LiteralCount(10)
    assert d.precision == LiteralCount(3)
    assert d.explicit_index is None


def test_parse_explicit_index_is_one_based() -> None:
    assert _parse("%[2]s").explicit_index == 1


@parametrize(
    "text, width, precision",
    [
        ("%*d", NextArgument(), None),
        ("%.*f", None, NextArgument()),
        ("%*[3].*[1]f", ArgumentAt(2), ArgumentAt(0)),
        ("%.f", None, LiteralCount(0)),
        ("%12.0e", LiteralCount(12), LiteralCount(0)),
    ],
)
def test_parse_counts(text: str, width: object, precision: object) -> None:
    d: Directive = _parse(text)
    assert d.width == width
    assert d.precision == precision


@parametrize("text", ["%[0]d", "%[x]d", "%[]d", "%[-1]d", "%*[0]d", "%.*[a]f"])
def test_parse_bad_index(text: str) -> None:
    """Bad indices fail without consuming an argument."""
    failure: ParseFailure = _fail(text)
    assert failure.token == ErrorToken(TokenKind.BAD_INDEX)
    assert failure.consumes_argument is False


def test_parse_bad_verb_consumes_argument() -> None:
    failure: ParseFailure = _fail("%h")
    assert failure.token.render() == "%!(BAD VERB 'h')"
    assert failure.consumes_argument is True
    assert failure.explicit_index is None


def test_parse_bad_verb_keeps_explicit_index() -> None:
    failure: ParseFailure = _fail("%[3]h")
    assert failure.explicit_index == 2
    assert failure.consumes_argument is True


def test_parse_verbs_are_case_sensitive() -> None:
    assert _parse("%x").verb is Verb.HEX
    assert _parse("%X").verb is Verb.HEX_UPPER
    assert _fail("%D").token.kind is TokenKind.BAD_VERB


@parametrize(
    "raw, expected",
    [
        ("1", 0),
        ("10", 9),
        ("0", None),
        ("", None),
        ("１", None),
        ("1000000", 999_999),
        ("1000001", None),
        ("1" * 5000, None),
    ],
)
def test_parse_index(raw: str, expected: int | None) -> None:
    assert parse_index(raw) == expected


@parametrize(
    "raw, expected",
    [
        ("0", 0),
        ("007", 7),
        ("1000000", 1_000_000),
        ("0001000000", 1_000_000),
        ("1000001", None),
        ("9" * 5000, None),
        ("-1", None),
    ],
)
def test_parse_number_caps_digit_runs(raw: str, expected: int | None) -> None:
    assert parse_number(raw) == expected


def test_oversized_width_still_consumes_its_argument() -> None:
    failure: ParseFailure = _fail("%[2]1000001d")
    assert failure.token == ErrorToken(TokenKind.BAD_WIDTH, "d", "1000001")
    assert failure.explicit_index == 1
    assert failure.consumes_argument is True


def test_oversized_precision_on_percent_consumes_nothing() -> None:
    failure: ParseFailure = _fail("%.1000001%")
    assert failure.token.kind is TokenKind.BAD_PRECISION
    assert failure.consumes_argument is False


def test_bad_star_index_consumes_nothing() -> None:
    failure: ParseFailure = _fail("%*[0]d")
    assert failure.token.kind is TokenKind.BAD_INDEX
    assert failure.consumes_argument is False
