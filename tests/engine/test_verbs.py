# topmark:header:start
#
#   project      : PrintfKit
#   file         : test_verbs.py
#   file_relpath : tests/engine/test_verbs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-verb conversion tests, driven through `printfkit.format`."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from printfkit import Err, Ok, format
from printfkit.core.display import FmtResult, WriterSync
from tests.conftest import parametrize


@dataclass
class Point:
    x: int
    y: int


class Named:
    """Implements `Display` by writing its name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def fmt(self, f: WriterSync) -> FmtResult:
        f.write(self.name.encode("utf-8"))
        return Ok(None)


class Broken:
    """Implements `Display` but always fails."""

    def fmt(self, f: WriterSync) -> FmtResult:
        return Err(ValueError("boom"))


class Loud:
    def __str__(self) -> str:
        raise ValueError("nope")


@parametrize(
    "template, arg, expected",
    [
        ("%t", 1, "true"),
        ("%t", "", "false"),
        ("%t", None, "false"),
        ("%5t", True, " true"),
    ],
)
def test_bool(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%d", 42, "42"),
        ("%d", -7, "-7"),
        ("%+d", 42, "+42"),
        ("% d", 42, " 42"),
        ("%05d", -42, "-0042"),
        ("%-5d|", 42, "42   |"),
        ("%.3d", 7, "007"),
        ("%05.3d", 7, "  007"),
        ("%.0d", 0, ""),
        ("%b", 5, "101"),
        ("%#b", 5, "0b101"),
        ("%o", 8, "10"),
        ("%#o", 8, "010"),
        ("%#o", 0, "0"),
        ("%#.3o", 8, "010"),
        ("%x", 255, "0xff"),
        ("%X", 255, "0XFF"),
        ("%x", 0, "0x0"),
        ("%.0x", 0, ""),
        ("%#x", 255, "0xff"),
        ("%#X", 255, "0XFF"),
        ("%#06x", 255, "0x00ff"),
        ("%x", -255, "-0xff"),
        ("%08x", 255, "0x0000ff"),
        ("%#.0o", 0, "0"),
        ("%#.0o", 8, "010"),
        ("%d", True, "1"),
        ("%d", 3.0, "3"),
        ("%d", Decimal("4"), "4"),
        ("%d", Fraction(10, 2), "5"),
        ("%d", 10**30, "1000000000000000000000000000000"),
    ],
)
def test_integer(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%d", 2.5, "%!(BAD TYPE 'd' float)"),
        ("%d", "a", "%!(BAD TYPE 'd' str)"),
        ("%b", None, "%!(BAD TYPE 'b' NoneType)"),
        ("%o", Decimal("NaN"), "%!(BAD TYPE 'o' Decimal)"),
        ("%c", "A", "%!(BAD TYPE 'c' str)"),
    ],
)
def test_integer_bad_type(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "arg, expected",
    [(65, "A"), (0x1F600, "\U0001f600"), (-1, "�"), (0x110000, "�"), (0xD800, "�")],
)
def test_char(arg: int, expected: str) -> None:
    assert format("%c", arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%f", 3.14159, "3.141590"),
        ("%.2f", 3.14159, "3.14"),
        ("%8.3f", -3.14159, "  -3.142"),
        ("%08.3f", -3.14159, "-003.142"),
        ("%+.1f", 2.0, "+2.0"),
        ("% .1f", 2.0, " 2.0"),
        ("%f", 3, "3.000000"),
        ("%.1f", Fraction(1, 4), "0.2"),
        ("%F", 1.5, "1.500000"),
        ("%.0f", 2.0, "2"),
        ("%#.0f", 2.0, "2."),
        ("%e", 1234.5678, "1.234568e+03"),
        ("%E", 0.000123, "1.230000E-04"),
        ("%.2e", 0.0, "0.00e+00"),
        ("%g", 100000.0, "100000"),
        ("%g", 1000000.0, "1e+06"),
        ("%g", 0.0001, "0.0001"),
        ("%g", 0.00001, "1e-05"),
        ("%G", 1e-10, "1E-10"),
        ("%.3g", 3.14159, "3.14"),
        ("%.0g", 123.0, "1e+02"),
        ("%#g", 1.5, "1.50000"),
        ("%g", 1.5, "1.5"),
    ],
)
def test_float(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%f", float("nan"), "NaN"),
        ("%f", float("inf"), "Inf"),
        ("%f", float("-inf"), "-Inf"),
        ("%+f", float("inf"), "+Inf"),
        ("%05f", float("inf"), "  Inf"),
        ("%E", float("-inf"), "-Inf"),
        ("%-6g|", float("nan"), "NaN   |"),
        ("%+f", float("nan"), "+NaN"),
        ("% e", float("nan"), " NaN"),
        ("%f", 10**400, "Inf"),
        ("%+e", -(10**400), "-Inf"),
        ("%f", Fraction(10**400, 3), "Inf"),
    ],
)
def test_float_specials(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%f", True, "%!(BAD TYPE 'f' bool)"),
        ("%e", "1", "%!(BAD TYPE 'e' str)"),
        ("%g", [1.0], "%!(BAD TYPE 'g' list)"),
    ],
)
def test_float_bad_type(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%s", "x", "x"),
        ("%5s", "x", "    x"),
        ("%-5s", "x", "x    "),
        ("%.2s", "hello", "he"),
        ("%05s", "ab", "000ab"),
        ("%s", 12, "12"),
        ("%s", None, "None"),
        ("%T", 1, "int"),
        ("%T", [], "list"),
        ("%T", Point(1, 2), "Point"),
        ("%.2T", "x", "st"),
    ],
)
def test_string_and_type(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%x", "hi", "6869"),
        ("%X", "\xff", "C3BF"),
        ("%x", "\xff", "c3bf"),
        ("% x", "hi", "68 69"),
        ("%# x", "hi", "0x68 0x69"),
        ("%#x", "hi", "0x6869"),
        ("%#X", "hi", "0X6869"),
        ("%.1x", "\xe9!", "c3"),
        ("%x", b"\x00\xff", "00ff"),
        ("%x", bytearray(b"\x01"), "01"),
        ("%#x", "", ""),
    ],
)
def test_hex_text(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%v", [1, 2], "[1, 2]"),
        ("%v", None, "None"),
        ("%.3v", "hello", "hel"),
        ("%#v", {"a": [1, {"b": 2}]}, "{'a': [1, {'b': 2}]}"),
        ("%#.2v", {"a": [1, {"b": 2}]}, "{'a': [1, {...}]}"),
        ("%#v", "s", "'s'"),
    ],
)
def test_value(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


@parametrize(
    "template, arg, expected",
    [
        ("%j", {"a": [1, 2]}, '{"a":[1,2]}'),
        ("%j", (1, "x"), '[1,"x"]'),
        ("%j", {3, 1, 2}, "[1,2,3]"),
        ("%j", Point(1, 2), '{"x":1,"y":2}'),
        ("%j", "\xe9", '"\xe9"'),
        ("%j", None, "null"),
        ("%J", {"a": 1}, '{\n  "a": 1\n}'),
        ("%J", [], "[]"),
    ],
)
def test_json(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


def test_json_unserializable_is_bad_type() -> None:
    assert format("%j", object()) == "%!(BAD TYPE 'j' object)"
    assert format("%J", {(1, 2): "tuple key"}) == "%!(BAD TYPE 'J' dict)"


def test_json_circular_is_bad_type() -> None:
    loop: list[object] = []
    loop.append(loop)
    assert format("%j", loop) == "%!(BAD TYPE 'j' list)"


def test_inspect() -> None:
    assert format("%i", {"b": 1, "a": [1, 2]}) == "{'b': 1, 'a': [1, 2]}"
    assert format("%i", "s") == "'s'"
    assert format("%I", [1, 2]) == "[1, 2]"
    expanded: str = format("%I", {"alpha": list(range(10)), "beta": "b" * 30})
    assert "\n" in expanded
    assert expanded.startswith("{")


def test_inspect_one_line_for_long_values() -> None:
    assert "\n" not in format("%i", list(range(100)))


def test_display() -> None:
    assert format("%?", Named("Ann")) == "Ann"
    assert format("%6?|", Named("Ann")) == "   Ann|"
    assert format("%.1?", Named("Ann")) == "A"


def test_display_errors() -> None:
    assert format("%?", Broken()) == "%!(DISPLAY ERROR '?': boom)"
    assert format("%?", 3) == "%!(BAD DISPLAY '?' int)"


def test_display_sink_is_per_argument() -> None:
    assert format("%?%?", Named("a"), Named("b")) == "ab"


@parametrize(
    "template, arg, expected",
    [
        ("%<d", [1, 2, 3], "[ 1, 2, 3 ]"),
        ("%<3d", [1, 2], "[   1,   2 ]"),
        ("%<-3d|", (1, 2), "[ 1  , 2   ]|"),
        ("%<x", [10, 255], "[ 0xa, 0xff ]"),
        ("%<s", ["a", "b"], "[ a, b ]"),
        ("%<d", [1, "x"], "%!(BAD TYPE 'd' str)"),
        ("%<d", 5, "%!(BAD TYPE 'd' int)"),
        ("%<s", "ab", "%!(BAD TYPE 's' str)"),
    ],
)
def test_spread(template: str, arg: object, expected: str) -> None:
    assert format(template, arg) == expected


def test_percent_verb_with_width() -> None:
    assert format("%5%") == "    %"
    assert format("100%%") == "100%"


def test_converter_exception_becomes_panic_token() -> None:
    assert format("%s", Loud()) == "%!(PANIC 's': ValueError: nope)"
