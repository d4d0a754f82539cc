# topmark:header:start
#
#   project      : PrintfKit
#   file         : model.py
#   file_relpath : src/printfkit/engine/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types shared by the format engine stages.

- `Verb`: the closed set of conversion verbs, keyed by their template character.
- `Flags`: the modifier flags of a directive.
- `Conversion`: a directive with width and precision resolved to integers.
- `Piece`: unpadded converter output, split so the padder can place zeros
  between the sign/prefix and the digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto

from printfkit.core.enum_mixins import KeyedStrEnum


class VerbFamily(Enum):
    """Grouping of verbs by the kind of value they convert."""

    LITERAL = "literal"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    STRUCTURAL = "structural"
    DISPLAY = "display"


class Verb(KeyedStrEnum):
    """Conversion verbs, keyed by their template character."""

    PERCENT = ("%", "Literal percent; consumes no argument")
    BOOL = ("t", "Truthiness as 'true' or 'false'")
    BINARY = ("b", "Integer in base 2")
    CHAR = ("c", "Character at the integer code point")
    DECIMAL = ("d", "Integer in base 10")
    OCTAL = ("o", "Integer in base 8")
    HEX = ("x", "Integer in base 16 (lower case), or text as hex bytes")
    HEX_UPPER = ("X", "Integer in base 16 (upper case), or text as hex bytes")
    EXP = ("e", "Scientific notation, e.g. 1.234560e+01")
    EXP_UPPER = ("E", "Scientific notation, e.g. 1.234560E+01")
    FIXED = ("f", "Decimal point, no exponent")
    FIXED_UPPER = ("F", "Decimal point, no exponent (upper-case specials)")
    GENERAL = ("g", "%e or %f depending on the exponent")
    GENERAL_UPPER = ("G", "%E or %F depending on the exponent")
    STRING = ("s", "String form, truncated by precision")
    TYPE = ("T", "Type name of the argument")
    VALUE = ("v", "Default form; with '#' an inspection dump limited to precision depth")
    JSON = ("j", "Compact JSON")
    JSON_EXPANDED = ("J", "Indented JSON")
    INSPECT = ("i", "Developer inspection on one line")
    INSPECT_EXPANDED = ("I", "Developer inspection, expanded")
    DISPLAY = ("?", "Rendered by the argument's Display.fmt()")

    @classmethod
    def from_char(cls, char: str) -> Verb | None:
        """Return the verb spelled by ``char`` (exact, case-sensitive), or ``None``."""
        for verb in cls:
            if verb.value == char:
                return verb
        return None

    @property
    def family(self) -> VerbFamily:
        """Return the family of values this verb converts."""
        return _FAMILIES[self]

    @property
    def consumes_argument(self) -> bool:
        """Whether the verb reads an argument."""
        return self is not Verb.PERCENT


_FAMILIES: dict[Verb, VerbFamily] = {
    Verb.PERCENT: VerbFamily.LITERAL,
    Verb.BOOL: VerbFamily.BOOLEAN,
    Verb.BINARY: VerbFamily.INTEGER,
    Verb.CHAR: VerbFamily.INTEGER,
    Verb.DECIMAL: VerbFamily.INTEGER,
    Verb.OCTAL: VerbFamily.INTEGER,
    Verb.HEX: VerbFamily.INTEGER,
    Verb.HEX_UPPER: VerbFamily.INTEGER,
    Verb.EXP: VerbFamily.FLOAT,
    Verb.EXP_UPPER: VerbFamily.FLOAT,
    Verb.FIXED: VerbFamily.FLOAT,
    Verb.FIXED_UPPER: VerbFamily.FLOAT,
    Verb.GENERAL: VerbFamily.FLOAT,
    Verb.GENERAL_UPPER: VerbFamily.FLOAT,
    Verb.STRING: VerbFamily.TEXT,
    Verb.TYPE: VerbFamily.TEXT,
    Verb.VALUE: VerbFamily.STRUCTURAL,
    Verb.JSON: VerbFamily.STRUCTURAL,
    Verb.JSON_EXPANDED: VerbFamily.STRUCTURAL,
    Verb.INSPECT: VerbFamily.STRUCTURAL,
    Verb.INSPECT_EXPANDED: VerbFamily.STRUCTURAL,
    Verb.DISPLAY: VerbFamily.DISPLAY,
}


class Flags(Flag):
    """Directive flags."""

    NONE = 0
    PLUS = auto()
    MINUS = auto()
    SHARP = auto()
    SPACE = auto()
    ZERO = auto()
    SPREAD = auto()

    @classmethod
    def from_chars(cls, chars: str) -> Flags:
        """Build the flag set spelled by ``chars`` (e.g. ``"-0#"``)."""
        flags: Flags = cls.NONE
        for c in chars:
            flags |= FLAG_CHARS[c]
        return flags


FLAG_CHARS: dict[str, Flags] = {
    "+": Flags.PLUS,
    "-": Flags.MINUS,
    "#": Flags.SHARP,
    " ": Flags.SPACE,
    "0": Flags.ZERO,
    "<": Flags.SPREAD,
}


@dataclass(frozen=True)
class Conversion:
    """A directive ready for conversion: width and precision are plain integers.

    Attributes:
        verb (Verb): The conversion verb.
        flags (Flags): Directive flags; a negative ``*`` width has already been
            folded into `Flags.MINUS`.
        width (int | None): Minimum width, or ``None``.
        precision (int | None): Precision, or ``None``.
    """

    verb: Verb
    flags: Flags = Flags.NONE
    width: int | None = None
    precision: int | None = None

    def has(self, flag: Flags) -> bool:
        """Return True when ``flag`` is set."""
        return flag in self.flags


@dataclass(frozen=True)
class Piece:
    """Unpadded converter output.

    Attributes:
        text (str): The body (digits, text, dump).
        sign (str): Sign placed before any zero padding ("", "-", "+", " ").
        prefix (str): Base prefix placed after the sign and before zero padding.
        zero_fill (bool): Whether the `0` flag may pad this piece with zeros.
    """

    text: str
    sign: str = ""
    prefix: str = ""
    zero_fill: bool = True
