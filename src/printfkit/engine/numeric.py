# topmark:header:start
#
#   project      : PrintfKit
#   file         : numeric.py
#   file_relpath : src/printfkit/engine/numeric.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Integer and floating point conversions.

Integer verbs (``b``, ``o``, ``d``, ``x``, ``X``, ``c``) accept `int`, `bool`
and integral `float`/`Decimal`/`Fraction` values. Float verbs (``e``, ``f``,
``g`` and their upper-case forms) accept any real number except `bool`.

Converters return the magnitude as the piece body and the sign separately, so
the padder can insert zeros after the sign: ``%05d`` of -42 is ``-0042``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING

from printfkit.constants import DEFAULT_FLOAT_PRECISION, REPLACEMENT_CHAR
from printfkit.core.result import Err, Ok
from printfkit.engine.model import Flags, Piece, Verb
from printfkit.engine.tokens import bad_type

if TYPE_CHECKING:
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.result import Result
    from printfkit.engine.model import Conversion
    from printfkit.engine.tokens import ErrorToken

MAX_CODE_POINT: int = 0x10FFFF

_BASE_SPECS: dict[Verb, str] = {
    Verb.BINARY: "b",
    Verb.OCTAL: "o",
    Verb.DECIMAL: "d",
    Verb.HEX: "x",
    Verb.HEX_UPPER: "X",
}

_ALTERNATE_PREFIXES: dict[Verb, str] = {
    Verb.BINARY: "0b",
    Verb.HEX: "0x",
    Verb.HEX_UPPER: "0X",
}

_HEX_VERBS: frozenset[Verb] = frozenset({Verb.HEX, Verb.HEX_UPPER})


def coerce_int(value: object) -> int | None:
    """Return ``value`` as an `int` when it is integral, else ``None``."""
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, Fraction):
        return int(value) if value.denominator == 1 else None
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return None
    return None


def coerce_float(value: object) -> float | None:
    """Return ``value`` as a `float` when it is a real number other than `bool`."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal, Fraction)):
        try:
            return float(value)
        except OverflowError:
            # Integers and fractions beyond the float range saturate to infinity.
            return math.inf if value > 0 else -math.inf
    return None


def sign_of(negative: bool, conv: Conversion) -> str:
    """Return the sign text for a number under the directive's flags."""
    if negative:
        return "-"
    if conv.has(Flags.PLUS):
        return "+"
    if conv.has(Flags.SPACE):
        return " "
    return ""


def format_integer(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """Convert an integral value for ``b``, ``o``, ``d``, ``x`` and ``X``.

    Precision is a minimum digit count; when given, zero padding is disabled and a
    zero value with precision 0 renders no digits.

    Args:
        conv (Conversion): Resolved directive.
        value (object): Argument to convert.
        policy (FormatPolicy): Active policy (``hex_integer_prefix``).

    Returns:
        Result[Piece, ErrorToken]: The digits with sign and prefix, or ``BAD TYPE``.
    """
    n: int | None = coerce_int(value)
    if n is None:
        return Err(bad_type(conv.verb.value, value))

    digits: str = format(abs(n), _BASE_SPECS[conv.verb])
    zero_fill: bool = True
    if conv.precision is not None:
        zero_fill = False
        digits = "" if conv.precision == 0 and n == 0 else digits.zfill(conv.precision)

    prefix: str = ""
    if conv.verb is Verb.OCTAL:
        # The alternate octal form always shows a leading zero, even for `%#.0o` of 0.
        if conv.has(Flags.SHARP) and not digits.startswith("0"):
            prefix = "0"
    elif digits and (
        conv.has(Flags.SHARP) or (policy.hex_integer_prefix and conv.verb in _HEX_VERBS)
    ):
        prefix = _ALTERNATE_PREFIXES.get(conv.verb, "")

    return Ok(Piece(digits, sign=sign_of(n < 0, conv), prefix=prefix, zero_fill=zero_fill))


def format_char(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """Convert a code point for ``c``; invalid code points become U+FFFD."""
    n: int | None = coerce_int(value)
    if n is None:
        return Err(bad_type(conv.verb.value, value))
    # Lone surrogates cannot be encoded as UTF-8.
    if n < 0 or n > MAX_CODE_POINT or 0xD800 <= n <= 0xDFFF:
        return Ok(Piece(REPLACEMENT_CHAR))
    return Ok(Piece(chr(n)))


def format_float(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """Convert a real number for ``e``, ``f``, ``g`` and their upper-case forms.

    ``g`` follows the C rules: with ``P`` the precision (6 when absent, 1 when 0),
    the exponent form is used when the exponent is below -4 or at least ``P``.
    Trailing zeros are removed unless ``#`` is set and the policy keeps them.

    Args:
        conv (Conversion): Resolved directive.
        value (object): Argument to convert.
        policy (FormatPolicy): Active policy (``g_alternate_keeps_zeros``).

    Returns:
        Result[Piece, ErrorToken]: The formatted magnitude and sign, or ``BAD TYPE``.
    """
    x: float | None = coerce_float(value)
    if x is None:
        return Err(bad_type(conv.verb.value, value))

    if math.isnan(x):
        return Ok(Piece("NaN", sign=sign_of(False, conv), zero_fill=False))
    negative: bool = math.copysign(1.0, x) < 0
    sign: str = sign_of(negative, conv)
    if math.isinf(x):
        return Ok(Piece("Inf", sign=sign, zero_fill=False))

    magnitude: float = abs(x)
    precision: int = DEFAULT_FLOAT_PRECISION if conv.precision is None else conv.precision
    kind: str = conv.verb.value.lower()
    alternate: str = "#" if conv.has(Flags.SHARP) else ""
    if kind == "g":
        precision = max(precision, 1)
        if not policy.g_alternate_keeps_zeros:
            alternate = ""
    text: str = format(magnitude, f"{alternate}.{precision}{kind}")
    if conv.verb.value.isupper():
        text = text.upper()
    return Ok(Piece(text, sign=sign))
