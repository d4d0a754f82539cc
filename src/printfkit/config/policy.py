# topmark:header:start
#
#   project      : PrintfKit
#   file         : policy.py
#   file_relpath : src/printfkit/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format policy: the tunable behaviors of the format engine.

The template syntax itself has no configuration surface. A handful of verb
behaviors are however policy decisions rather than syntax, and are collected in
the immutable `FormatPolicy`:

- whether `%x`/`%X` prefix integers with `0x`/`0X` without the `#` flag,
- whether `#` keeps trailing zeros for `%g`/`%G`,
- whether precision on `%x`/`%X` applied to text counts bytes or characters,
- whether unused arguments are reported with an `EXTRA` token,
- how the `<` spread flag joins element outputs,
- indentation/width of the expanded `J` and `I` dumps.

Policies are plain values; build variants with `dataclasses.replace()` or load
them from TOML via [`printfkit.config.io`][].
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from printfkit.core.enum_mixins import KeyedStrEnum


class HexPrecisionUnit(KeyedStrEnum):
    """Unit counted by the precision of `%x`/`%X` applied to text."""

    BYTES = ("bytes", "Truncate the UTF-8 encoding to N bytes")
    CHARS = ("chars", "Truncate the text to N characters, then encode", ("characters",))


@dataclass(frozen=True)
class FormatPolicy:
    """Immutable set of engine policy points.

    Attributes:
        hex_integer_prefix (bool): `%x`/`%X` of an integer always carry the `0x`/`0X`
            prefix. When False the prefix needs the `#` flag, as in C.
        g_alternate_keeps_zeros (bool): With `#`, `%g`/`%G` keep trailing zeros and
            the decimal point. When False the flag is ignored for these verbs.
        hex_precision_unit (HexPrecisionUnit): What the precision of `%x`/`%X` counts
            when the argument is text.
        report_extra_args (bool): Append `%!(EXTRA ...)` when arguments were left
            unused (only for templates without explicit indices).
        spread_open (str): Text emitted before the elements of a `<` directive.
        spread_separator (str): Text emitted between elements of a `<` directive.
        spread_close (str): Text emitted after the elements of a `<` directive.
        json_indent (int): Indentation of the expanded `%J` dump.
        inspect_width (int): Line width of the expanded `%I` dump.
    """

    hex_integer_prefix: bool = True
    g_alternate_keeps_zeros: bool = True
    hex_precision_unit: HexPrecisionUnit = HexPrecisionUnit.BYTES
    report_extra_args: bool = True
    spread_open: str = "[ "
    spread_separator: str = ", "
    spread_close: str = " ]"
    json_indent: int = 2
    inspect_width: int = 40

    def to_dict(self) -> dict[str, Any]:
        """Return the policy as TOML-friendly plain values."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value: Any = getattr(self, f.name)
            out[f.name] = value.key if isinstance(value, HexPrecisionUnit) else value
        return out


DEFAULT_POLICY: FormatPolicy = FormatPolicy()
