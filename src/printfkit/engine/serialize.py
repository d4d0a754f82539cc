# topmark:header:start
#
#   project      : PrintfKit
#   file         : serialize.py
#   file_relpath : src/printfkit/engine/serialize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text and structural conversions.

- ``t``: truthiness,
- ``s`` / ``T``: string form and type name,
- ``x`` / ``X`` on `str` and `bytes`: hex dump of the UTF-8 bytes,
- ``v``: default form, or a `pprint` dump with ``#``,
- ``j`` / ``J``: JSON via the standard `json` module,
- ``i`` / ``I``: developer inspection via `pprint`.

Precision truncates the text forms and limits the nesting depth of the dumps.
"""

from __future__ import annotations

import dataclasses
import json
import pprint
import sys
from typing import TYPE_CHECKING, Any

from printfkit.config.policy import HexPrecisionUnit
from printfkit.core.result import Err, Ok
from printfkit.engine.model import Flags, Piece, Verb
from printfkit.engine.tokens import bad_type

if TYPE_CHECKING:
    from printfkit.config.policy import FormatPolicy
    from printfkit.core.result import Result
    from printfkit.engine.model import Conversion
    from printfkit.engine.tokens import ErrorToken

TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)


def truncate(text: str, precision: int | None) -> str:
    """Cut ``text`` to ``precision`` code points (no-op when ``precision`` is None)."""
    return text if precision is None else text[:precision]


def _depth(precision: int | None) -> int | None:
    # pprint rejects a depth of 0; treat it as unlimited.
    return precision if precision else None


def format_bool(conv: Conversion, value: object, policy: FormatPolicy) -> Result[Piece, ErrorToken]:
    return Ok(Piece(truncate("true" if value else "false", conv.precision)))


def format_string(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    return Ok(Piece(truncate(str(value), conv.precision)))


def format_type(conv: Conversion, value: object, policy: FormatPolicy) -> Result[Piece, ErrorToken]:
    return Ok(Piece(truncate(type(value).__name__, conv.precision)))


def format_hex_text(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """Hex-dump text or bytes for ``x`` / ``X``.

    Strings are encoded as UTF-8 first. Precision truncates the input before
    encoding: to that many bytes, or to that many characters when the policy's
    ``hex_precision_unit`` is ``chars``. The space flag separates bytes; ``#``
    adds a ``0x`` prefix, to every byte when combined with the space flag.

    Args:
        conv (Conversion): Resolved directive.
        value (object): A `str`, `bytes`, `bytearray` or `memoryview`.
        policy (FormatPolicy): Active policy.

    Returns:
        Result[Piece, ErrorToken]: The hex dump.
    """
    data: bytes
    if isinstance(value, str):
        if conv.precision is not None and policy.hex_precision_unit is HexPrecisionUnit.CHARS:
            data = value[: conv.precision].encode("utf-8", errors="surrogatepass")
        else:
            data = value.encode("utf-8", errors="surrogatepass")
            if conv.precision is not None:
                data = data[: conv.precision]
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        if conv.precision is not None:
            data = data[: conv.precision]
    else:
        return Err(bad_type(conv.verb.value, value))

    upper: bool = conv.verb is Verb.HEX_UPPER
    marker: str = ("0X" if upper else "0x") if conv.has(Flags.SHARP) else ""
    pairs: list[str] = [f"{b:02X}" if upper else f"{b:02x}" for b in data]
    if conv.has(Flags.SPACE):
        return Ok(Piece(" ".join(marker + p for p in pairs)))
    return Ok(Piece("".join(pairs), prefix=marker if pairs else ""))


def _json_default(obj: object) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        try:
            return sorted(obj)
        except TypeError:
            return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def format_json(conv: Conversion, value: object, policy: FormatPolicy) -> Result[Piece, ErrorToken]:
    """Serialize ``value`` as JSON: compact for ``j``, indented for ``J``.

    Dataclass instances serialize as objects, sets and tuples as arrays. Values
    `json` cannot encode (unknown types, circular references, non-string keys)
    yield ``BAD TYPE``.
    """
    try:
        if conv.verb is Verb.JSON_EXPANDED:
            text = json.dumps(
                value, indent=policy.json_indent, ensure_ascii=False, default=_json_default
            )
        else:
            text = json.dumps(
                value, separators=(",", ":"), ensure_ascii=False, default=_json_default
            )
    except (TypeError, ValueError):
        return Err(bad_type(conv.verb.value, value))
    return Ok(Piece(truncate(text, conv.precision)))


def format_inspect(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """Developer inspection: one line for ``i``, expanded for ``I``.

    Precision limits the nesting depth of the dump.
    """
    if conv.verb is Verb.INSPECT_EXPANDED:
        text: str = pprint.pformat(
            value,
            indent=2,
            width=policy.inspect_width,
            depth=_depth(conv.precision),
            sort_dicts=False,
        )
    else:
        text = pprint.pformat(
            value, width=sys.maxsize, depth=_depth(conv.precision), sort_dicts=False
        )
    return Ok(Piece(text))


def format_default(
    conv: Conversion, value: object, policy: FormatPolicy
) -> Result[Piece, ErrorToken]:
    """``v``: the string form; with ``#`` a `pprint` dump limited to precision depth."""
    if conv.has(Flags.SHARP):
        return Ok(Piece(pprint.pformat(value, depth=_depth(conv.precision), sort_dicts=False)))
    return Ok(Piece(truncate(str(value), conv.precision)))
