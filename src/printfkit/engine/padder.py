# topmark:header:start
#
#   project      : PrintfKit
#   file         : padder.py
#   file_relpath : src/printfkit/engine/padder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Width, justification and zero padding of converted pieces.

Width is counted in code points. Zero padding is inserted between the sign/base
prefix and the body, so ``-42`` zero-padded to 5 is ``-0042`` and ``0xff`` is
``0x00ff``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from printfkit.engine.model import Flags

if TYPE_CHECKING:
    from printfkit.engine.model import Conversion, Piece


def pad(piece: Piece, conv: Conversion) -> str:
    """Pad ``piece`` to the width of ``conv``.

    Args:
        piece (Piece): Unpadded converter output.
        conv (Conversion): Resolved directive (flags and width).

    Returns:
        str: The padded text.
    """
    head: str = piece.sign + piece.prefix
    body: str = head + piece.text
    if conv.width is None:
        return body
    fill: int = conv.width - len(body)
    if fill <= 0:
        return body
    if conv.has(Flags.MINUS):
        return body + " " * fill
    if conv.has(Flags.ZERO) and piece.zero_fill:
        return head + "0" * fill + piece.text
    return " " * fill + body
