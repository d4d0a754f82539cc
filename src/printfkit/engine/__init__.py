# topmark:header:start
#
#   project      : PrintfKit
#   file         : __init__.py
#   file_relpath : src/printfkit/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format engine: scanner, directive parser, argument cursor, verb table, padder, assembler.

Entry points are [`render`][printfkit.engine.assembler.render] (text plus the
emitted error tokens) and [`sprintf`][printfkit.engine.assembler.sprintf] (text
only).
"""

from __future__ import annotations

from printfkit.engine.assembler import Rendering, render, sprintf
from printfkit.engine.model import Flags, Verb, VerbFamily
from printfkit.engine.tokens import ErrorToken, TokenKind

__all__ = [
    "ErrorToken",
    "Flags",
    "Rendering",
    "TokenKind",
    "Verb",
    "VerbFamily",
    "render",
    "sprintf",
]
