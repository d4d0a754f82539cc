# topmark:header:start
#
#   project      : PrintfKit
#   file         : __init__.py
#   file_relpath : src/printfkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for PrintfKit: logging setup, format policy and its TOML sources."""

from __future__ import annotations

from printfkit.config.policy import DEFAULT_POLICY, FormatPolicy, HexPrecisionUnit

__all__ = [
    "DEFAULT_POLICY",
    "FormatPolicy",
    "HexPrecisionUnit",
]
