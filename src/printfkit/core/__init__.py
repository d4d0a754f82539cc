# topmark:header:start
#
#   project      : PrintfKit
#   file         : __init__.py
#   file_relpath : src/printfkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core value types: option/result containers, panic, display protocols and errors."""

from __future__ import annotations
