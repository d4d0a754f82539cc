# topmark:header:start
#
#   project      : PrintfKit
#   file         : __init__.py
#   file_relpath : src/printfkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the `printfkit` CLI."""
