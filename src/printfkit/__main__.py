# topmark:header:start
#
#   project      : PrintfKit
#   file         : __main__.py
#   file_relpath : src/printfkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m printfkit``."""

from __future__ import annotations

from printfkit.cli.main import main

if __name__ == "__main__":
    main()
