# topmark:header:start
#
#   project      : PrintfKit
#   file         : constants.py
#   file_relpath : src/printfkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrintfKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PRINTFKIT_VERSION: str = get_version("printfkit")

# Environment variable consulted by `printfkit.config.logging.setup_logging`:
LOG_LEVEL_ENV_VAR: str = "PRINTFKIT_LOG_LEVEL"

# Configuration sources, in discovery order:
CONFIG_FILE_NAME: str = "printfkit.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "printfkit"

# Digits after the decimal point for `e`, `f` and `g` when no precision is given:
DEFAULT_FLOAT_PRECISION: int = 6

# Replacement for `%c` code points outside the Unicode range:
REPLACEMENT_CHAR: str = "\ufffd"

# Largest width, precision or argument index a template may request:
MAX_COUNT: int = 1_000_000
