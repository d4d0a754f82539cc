# topmark:header:start
#
#   project      : PrintfKit
#   file         : formats.py
#   file_relpath : src/printfkit/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the listing commands (`verbs`, `version`)."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Rendering selected with ``--format``.

    ``TEXT`` may carry ANSI styling when colour is enabled; ``MARKDOWN`` and
    ``JSON`` are plain documents meant for files and other programs.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
