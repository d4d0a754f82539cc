# topmark:header:start
#
#   project      : PrintfKit
#   file         : exit_codes.py
#   file_relpath : src/printfkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PrintfKit CLI.

Values follow the BSD `sysexits` convention so shell scripts can tell a bad
template (``--strict``) apart from a bad config file or a closed pipe.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PrintfKit CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        FORMAT_ERROR: ``--strict`` render emitted error tokens. Mirrors BSD
            ``EX_DATAERR (65)``.
        IO_ERROR: Writing the output failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Config file missing, malformed or invalid. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
