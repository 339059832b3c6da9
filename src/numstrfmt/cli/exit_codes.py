# topmark:header:start
#
#   project      : NumStrFmt
#   file         : exit_codes.py
#   file_relpath : src/numstrfmt/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the NumStrFmt CLI.

Values follow the BSD `sysexits` convention where practical, so scripts can
tell a bad invocation from bad input data or a broken configuration.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the NumStrFmt CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A value could not be formatted (bad number, bad filler).
            Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Missing, invalid or malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
