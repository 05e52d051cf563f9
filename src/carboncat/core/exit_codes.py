# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/carboncat/core/exit_codes.py
#   project      : CarbonCat
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CarbonCat CLI.

CarbonCat aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. Click's own usage errors (unknown options) keep
Click's exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CarbonCat CLI.

    Attributes:
        SUCCESS: Every source was copied to the output.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flag combination).
            Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: A source does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a source or writing the output. Mirrors BSD
            ``EX_IOERR (74)``.
        PERMISSION_DENIED: A source may not be read. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
