# topmark:header:start
#
#   project      : UtilCore
#   file         : exit_codes.py
#   file_relpath : src/utilcore/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the UtilCore CLI.

UtilCore follows the BSD `sysexits` convention where practical so other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the UtilCore CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. a symbolic link that cannot be resolved.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: Fatal internal condition (allocation failure, overflow).
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading a file or directory. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
