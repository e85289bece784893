# topmark:header:start
#
#   project      : UtilCore
#   file         : errors.py
#   file_relpath : src/utilcore/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the UtilCore CLI.

Usage:
    Commands catch `utilcore.core.errors.UtilcoreError` and re-raise the result
    of `cli_error_for`, which picks the exception class (and therefore the exit
    code) from the failure kind and its underlying ``OSError``.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from utilcore.cli.exit_codes import ExitCode
from utilcore.core.errors import (
    DirectoryOpenError,
    FatalError,
    FileOpenError,
    ShortReadError,
    StatError,
    UtilcoreError,
)


class UtilcoreCliError(click.ClickException):
    """Base class for all UtilCore CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class UtilcoreUsageError(UtilcoreCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class UtilcoreConfigError(UtilcoreCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class UtilcoreFileNotFoundError(UtilcoreCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class UtilcorePermissionDeniedError(UtilcoreCliError):
    """Error for insufficient permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class UtilcoreIOError(UtilcoreCliError):
    """Error for I/O failures reading files or directories."""

    exit_code = ExitCode.IO_ERROR


class UtilcoreFatalError(UtilcoreCliError):
    """Error for fatal conditions (allocation failure, overflow)."""

    exit_code = ExitCode.SOFTWARE_ERROR


def cli_error_for(exc: UtilcoreError) -> UtilcoreCliError:
    """Translate a utility-layer error into the matching CLI error.

    Args:
        exc (UtilcoreError): The error raised by `utilcore.core`.

    Returns:
        UtilcoreCliError: CLI error carrying the same message and a fitting exit code.
    """
    message = str(exc)
    if isinstance(exc, FatalError):
        return UtilcoreFatalError(message)
    if isinstance(exc, (FileOpenError, DirectoryOpenError, StatError)):
        cause = exc.__cause__
        if isinstance(cause, FileNotFoundError):
            return UtilcoreFileNotFoundError(message)
        if isinstance(cause, PermissionError):
            return UtilcorePermissionDeniedError(message)
        if not isinstance(exc, StatError):
            return UtilcoreIOError(message)
    if isinstance(exc, ShortReadError):
        return UtilcoreIOError(message)
    return UtilcoreCliError(message)
