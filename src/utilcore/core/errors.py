# topmark:header:start
#
#   project      : UtilCore
#   file         : errors.py
#   file_relpath : src/utilcore/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for the UtilCore filesystem and buffer utilities.

Every failure raised by `utilcore.core` carries an `ErrorKind` so callers can
tell failure modes apart without matching on message text. Two families exist:

- `FatalError`: resource exhaustion and counter overflow. These are logged at
  CRITICAL by the raising code and are not expected to be retried.
- Everything else is recoverable; the caller decides whether to retry, skip or
  abort.

Usage:
    ```python
    try:
        path = resolve_symlinks(p)
    except PathResolutionError as exc:
        if exc.kind is ErrorKind.STAT_FAILURE:
            ...
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


class ErrorKind(str, Enum):
    """Distinguishable failure modes of the utility layer."""

    OPEN_FAILURE = "open_failure"
    ALLOCATION_FAILURE = "allocation_failure"
    SHORT_READ = "short_read"
    OVERFLOW_FATAL = "overflow_fatal"
    STAT_FAILURE = "stat_failure"
    LINK_READ_FAILURE = "link_read_failure"
    DIRECTORY_CHANGE_FAILURE = "directory_change_failure"
    CANONICALIZE_FAILURE = "canonicalize_failure"
    DIRECTORY_OPEN_FAILURE = "directory_open_failure"
    CYCLE_OR_TOO_MANY_LINKS = "cycle_or_too_many_links"


class UtilcoreError(Exception):
    """Base class for all UtilCore errors.

    Args:
        message (str): Human-readable description.
        path (str | PathLike[str] | None): Filesystem path the error relates to, if any.

    Attributes:
        kind (ErrorKind): Failure mode; set by each concrete subclass.
        path (str | None): Filesystem path the error relates to, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, path: str | PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path: str | None = None if path is None else str(path)


class FatalError(UtilcoreError):
    """Unrecoverable condition (resource exhaustion or overflow)."""


# --- Buffers and files ---


class AllocationError(FatalError):
    """Memory for a buffer or sequence could not be allocated."""

    kind = ErrorKind.ALLOCATION_FAILURE


class CapacityOverflowError(FatalError):
    """A growable sequence would exceed the maximum addressable size."""

    kind = ErrorKind.OVERFLOW_FATAL


class CounterOverflowError(FatalError):
    """A counter would exceed its maximum representable value."""

    kind = ErrorKind.OVERFLOW_FATAL


class FileOpenError(UtilcoreError):
    """A file could not be opened for reading."""

    kind = ErrorKind.OPEN_FAILURE


class ShortReadError(UtilcoreError):
    """Fewer bytes than expected were read from a file.

    Attributes:
        expected (int): Number of bytes the file was expected to hold.
        actual (int): Number of bytes actually read.
    """

    kind = ErrorKind.SHORT_READ

    def __init__(self, message: str, *, path: str | PathLike[str], expected: int, actual: int) -> None:
        super().__init__(message, path=path)
        self.expected = expected
        self.actual = actual


class DirectoryOpenError(UtilcoreError):
    """A path could not be opened as a directory."""

    kind = ErrorKind.DIRECTORY_OPEN_FAILURE


# --- Path resolution ---


class PathResolutionError(UtilcoreError):
    """Base class for failures while resolving symbolic links."""


class StatError(PathResolutionError):
    """Metadata of a path could not be queried."""

    kind = ErrorKind.STAT_FAILURE


class LinkReadError(PathResolutionError):
    """The target of a symbolic link could not be read."""

    kind = ErrorKind.LINK_READ_FAILURE


class DirectoryChangeError(PathResolutionError):
    """The directory containing a link cannot be entered."""

    kind = ErrorKind.DIRECTORY_CHANGE_FAILURE


class CanonicalizeError(PathResolutionError):
    """A link target could not be canonicalized."""

    kind = ErrorKind.CANONICALIZE_FAILURE


class SymlinkLoopError(PathResolutionError):
    """A link chain is cyclic or longer than the configured hop limit."""

    kind = ErrorKind.CYCLE_OR_TOO_MANY_LINKS
