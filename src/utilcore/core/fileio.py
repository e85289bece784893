# topmark:header:start
#
#   project      : UtilCore
#   file         : fileio.py
#   file_relpath : src/utilcore/core/fileio.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whole-file loading and newline counting.

Both readers open files in binary mode so results do not depend on the
platform's newline translation. File handles are scoped to a ``with`` block and
released on every exit path.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Final

from utilcore.config.logging import get_logger
from utilcore.core.errors import (
    AllocationError,
    CounterOverflowError,
    FileOpenError,
    ShortReadError,
)

if TYPE_CHECKING:
    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)

NEWLINE: Final[bytes] = b"\n"
DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024
DEFAULT_LINE_COUNT_LIMIT: Final[int] = sys.maxsize


def load_file_to_memory(path: str | os.PathLike[str]) -> bytes:
    """Read the whole file at ``path`` into memory.

    The size is taken by seeking to the end of the file; exactly that many bytes
    must then be readable, otherwise the read is reported as short.

    Args:
        path (str | os.PathLike[str]): File to load.

    Returns:
        bytes: The file content. ``len()`` of the result is the byte count.

    Raises:
        FileOpenError: If the file cannot be opened or is not seekable.
        AllocationError: If no buffer of the file's size can be allocated.
        ShortReadError: If fewer bytes than the file size could be read, or the
            read itself fails.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        logger.error("Cannot open %s: %s", path, exc)
        raise FileOpenError(f"Cannot open {path}: {exc.strerror or exc}", path=path) from exc

    with f:
        try:
            size = f.seek(0, os.SEEK_END)
            f.seek(0, os.SEEK_SET)
        except OSError as exc:
            logger.error("Cannot determine the size of %s: %s", path, exc)
            raise FileOpenError(
                f"Cannot determine the size of {path}: {exc.strerror or exc}", path=path
            ) from exc
        try:
            data = f.read(size)
        except MemoryError as exc:
            logger.fatal("Cannot allocate %d bytes for %s", size, path)
            raise AllocationError(f"Cannot allocate {size} bytes for {path}", path=path) from exc
        except OSError as exc:
            logger.error("Read error on %s: %s", path, exc)
            raise ShortReadError(
                f"Read error on {path}: {exc.strerror or exc}",
                path=path,
                expected=size,
                actual=0,
            ) from exc

    if len(data) != size:
        logger.error("Short read on %s: expected %d bytes, got %d", path, size, len(data))
        raise ShortReadError(
            f"Short read on {path}: expected {size} bytes, got {len(data)}",
            path=path,
            expected=size,
            actual=len(data),
        )
    logger.trace("Loaded %d bytes from %s", size, path)
    return data


def count_lines(
    path: str | os.PathLike[str],
    *,
    limit: int = DEFAULT_LINE_COUNT_LIMIT,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Count newline bytes in the file at ``path``.

    A final line without a trailing newline is not counted, so ``b"a\\nb\\nc"``
    holds 2 lines and ``b"a\\nb\\nc\\n"`` holds 3.

    Args:
        path (str | os.PathLike[str]): File to scan.
        limit (int): Largest count that may be reported.
        chunk_size (int): Number of bytes read per iteration.

    Returns:
        int: Number of ``\\n`` bytes in the file.

    Raises:
        FileOpenError: If the file cannot be opened.
        CounterOverflowError: If the count would exceed ``limit``.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        logger.error("Cannot open %s: %s", path, exc)
        raise FileOpenError(f"Cannot open {path}: {exc.strerror or exc}", path=path) from exc

    count = 0
    with f:
        while chunk := f.read(chunk_size):
            found = chunk.count(NEWLINE)
            if found > limit - count:
                logger.fatal("Line count overflow in %s (limit %d)", path, limit)
                raise CounterOverflowError(
                    f"Line count of {path} exceeds limit {limit}", path=path
                )
            count += found
    return count


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is a directory.

    Any stat failure (missing path, permission problem) yields False.
    """
    return os.path.isdir(path)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if anything exists at ``path``."""
    return os.access(path, os.F_OK)


def chomp(text: str) -> str:
    """Remove a single trailing ``"\\n"`` from ``text``, if present."""
    if text.endswith("\n"):
        return text[:-1]
    return text
