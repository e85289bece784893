# topmark:header:start
#
#   project      : UtilCore
#   file         : listing.py
#   file_relpath : src/utilcore/core/listing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directory listing with substring filtering and byte-wise sorting.

`list_dir` returns entries as ``path + os.sep + name`` strings, built fresh on
each call. The enumeration order of the operating system is kept unless sorting
is requested.

The ``.`` and ``..`` pseudo-entries reported by POSIX ``readdir()`` are
reproduced by default (`os.scandir` omits them). Pass
``include_special=False`` to leave them out.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from pathspec import GitIgnoreSpec

from utilcore.config.logging import get_logger
from utilcore.core.errors import DirectoryOpenError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)

SPECIAL_ENTRIES: Final[tuple[str, ...]] = (os.curdir, os.pardir)


def _entries(path: str, include_special: bool) -> Iterator[tuple[str, bool]]:
    """Yield ``(name, is_dir)`` for each entry; pseudo-entries come first."""
    try:
        it = os.scandir(path)
    except OSError as exc:
        logger.error("Couldn't open directory %s: %s", path, exc)
        raise DirectoryOpenError(
            f"Couldn't open directory {path}: {exc.strerror or exc}", path=path
        ) from exc

    with it:
        if include_special:
            # matched against exclude patterns by bare name
            for special in SPECIAL_ENTRIES:
                yield special, False
        for entry in it:
            yield entry.name, entry.is_dir(follow_symlinks=False)


def list_dir(
    path: str | os.PathLike[str],
    pattern: str | None = None,
    sort_lexicographically: bool = False,
    *,
    include_special: bool = True,
    exclude: Sequence[str] | None = None,
) -> list[str]:
    """List the entries of directory ``path``.

    Args:
        path (str | os.PathLike[str]): Directory to enumerate.
        pattern (str | None): Keep only entries whose name contains this substring
            (not anchored). ``None`` keeps everything.
        sort_lexicographically (bool): Sort the result by byte-wise comparison.
        include_special (bool): Include the ``.`` and ``..`` pseudo-entries.
        exclude (Sequence[str] | None): Gitignore-style patterns; entries whose
            name matches one of them are dropped. Patterns ending in ``/`` only
            match directories (symbolic links are not followed).

    Returns:
        list[str]: ``path + os.sep + name`` for each kept entry.

    Raises:
        DirectoryOpenError: If ``path`` cannot be opened as a directory.
    """
    base: str = os.fspath(path)
    spec: GitIgnoreSpec | None = GitIgnoreSpec.from_lines(exclude) if exclude else None

    matches: list[str] = []
    for name, entry_is_dir in _entries(base, include_special):
        if pattern is not None and pattern not in name:
            continue
        if spec is not None and spec.match_file(f"{name}/" if entry_is_dir else name):
            logger.trace("Excluded %s by pattern", name)
            continue
        matches.append(f"{base}{os.sep}{name}")

    if sort_lexicographically:
        matches.sort(key=os.fsencode)
    logger.debug("Listed %d entries in %s", len(matches), base)
    return matches
