# topmark:header:start
#
#   project      : UtilCore
#   file         : paths.py
#   file_relpath : src/utilcore/core/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical path resolution in the presence of symbolic links.

Two operations are provided:

- `join_and_canonicalize`: append a component to a base path and canonicalize the
  result. A missing target is an expected outcome and yields ``None``.
- `resolve_symlinks`: follow a chain of symbolic links one hop at a time until a
  non-link is reached.

Relative link targets are resolved against the directory that contains the link.
That directory is passed explicitly as a base; the process working directory is
never changed, so these functions are safe to call from several threads and the
working directory is the same before and after every call.
"""

from __future__ import annotations

import errno
import os
import stat
from typing import TYPE_CHECKING

from utilcore.config.logging import get_logger
from utilcore.constants import MAX_SYMLINK_HOPS
from utilcore.core.errors import (
    CanonicalizeError,
    DirectoryChangeError,
    LinkReadError,
    PathResolutionError,
    StatError,
    SymlinkLoopError,
)

if TYPE_CHECKING:
    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)


def _canonicalize(raw: str) -> str:
    # strict=True raises OSError when any component is missing or loops
    return os.path.realpath(raw, strict=True)


def join_and_canonicalize(base_path: str | os.PathLike[str], component: str) -> str | None:
    """Join ``component`` onto ``base_path`` and canonicalize the result.

    ``.``, ``..`` and symbolic-link components are eliminated and the result is
    absolute.

    Args:
        base_path (str | os.PathLike[str]): Path to append to.
        component (str): Path component (or relative path) to append.

    Returns:
        str | None: The canonical path, or ``None`` if it cannot be
            canonicalized (for instance because the target does not exist).
    """
    joined = f"{os.fspath(base_path)}{os.sep}{component}"
    try:
        return _canonicalize(joined)
    except OSError as exc:
        logger.debug("Couldn't canonicalize %s: %s", joined, exc)
        return None


def _next_hop(joined: str) -> str:
    # the last component may itself be a link; it is followed on the next hop
    parent, name = os.path.split(joined)
    if name in ("", os.curdir, os.pardir):
        return _canonicalize(joined)
    return os.path.join(_canonicalize(parent or os.curdir), name)


def _containing_dir(path: str) -> str:
    base = os.path.dirname(path) or os.curdir
    if not os.path.isdir(base) or not os.access(base, os.X_OK):
        logger.error("Cannot enter directory %s", base)
        raise DirectoryChangeError(f"Cannot enter directory {base}", path=base)
    return base


def resolve_symlinks(path: str | os.PathLike[str], *, max_hops: int = MAX_SYMLINK_HOPS) -> str:
    """Follow symbolic links starting at ``path`` until a non-link is reached.

    A path that is not a symbolic link is returned unchanged.

    Args:
        path (str | os.PathLike[str]): Starting path.
        max_hops (int): Maximum number of links to follow.

    Returns:
        str: The resolved path.

    Raises:
        StatError: If the metadata of a path in the chain cannot be queried.
        LinkReadError: If a link target cannot be read.
        DirectoryChangeError: If the directory containing a link cannot be entered.
        CanonicalizeError: If a link target cannot be canonicalized.
        SymlinkLoopError: If the chain is cyclic or longer than ``max_hops``.
    """
    current: str = os.fspath(path)
    hops = 0
    while True:
        try:
            st = os.lstat(current)
        except OSError as exc:
            logger.error("lstat() failed on %s: %s", current, exc)
            raise StatError(f"Cannot stat {current}: {exc.strerror or exc}", path=current) from exc

        if not stat.S_ISLNK(st.st_mode):
            logger.trace("No more links: %s", current)
            return current

        if hops >= max_hops:
            logger.error("Too many levels of symbolic links at %s (limit %d)", current, max_hops)
            raise SymlinkLoopError(
                f"More than {max_hops} symbolic links while resolving {path}", path=current
            )

        try:
            target = os.readlink(current)
        except OSError as exc:
            logger.error("readlink() failed on %s: %s", current, exc)
            raise LinkReadError(
                f"Cannot read link {current}: {exc.strerror or exc}", path=current
            ) from exc

        base = _containing_dir(current)
        try:
            resolved = _next_hop(os.path.join(base, target))
        except OSError as exc:
            logger.error("realpath failed on %s: %s", target, exc)
            if exc.errno == errno.ELOOP:
                raise SymlinkLoopError(
                    f"Symbolic link cycle while resolving {path}", path=current
                ) from exc
            raise CanonicalizeError(
                f"Cannot canonicalize {target} (link {current})", path=current
            ) from exc

        if not os.path.lexists(resolved):
            logger.error("Link target %s does not exist", resolved)
            raise CanonicalizeError(
                f"Cannot canonicalize {target} (link {current})", path=current
            )

        logger.trace("%s -> %s", current, resolved)
        current = resolved
        hops += 1


def resolved_path(path: str | os.PathLike[str], *, max_hops: int = MAX_SYMLINK_HOPS) -> str | None:
    """Return `resolve_symlinks` of ``path``, or ``None`` on any resolution failure."""
    try:
        return resolve_symlinks(path, max_hops=max_hops)
    except PathResolutionError:
        return None
