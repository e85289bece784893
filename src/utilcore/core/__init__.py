# topmark:header:start
#
#   project      : UtilCore
#   file         : __init__.py
#   file_relpath : src/utilcore/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filesystem and buffer utilities.

Re-exports the public operations of the ``utilcore.core`` submodules.
"""

from __future__ import annotations

from utilcore.core.errors import (
    AllocationError,
    CanonicalizeError,
    CapacityOverflowError,
    CounterOverflowError,
    DirectoryChangeError,
    DirectoryOpenError,
    ErrorKind,
    FatalError,
    FileOpenError,
    LinkReadError,
    PathResolutionError,
    ShortReadError,
    StatError,
    SymlinkLoopError,
    UtilcoreError,
)
from utilcore.core.fileio import chomp, count_lines, file_exists, is_dir, load_file_to_memory
from utilcore.core.listing import list_dir
from utilcore.core.paths import join_and_canonicalize, resolve_symlinks, resolved_path
from utilcore.core.stats import argmax, median
from utilcore.core.varray import IntVarray

__all__ = [
    "AllocationError",
    "CanonicalizeError",
    "CapacityOverflowError",
    "CounterOverflowError",
    "DirectoryChangeError",
    "DirectoryOpenError",
    "ErrorKind",
    "FatalError",
    "FileOpenError",
    "IntVarray",
    "LinkReadError",
    "PathResolutionError",
    "ShortReadError",
    "StatError",
    "SymlinkLoopError",
    "UtilcoreError",
    "argmax",
    "chomp",
    "count_lines",
    "file_exists",
    "is_dir",
    "join_and_canonicalize",
    "list_dir",
    "median",
    "resolve_symlinks",
    "resolved_path",
]
