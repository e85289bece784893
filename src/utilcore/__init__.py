# topmark:header:start
#
#   project      : UtilCore
#   file         : __init__.py
#   file_relpath : src/utilcore/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore package.

Low-level filesystem and in-memory buffer utilities for command-line data
processing: canonical path resolution, directory listing, whole-file loading,
line counting, a growable integer sequence and median computation. A small
Click CLI exposes the utilities for shell use.
"""

from __future__ import annotations
