# topmark:header:start
#
#   project      : UtilCore
#   file         : keys.py
#   file_relpath : src/utilcore/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for UtilCore configuration.

These strings are the external configuration schema as it appears in
``utilcore.toml`` and in ``[tool.utilcore]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by UtilCore configuration."""

    # [paths]
    SECTION_PATHS: Final[str] = "paths"

    KEY_MAX_SYMLINK_HOPS: Final[str] = "max_symlink_hops"

    # [listing]
    SECTION_LISTING: Final[str] = "listing"

    KEY_INCLUDE_SPECIAL: Final[str] = "include_special_entries"
    KEY_SORT: Final[str] = "sort"
    KEY_EXCLUDE: Final[str] = "exclude"

    # [varray]
    SECTION_VARRAY: Final[str] = "varray"

    KEY_GROWTH_INCREMENT: Final[str] = "growth_increment"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_LINE_COUNT_LIMIT: Final[str] = "line_count_limit"
    KEY_READ_CHUNK_SIZE: Final[str] = "read_chunk_size"
