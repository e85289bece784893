# topmark:header:start
#
#   project      : UtilCore
#   file         : model.py
#   file_relpath : src/utilcore/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration for UtilCore.

`Config` holds the tunables of the utility layer. It is built from defaults and
optionally overlaid with a TOML table (see `utilcore.config.loaders`). Unknown
sections and keys are reported at WARNING and ignored; values of the wrong type
raise `ConfigError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from utilcore.config.keys import Toml
from utilcore.config.logging import get_logger
from utilcore.constants import MAX_SYMLINK_HOPS
from utilcore.core.fileio import DEFAULT_CHUNK_SIZE, DEFAULT_LINE_COUNT_LIMIT

if TYPE_CHECKING:
    from collections.abc import Mapping

    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Configuration is malformed or holds a value of the wrong type."""


@dataclass(frozen=True)
class Config:
    """Runtime settings for the utility layer.

    Attributes:
        max_symlink_hops (int): Link limit for `resolve_symlinks`.
        include_special_entries (bool): Whether `list_dir` reports ``.`` and ``..``.
        sort_entries (bool): Default sorting for directory listings.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns dropped from listings.
        growth_increment (int): Default resize policy of integer sequences.
        line_count_limit (int): Largest line count `count_lines` may report.
        read_chunk_size (int): Bytes read per iteration when counting lines.
        source (str | None): Where the configuration was read from, if anywhere.
    """

    max_symlink_hops: int = MAX_SYMLINK_HOPS
    include_special_entries: bool = True
    sort_entries: bool = False
    exclude_patterns: tuple[str, ...] = ()
    growth_increment: int = 0
    line_count_limit: int = DEFAULT_LINE_COUNT_LIMIT
    read_chunk_size: int = DEFAULT_CHUNK_SIZE
    source: str | None = field(default=None, compare=False)

    def merged_with(self, table: Mapping[str, Any], *, source: str | None = None) -> Config:
        """Return a copy of this config overlaid with the TOML ``table``.

        Args:
            table (Mapping[str, Any]): Parsed TOML document (or ``[tool.utilcore]`` table).
            source (str | None): Origin of ``table`` for messages.

        Returns:
            Config: The merged configuration.

        Raises:
            ConfigError: If a section is not a table or a value has the wrong type.
        """
        changes: dict[str, Any] = {}
        for section, value in table.items():
            if section not in _SCHEMA:
                logger.warning("Ignoring unknown config section [%s] in %s", section, source)
                continue
            if not isinstance(value, dict):
                raise ConfigError(f"[{section}] must be a table in {source}")
            keys = _SCHEMA[section]
            for key, raw in value.items():
                if key not in keys:
                    logger.warning("Ignoring unknown config key %s.%s in %s", section, key, source)
                    continue
                attr, convert = keys[key]
                changes[attr] = convert(f"{section}.{key}", raw)
        logger.debug("Config overrides from %s: %s", source, changes)
        return replace(self, source=source, **changes)


def _as_int(name: str, raw: object, *, minimum: int = 0) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if raw < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {raw}")
    return raw


def _as_positive_int(name: str, raw: object) -> int:
    return _as_int(name, raw, minimum=1)


def _as_bool(name: str, raw: object) -> bool:
    if not isinstance(raw, bool):
        raise ConfigError(f"{name} must be a boolean, got {raw!r}")
    return raw


def _as_str_tuple(name: str, raw: object) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ConfigError(f"{name} must be a list of strings, got {raw!r}")
    return tuple(raw)


_SCHEMA: dict[str, dict[str, tuple[str, Any]]] = {
    Toml.SECTION_PATHS: {
        Toml.KEY_MAX_SYMLINK_HOPS: ("max_symlink_hops", _as_int),
    },
    Toml.SECTION_LISTING: {
        Toml.KEY_INCLUDE_SPECIAL: ("include_special_entries", _as_bool),
        Toml.KEY_SORT: ("sort_entries", _as_bool),
        Toml.KEY_EXCLUDE: ("exclude_patterns", _as_str_tuple),
    },
    Toml.SECTION_VARRAY: {
        Toml.KEY_GROWTH_INCREMENT: ("growth_increment", _as_int),
    },
    Toml.SECTION_FILES: {
        Toml.KEY_LINE_COUNT_LIMIT: ("line_count_limit", _as_int),
        Toml.KEY_READ_CHUNK_SIZE: ("read_chunk_size", _as_positive_int),
    },
}
