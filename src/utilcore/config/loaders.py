# topmark:header:start
#
#   project      : UtilCore
#   file         : loaders.py
#   file_relpath : src/utilcore/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load UtilCore configuration from TOML sources.

Configuration is read from, in order of preference:

- an explicit file passed by the caller (``--config`` on the CLI),
- ``utilcore.toml`` in the working directory,
- the ``[tool.utilcore]`` table of ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures before
being overlaid on the `Config` defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from utilcore.config.logging import get_logger
from utilcore.config.model import Config, ConfigError
from utilcore.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from utilcore.config.logging import UtilcoreLogger

logger: UtilcoreLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Parse the TOML file at ``path`` into a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def extract_tool_table(document: dict[str, Any], path: Path) -> dict[str, Any]:
    """Return the ``[tool.utilcore]`` table of a ``pyproject.toml`` document.

    A missing table yields an empty dict.
    """
    tool = document.get("tool", {})
    table = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] must be a table in {path}")
    return table


def discover_config_file(cwd: Path) -> Path | None:
    """Return the config file UtilCore would use in ``cwd``, if any.

    ``pyproject.toml`` only qualifies when it has a ``[tool.utilcore]`` table.
    """
    candidate = cwd / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            document = load_toml_dict(pyproject)
        except ConfigError:
            return None
        if extract_tool_table(document, pyproject):
            return pyproject
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Build a `Config` from defaults and an optional TOML source.

    Args:
        path (Path | None): Explicit config file; ``pyproject.toml`` files are read
            through their ``[tool.utilcore]`` table.
        cwd (Path | None): Directory searched when ``path`` is not given
            (defaults to the current working directory).

    Returns:
        Config: The effective configuration.

    Raises:
        ConfigError: If the source cannot be read, parsed or validated.
    """
    source: Path | None = path
    if source is None:
        source = discover_config_file(cwd or Path.cwd())
    if source is None:
        logger.debug("No config file found; using defaults")
        return Config()

    document = load_toml_dict(source)
    if source.name == PYPROJECT_FILE_NAME:
        document = extract_tool_table(document, source)
    logger.info("Loaded configuration from %s", source)
    return Config().merged_with(document, source=str(source))
