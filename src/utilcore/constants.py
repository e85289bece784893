# topmark:header:start
#
#   project      : UtilCore
#   file         : constants.py
#   file_relpath : src/utilcore/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

UTILCORE_VERSION: str = get_version("utilcore")

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "utilcore.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "utilcore"

# Matches the usual SYMLOOP_MAX / MAXSYMLINKS of Linux.
MAX_SYMLINK_HOPS: Final[int] = 40
