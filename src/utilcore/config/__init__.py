# topmark:header:start
#
#   project      : UtilCore
#   file         : __init__.py
#   file_relpath : src/utilcore/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for UtilCore.

Submodules:
    - `utilcore.config.logging`: TRACE level, chalk formatter, ``setup_logging``.
    - `utilcore.config.keys`: TOML section and key names.
    - `utilcore.config.model`: the frozen `Config` dataclass.
    - `utilcore.config.loaders`: TOML discovery and loading with tomlkit.

Import the submodules directly; this package module stays import-free so the
utility layer can depend on `utilcore.config.logging` without cycles.
"""
