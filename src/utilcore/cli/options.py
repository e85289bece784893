# topmark:header:start
#
#   project      : UtilCore
#   file         : options.py
#   file_relpath : src/utilcore/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the UtilCore Click commands.

This module centralizes reusable options (verbosity, color, config file) and
their resolution logic, so the group and commands can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from utilcore.cli.errors import UtilcoreUsageError
from utilcore.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        UtilcoreUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise UtilcoreUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return verbose_count
    return -quiet_count


def log_level_for_verbosity(verbosity: int) -> int | None:
    """Map program-output verbosity to a logging level.

    Three or more -v flags set TRACE, two set DEBUG, one sets INFO. Otherwise
    None is returned and the logging default applies.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors explicit ``--color`` choices first, then the ``FORCE_COLOR`` and
    ``NO_COLOR`` environment variables, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option selecting an explicit TOML file."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of utilcore.toml/pyproject.toml.",
    )(f)
    return f
