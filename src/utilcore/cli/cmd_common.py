# topmark:header:start
#
#   project      : UtilCore
#   file         : cmd_common.py
#   file_relpath : src/utilcore/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small accessors for the shared state that `utilcore.cli.main.init_common_state`
places on the Click context.
"""

from __future__ import annotations

import click

from utilcore.cli.console import ClickConsole
from utilcore.config.model import Config


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the program-output console, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_config(ctx: click.Context) -> Config:
    """Return the effective configuration (defaults when none was loaded)."""
    ctx.ensure_object(dict)
    return ctx.obj.get("config") or Config()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 = terse)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))
