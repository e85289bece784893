# topmark:header:start
#
#   project      : UtilCore
#   file         : main.py
#   file_relpath : src/utilcore/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore Click CLI.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity (negative when quiet),
- ``config``: the effective `utilcore.config.model.Config`,
- ``console``: the `ClickConsole` used for program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilcore.cli.commands.files import count_lines_command, offsets_command
from utilcore.cli.commands.listing import ls_command
from utilcore.cli.commands.paths import join_command, resolve_command
from utilcore.cli.commands.stats import median_command
from utilcore.cli.commands.version import version_command
from utilcore.cli.console import ClickConsole
from utilcore.cli.errors import UtilcoreConfigError
from utilcore.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    log_level_for_verbosity,
    resolve_color_mode,
    resolve_verbosity,
)
from utilcore.config.loaders import load_config
from utilcore.config.logging import get_logger, resolve_env_log_level, setup_logging
from utilcore.config.model import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, color, config) on the Click context.

    The environment (``UTILCORE_LOG_LEVEL``) takes precedence over ``-v`` flags for
    the logging level.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Explicit configuration file.

    Raises:
        UtilcoreConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    verbosity = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    level = resolve_env_log_level()
    if level is None:
        level = log_level_for_verbosity(verbosity)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    try:
        ctx.obj["config"] = load_config(config_file)
    except ConfigError as exc:
        raise UtilcoreConfigError(str(exc)) from exc


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="UtilCore: filesystem and buffer utilities.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the UtilCore CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_file=config_file,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(median_command)

cli.add_command(count_lines_command)

cli.add_command(offsets_command)

cli.add_command(ls_command)

cli.add_command(resolve_command)

cli.add_command(join_command)

if __name__ == "__main__":
    cli()
