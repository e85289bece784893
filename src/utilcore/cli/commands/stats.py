# topmark:header:start
#
#   project      : UtilCore
#   file         : stats.py
#   file_relpath : src/utilcore/cli/commands/stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore `median` command.

Prints the median of the numbers given on the command line.
"""

from __future__ import annotations

import click

from utilcore.cli.cmd_common import get_console, get_effective_verbosity
from utilcore.core.stats import median


@click.command(
    name="median",
    help="Print the median of VALUES (0 when none are given).",
)
@click.argument("values", nargs=-1, type=float)
@click.pass_context
def median_command(ctx: click.Context, values: tuple[float, ...]) -> None:
    """Print the median of ``values``.

    With ``-v`` each parsed value is echoed first, one per line.
    """
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        for value in values:
            console.print(f"{value:f}")
    console.print(f"median = {median(values):f}")
