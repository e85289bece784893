# topmark:header:start
#
#   project      : UtilCore
#   file         : version.py
#   file_relpath : src/utilcore/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore `version` command.

Prints the UtilCore version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from utilcore.cli.cmd_common import get_console, get_effective_verbosity
from utilcore.constants import UTILCORE_VERSION


@click.command(
    name="version",
    help="Show the current version of UtilCore.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit the version as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool = False) -> None:
    """Show the current version of UtilCore."""
    console = get_console(ctx)

    if as_json:
        console.print(json.dumps({"version": UTILCORE_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled(f"UtilCore version {UTILCORE_VERSION}", bold=True))
    else:
        console.print(UTILCORE_VERSION)
