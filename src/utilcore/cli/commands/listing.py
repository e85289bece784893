# topmark:header:start
#
#   project      : UtilCore
#   file         : listing.py
#   file_relpath : src/utilcore/cli/commands/listing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore `ls` command.

Lists directory entries as ``PATH/NAME``, one per line. Defaults for sorting,
pseudo-entries and exclude patterns come from the ``[listing]`` config section.
"""

from __future__ import annotations

import click

from utilcore.cli.cmd_common import get_config, get_console
from utilcore.cli.errors import cli_error_for
from utilcore.core.errors import UtilcoreError
from utilcore.core.listing import list_dir


@click.command(
    name="ls",
    help="List the entries of directory PATH.",
)
@click.argument("path")
@click.option(
    "--pattern",
    "-p",
    default=None,
    help="Keep only entries whose name contains this substring.",
)
@click.option(
    "--sort/--no-sort",
    "sort",
    default=None,
    help="Sort entries byte-wise (default from config: off).",
)
@click.option(
    "--special/--no-special",
    "special",
    default=None,
    help="Include the '.' and '..' pseudo-entries (default from config: on).",
)
@click.option(
    "--exclude",
    "-e",
    "exclude",
    multiple=True,
    help="Drop entries matching this gitignore-style pattern (repeatable).",
)
@click.pass_context
def ls_command(
    ctx: click.Context,
    path: str,
    pattern: str | None,
    sort: bool | None,
    special: bool | None,
    exclude: tuple[str, ...],
) -> None:
    """List the entries of ``path``."""
    console = get_console(ctx)
    config = get_config(ctx)

    try:
        entries = list_dir(
            path,
            pattern,
            config.sort_entries if sort is None else sort,
            include_special=config.include_special_entries if special is None else special,
            exclude=[*config.exclude_patterns, *exclude],
        )
    except UtilcoreError as exc:
        raise cli_error_for(exc) from exc

    for entry in entries:
        console.print(entry)
