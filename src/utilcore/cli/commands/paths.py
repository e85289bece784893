# topmark:header:start
#
#   project      : UtilCore
#   file         : paths.py
#   file_relpath : src/utilcore/cli/commands/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore `resolve` and `join` commands.

``resolve`` follows symbolic links until a non-link is reached; ``join``
appends a component to a base path and canonicalizes the result.
"""

from __future__ import annotations

import click

from utilcore.cli.cmd_common import get_config, get_console, get_effective_verbosity
from utilcore.cli.errors import UtilcoreCliError, cli_error_for
from utilcore.core.errors import UtilcoreError
from utilcore.core.paths import join_and_canonicalize, resolve_symlinks


@click.command(
    name="resolve",
    help="Resolve symbolic links in each PATH and print the result.",
)
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--max-hops",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of links to follow (default from config: 40).",
)
@click.pass_context
def resolve_command(ctx: click.Context, paths: tuple[str, ...], max_hops: int | None) -> None:
    """Print the resolved form of each path in ``paths``."""
    console = get_console(ctx)
    config = get_config(ctx)
    hops = config.max_symlink_hops if max_hops is None else max_hops
    verbose = get_effective_verbosity(ctx) > 0

    for path in paths:
        try:
            resolved = resolve_symlinks(path, max_hops=hops)
        except UtilcoreError as exc:
            raise cli_error_for(exc) from exc
        console.print(f"{path} -> {resolved}" if verbose else resolved)


@click.command(
    name="join",
    help="Append COMPONENT to BASE and print the canonical result.",
)
@click.argument("base")
@click.argument("component")
@click.pass_context
def join_command(ctx: click.Context, base: str, component: str) -> None:
    """Print the canonical form of ``base/component``."""
    console = get_console(ctx)
    joined = join_and_canonicalize(base, component)
    if joined is None:
        raise UtilcoreCliError(f"Cannot canonicalize {base}/{component}")
    console.print(joined)
