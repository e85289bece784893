# topmark:header:start
#
#   project      : UtilCore
#   file         : files.py
#   file_relpath : src/utilcore/cli/commands/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore file commands.

- `count-lines` prints the number of newline characters of each file as
  ``COUNT<TAB>PATH``.
- `offsets` loads a whole file and prints where each line starts.
"""

from __future__ import annotations

from pathlib import Path

import click

from utilcore.cli.cmd_common import get_config, get_console, get_effective_verbosity
from utilcore.cli.errors import cli_error_for
from utilcore.core.errors import UtilcoreError
from utilcore.core.fileio import NEWLINE, count_lines, load_file_to_memory
from utilcore.core.stats import argmax
from utilcore.core.varray import IntVarray


@click.command(
    name="count-lines",
    help="Count newline-terminated lines of each FILE (binary mode).",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.pass_context
def count_lines_command(ctx: click.Context, files: tuple[Path, ...]) -> None:
    """Count lines in ``files``; stops at the first file that cannot be read."""
    console = get_console(ctx)
    config = get_config(ctx)

    total = 0
    for path in files:
        try:
            n = count_lines(
                path,
                limit=config.line_count_limit,
                chunk_size=config.read_chunk_size,
            )
        except UtilcoreError as exc:
            raise cli_error_for(exc) from exc
        total += n
        console.print(f"{n}\t{path}")

    if len(files) > 1 and get_effective_verbosity(ctx) > 0:
        console.print(console.styled(f"{total}\ttotal", bold=True))


def line_offsets(data: bytes, growth_increment: int = 0) -> IntVarray:
    """Return the byte offset at which each line of ``data`` starts.

    A trailing newline does not open a new line.
    """
    offsets = IntVarray(growth_increment)
    start = 0
    size = len(data)
    while start < size:
        offsets.append(start)
        nl = data.find(NEWLINE, start)
        if nl < 0:
            break
        start = nl + 1
    return offsets


@click.command(
    name="offsets",
    help="Load FILE into memory and print the byte offset of each line start.",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.pass_context
def offsets_command(ctx: click.Context, file: Path) -> None:
    """Print one line-start offset per line of ``file``.

    With ``-v`` the length of the longest line is reported as well.
    """
    console = get_console(ctx)
    config = get_config(ctx)

    try:
        data = load_file_to_memory(file)
        offsets = line_offsets(data, config.growth_increment)
    except UtilcoreError as exc:
        raise cli_error_for(exc) from exc

    try:
        for offset in offsets:
            console.print(str(offset))

        if offsets and get_effective_verbosity(ctx) > 0:
            ends = [*offsets.tolist()[1:], len(data)]
            lengths = [end - begin for begin, end in zip(offsets, ends)]
            longest = argmax(lengths)
            console.print(
                console.styled(
                    f"longest line: {longest + 1} ({lengths[longest]} bytes)", bold=True
                )
            )
    finally:
        offsets.release()
