# topmark:header:start
#
#   project      : UtilCore
#   file         : __main__.py
#   file_relpath : src/utilcore/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running UtilCore via ``python -m utilcore``.

Delegates to :func:`utilcore.cli.main.cli`, the same entry point as the
``utilcore`` console script.

Examples:
    Compute a median from the shell::

        python -m utilcore median 5 1 3
"""

from __future__ import annotations

from utilcore.cli.main import cli

if __name__ == "__main__":
    cli()
