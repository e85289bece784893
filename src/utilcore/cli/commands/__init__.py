# topmark:header:start
#
#   project      : UtilCore
#   file         : __init__.py
#   file_relpath : src/utilcore/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UtilCore CLI subcommands."""
