# topmark:header:start
#
#   project      : NumStrFmt
#   file         : __init__.py
#   file_relpath : src/numstrfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt CLI subcommands."""
