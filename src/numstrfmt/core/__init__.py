# topmark:header:start
#
#   project      : NumStrFmt
#   file         : __init__.py
#   file_relpath : src/numstrfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared across NumStrFmt: errors, diagnostics and enum helpers."""
