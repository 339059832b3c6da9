# topmark:header:start
#
#   project      : NumStrFmt
#   file         : __main__.py
#   file_relpath : src/numstrfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NumStrFmt via ``python -m numstrfmt``.

It delegates directly to :func:`numstrfmt.cli.main.cli`, ensuring a single
CLI entry point regardless of how NumStrFmt is launched.

Examples:
    Render a value with the US currency preset::

        python -m numstrfmt format -- -123.456 --preset us-currency
"""

from __future__ import annotations

from numstrfmt.cli.main import cli

if __name__ == "__main__":
    cli()
