# topmark:header:start
#
#   project      : NumStrFmt
#   file         : version.py
#   file_relpath : src/numstrfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt `version` command.

Prints the NumStrFmt version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from numstrfmt.cli.cmd_common import get_console
from numstrfmt.constants import NUMSTRFMT_VERSION


@click.command(
    name="version",
    help="Show the current version of NumStrFmt.",
)
def version_command() -> None:
    """Show the current version of NumStrFmt."""
    console = get_console(click.get_current_context())
    console.print(NUMSTRFMT_VERSION)
