# topmark:header:start
#
#   project      : NumStrFmt
#   file         : presets.py
#   file_relpath : src/numstrfmt/cli/commands/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt `presets` command.

Lists the registered symbol presets with sample renderings of a positive, a
negative and a zero value.
"""

from __future__ import annotations

import click

from numstrfmt.cli.cmd_common import get_console, get_effective_verbosity
from numstrfmt.rendering.number_string import format_number_string
from numstrfmt.symbols.presets import PRESETS

SAMPLE_VALUES: tuple[str, ...] = ("1234.5", "-1234.5", "0")


@click.command(
    name="presets",
    help="List the named symbol presets with sample output.",
)
def presets_command() -> None:
    """List presets as ``name  description`` followed by samples.

    With ``-q`` only the preset names are printed.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    width = max(len(name) for name in PRESETS)
    for name, preset in PRESETS.items():
        if vlevel < 0:
            console.print(name)
            continue
        symbols = preset.build()
        samples = "  ".join(f"[{format_number_string(v, symbols)}]" for v in SAMPLE_VALUES)
        console.print(f"{console.styled(name.ljust(width), bold=True)}  {preset.description}")
        console.print(f"{'':{width}}  {samples}")
