# topmark:header:start
#
#   project      : NumStrFmt
#   file         : filler.py
#   file_relpath : src/numstrfmt/cli/commands/filler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt `filler` command.

Prints a filler field: CHARS repeated COUNT times between optional margins.
Without arguments the ``[filler]`` configuration is used.
"""

from __future__ import annotations

import click

from numstrfmt.cli.cmd_common import build_config_common, get_console
from numstrfmt.cli.errors import NumStrFmtFormatError, NumStrFmtUsageError
from numstrfmt.cli.options import common_config_options
from numstrfmt.core.errors import InvalidFillerError
from numstrfmt.text.filler_format import TextFillerFieldFormat


@click.command(
    name="filler",
    help="Render a repeated filler field (e.g. a line of dashes).",
    epilog="Example: numstrfmt filler '-*' 5 --left-margin '[' --right-margin ']'",
)
@click.argument("chars", required=False)
@click.argument("count", type=int, required=False)
@click.option("--left-margin", "left_margin", default=None, help="Text printed before the filler.")
@click.option("--right-margin", "right_margin", default=None, help="Text printed after the filler.")
@common_config_options
def filler_command(
    *,
    chars: str | None,
    count: int | None,
    left_margin: str | None,
    right_margin: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render a filler field.

    CHARS and COUNT go together; when both are omitted the configured filler
    is used, and the margin options still override the configured margins.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    if chars is not None and count is None:
        raise NumStrFmtUsageError("COUNT is required when CHARS is given.")

    config = build_config_common(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "left_margin": left_margin,
            "right_margin": right_margin,
        },
    )

    if chars is None:
        console.print(config.filler.get_formatted_text())
        return

    # Explicit CHARS/COUNT bypass the config layer, which would fall back to defaults.
    try:
        field = TextFillerFieldFormat.new(
            chars,
            count,
            left_margin=config.filler.left_margin,
            right_margin=config.filler.right_margin,
        )
    except InvalidFillerError as exc:
        raise NumStrFmtFormatError(str(exc)) from exc
    console.print(field.get_formatted_text())
