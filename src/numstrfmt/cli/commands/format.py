# topmark:header:start
#
#   project      : NumStrFmt
#   file         : format.py
#   file_relpath : src/numstrfmt/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt `format` command.

Renders each VALUE with the effective symbols and number field settings, one
result per line. Negative values may be passed directly (``numstrfmt format
-12.5``) or after ``--``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrfmt.cli.cmd_common import build_config_common, get_console, get_effective_verbosity
from numstrfmt.cli.errors import NumStrFmtFormatError
from numstrfmt.cli.options import CONTEXT_SETTINGS, common_config_options, common_layout_options
from numstrfmt.config.logging import get_logger
from numstrfmt.core.errors import InvalidNumberStringError
from numstrfmt.symbols.types import TextJustify

if TYPE_CHECKING:
    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Format numbers with the configured currency and sign symbols.",
    epilog="Example: numstrfmt format --currency '€' --trailing -- -123.456",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("values", nargs=-1, required=True)
@common_config_options
@common_layout_options
def format_command(
    *,
    values: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    preset: str | None,
    currency: str | None,
    currency_trailing: bool | None,
    field_length: int | None,
    justify: TextJustify | None,
) -> None:
    """Format each value and print it on its own line.

    Args:
        values (tuple[str, ...]): Numeric strings to format.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config files in the working directory.
        preset (str | None): Symbol preset override.
        currency (str | None): Simple currency override.
        currency_trailing (bool | None): Put the currency after the number.
        field_length (int | None): Number field width override.
        justify (TextJustify | None): Justification override.

    Raises:
        NumStrFmtFormatError: If a value is not a plain decimal number.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    config = build_config_common(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "preset": preset,
            "currency": currency,
            "currency_leading": None if currency_trailing is None else not currency_trailing,
            "field_length": field_length,
            "justify": justify,
        },
    )

    verbose = get_effective_verbosity(ctx) > 0
    for value in values:
        try:
            text = config.format(value)
        except InvalidNumberStringError as exc:
            raise NumStrFmtFormatError(str(exc)) from exc
        logger.debug("Formatted %r as %r", value, text)
        # Brackets make padding visible in verbose mode.
        console.print(f"{value} -> [{text}]" if verbose else text)
