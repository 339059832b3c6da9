# topmark:header:start
#
#   project      : NumStrFmt
#   file         : dump_config.py
#   file_relpath : src/numstrfmt/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt `dump-config` command.

Emits the effective configuration as TOML after applying the bundled
defaults, project config files, ``--config`` files and CLI overrides. With
``--pyproject`` the document is nested under ``[tool.numstrfmt]`` so it can be
pasted into ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrfmt.cli.cmd_common import build_config_common, get_console
from numstrfmt.cli.errors import NumStrFmtConfigError
from numstrfmt.cli.options import common_config_options, common_layout_options
from numstrfmt.config.io import nest_toml_under_section, to_toml
from numstrfmt.config.logging import get_logger
from numstrfmt.constants import PYPROJECT_TOOL_SECTION
from numstrfmt.symbols.types import TextJustify

if TYPE_CHECKING:
    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged NumStrFmt configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help=f"Nest the output under [{PYPROJECT_TOOL_SECTION}] for pyproject.toml.",
)
@common_config_options
@common_layout_options
def dump_config_command(
    *,
    pyproject: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    preset: str | None,
    currency: str | None,
    currency_trailing: bool | None,
    field_length: int | None,
    justify: TextJustify | None,
) -> None:
    """Print the merged configuration as TOML between BEGIN/END markers.

    Args:
        pyproject (bool): Nest the document under ``[tool.numstrfmt]``.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config files in the working directory.
        preset (str | None): Symbol preset override.
        currency (str | None): Simple currency override.
        currency_trailing (bool | None): Put the currency after the number.
        field_length (int | None): Number field width override.
        justify (TextJustify | None): Justification override.
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

    toml_doc = to_toml(config.to_toml_dict())
    if pyproject:
        try:
            toml_doc = nest_toml_under_section(toml_doc, PYPROJECT_TOOL_SECTION)
        except RuntimeError as exc:
            raise NumStrFmtConfigError(str(exc)) from exc

    console.print("# === BEGIN ===")
    console.print(toml_doc.rstrip("\n"))
    console.print("# === END ===")
