# topmark:header:start
#
#   project      : NumStrFmt
#   file         : main.py
#   file_relpath : src/numstrfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for NumStrFmt.

Group-level options are resolved once and placed into ``ctx.obj``:

* ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
* ``log_level``: internal log level from ``NUMSTRFMT_LOG_LEVEL``.
* ``console``: the `ClickConsole` used for all user-facing output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrfmt.cli.commands.dump_config import dump_config_command
from numstrfmt.cli.commands.filler import filler_command
from numstrfmt.cli.commands.format import format_command
from numstrfmt.cli.commands.presets import presets_command
from numstrfmt.cli.commands.version import version_command
from numstrfmt.cli.console import ClickConsole
from numstrfmt.cli.options import common_verbose_options, resolve_verbosity
from numstrfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    if no_color:
        ctx.color = False
    ctx.obj["console"] = ClickConsole(enable_color=False if no_color else None)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NumStrFmt: format numeric strings with currency and sign symbols.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the NumStrFmt CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'numstrfmt format VALUE...' to format numbers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)
cli.add_command(filler_command)
cli.add_command(presets_command)
cli.add_command(dump_config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
