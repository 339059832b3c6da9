# topmark:header:start
#
#   project      : NumStrFmt
#   file         : cmd_common.py
#   file_relpath : src/numstrfmt/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the NumStrFmt subcommands.

Commands build their effective `FormatConfig` the same way: bundled defaults,
then ``pyproject.toml`` / ``numstrfmt.toml`` from the working directory
(unless ``--no-config``), then each ``--config`` file, then CLI overrides.
Diagnostics collected on the way are printed according to the verbosity, and
error diagnostics abort the command with `ExitCode.CONFIG_ERROR`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from numstrfmt.cli.console import ClickConsole
from numstrfmt.cli.errors import NumStrFmtConfigError
from numstrfmt.config.io import discover_config_files
from numstrfmt.config.logging import get_logger
from numstrfmt.config.model import MutableFormatConfig
from numstrfmt.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from numstrfmt.config.logging import NumStrLogger
    from numstrfmt.config.model import FormatConfig

logger: NumStrLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored by the group, creating a default one if needed."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if not isinstance(console, ClickConsole):
        console = ClickConsole()
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (default ``0``)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level") or 0)


def build_config_common(
    ctx: click.Context,
    *,
    config_paths: Sequence[str] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> FormatConfig:
    """Build, freeze and report the effective configuration for a command.

    Args:
        ctx (click.Context): Current Click context.
        config_paths (Sequence[str]): Explicit ``--config`` files, merged last.
        no_config (bool): Skip config files found in the working directory.
        overrides (Mapping[str, Any] | None): CLI overrides for
            `MutableFormatConfig.apply_args`.

    Returns:
        FormatConfig: The frozen configuration.

    Raises:
        NumStrFmtConfigError: If any error diagnostic was recorded.
    """
    paths: list[Path] = [] if no_config else discover_config_files(Path.cwd())
    paths.extend(Path(p) for p in config_paths)

    draft = MutableFormatConfig.load_merged(paths)
    if overrides:
        draft.apply_args(overrides)
    config = draft.freeze()
    logger.debug("Effective config sources: %s", config.config_files)

    report_config_diagnostics(ctx, config)
    return config


def report_config_diagnostics(ctx: click.Context, config: FormatConfig) -> None:
    """Print configuration diagnostics and fail on errors.

    Errors are always printed, warnings unless ``-q``, info and the list of
    merged sources only with ``-v``.

    Raises:
        NumStrFmtConfigError: If ``config`` carries error diagnostics.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    color = console.enable_color is not False

    if vlevel > 0:
        for src in config.config_files:
            console.warn(console.styled(f"Using config: {src}", dim=True))

    for diag in config.diagnostics:
        if diag.level is DiagnosticLevel.ERROR:
            console.error(diag.render(color=color))
        elif diag.level is DiagnosticLevel.WARNING and vlevel >= 0:
            console.warn(diag.render(color=color))
        elif diag.level is DiagnosticLevel.INFO and vlevel > 0:
            console.warn(diag.render(color=color))

    stats = config.diagnostics.stats()
    if stats.n_error:
        raise NumStrFmtConfigError(f"Configuration has {stats.n_error} error(s).")
