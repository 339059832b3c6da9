# topmark:header:start
#
#   project      : NumStrFmt
#   file         : options.py
#   file_relpath : src/numstrfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the NumStrFmt commands.

Reusable option groups (verbosity, configuration, number layout) live here so
commands stay thin.
"""

from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import click

from numstrfmt.cli.cli_types import EnumChoiceParam
from numstrfmt.cli.errors import NumStrFmtUsageError
from numstrfmt.symbols.presets import preset_names
from numstrfmt.symbols.types import TextJustify

P = ParamSpec("P")
R = TypeVar("R")

#: Allows negative numbers such as ``-12.5`` to pass as positional arguments.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, otherwise the verbose count (``0`` by default).

    Raises:
        NumStrFmtUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NumStrFmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (show config sources and info diagnostics).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings; only errors and results are printed.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore numstrfmt.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge (last wins).",
    )(f)
    return f


def common_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the number layout overrides.

    Adds ``--preset``, ``--currency``, ``--trailing/--leading``,
    ``--field-length`` and ``--justify``.
    """
    f = click.option(
        "--justify",
        "justify",
        type=EnumChoiceParam(TextJustify),
        default=None,
        help="Justification inside the number field (left, right, center).",
    )(f)
    f = click.option(
        "--field-length",
        "field_length",
        type=click.IntRange(min=-1),
        default=None,
        help="Width of the number field; -1 sizes it to the content.",
    )(f)
    f = click.option(
        "--trailing/--leading",
        "currency_trailing",
        default=None,
        help="Place the --currency symbol after (or before) the number.",
    )(f)
    f = click.option(
        "--currency",
        "currency",
        type=str,
        default=None,
        help="Simple currency symbol; an empty string selects plain signed numbers.",
    )(f)
    f = click.option(
        "--preset",
        "preset",
        type=click.Choice(preset_names(), case_sensitive=False),
        default=None,
        help="Named symbol layout (see 'numstrfmt presets').",
    )(f)
    return f
