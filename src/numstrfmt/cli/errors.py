# topmark:header:start
#
#   project      : NumStrFmt
#   file         : errors.py
#   file_relpath : src/numstrfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NumStrFmt CLI.

Raise these from commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's own error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from numstrfmt.cli.exit_codes import ExitCode


class NumStrFmtCliError(click.ClickException):
    """Base class for all NumStrFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class NumStrFmtUsageError(NumStrFmtCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NumStrFmtFormatError(NumStrFmtCliError):
    """Error for values that cannot be formatted (bad number or filler)."""

    exit_code = ExitCode.DATA_ERROR


class NumStrFmtConfigError(NumStrFmtCliError):
    """Error for configuration errors (unreadable file, invalid values)."""

    exit_code = ExitCode.CONFIG_ERROR
