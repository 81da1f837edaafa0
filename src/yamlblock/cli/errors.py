# topmark:header:start
#
#   project      : YamlBlock
#   file         : errors.py
#   file_relpath : src/yamlblock/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for YamlBlock CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library exceptions are mapped onto them by
    `translate_exception`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from yamlblock.cli_shared.exit_codes import ExitCode
from yamlblock.config.types import ConfigError
from yamlblock.core.errors import JsonDecodeError, SourceValueError


class YamlblockError(click.ClickException):
    """Base class for all YamlBlock CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class YamlblockUsageError(YamlblockError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class YamlblockDataError(YamlblockError):
    """Error for input that is not valid JSON or cannot be decoded/encoded."""

    exit_code = ExitCode.DATA_ERROR


class YamlblockConfigError(YamlblockError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class YamlblockFileNotFoundError(YamlblockError):
    """Error when the input path does not exist or is a directory."""

    exit_code = ExitCode.FILE_NOT_FOUND


class YamlblockPermissionDeniedError(YamlblockError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class YamlblockIOError(YamlblockError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class YamlblockUnexpectedError(YamlblockError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def translate_exception(exc: BaseException, *, path: str | None = None) -> YamlblockError:
    """Map a library or OS exception onto the matching CLI error.

    Exit code mapping:
        USAGE_ERROR → click.UsageError
        DATA_ERROR → JsonDecodeError / SourceValueError / UnicodeError
        FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
        PERMISSION_DENIED → PermissionError
        IO_ERROR → any other OSError
        CONFIG_ERROR → ConfigError
        UNEXPECTED_ERROR → anything else

    Args:
        exc (BaseException): The exception to translate.
        path (str | None): Path the operation was working on, used in the message.

    Returns:
        YamlblockError: The CLI error (``exc`` itself if it already is one).
    """
    if isinstance(exc, YamlblockError):
        return exc
    where: str = f"{path}: " if path else ""
    if isinstance(exc, click.UsageError):
        return YamlblockUsageError(exc.format_message())
    if isinstance(exc, ConfigError):
        return YamlblockConfigError(str(exc))
    if isinstance(exc, (JsonDecodeError, SourceValueError, UnicodeError)):
        return YamlblockDataError(f"{where}{exc}")
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return YamlblockFileNotFoundError(f"{where}{exc.strerror or exc}")
    if isinstance(exc, PermissionError):
        return YamlblockPermissionDeniedError(f"{where}{exc.strerror or exc}")
    if isinstance(exc, OSError):
        return YamlblockIOError(f"{where}{exc.strerror or exc}")
    return YamlblockUnexpectedError(f"{where}{type(exc).__name__}: {exc}")
