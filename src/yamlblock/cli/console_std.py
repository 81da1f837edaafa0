# topmark:header:start
#
#   project      : YamlBlock
#   file         : console_std.py
#   file_relpath : src/yamlblock/cli/console_std.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-stream console used when no Click context is active.

``convert IN -`` writes YAML bytes straight to ``sys.stdout.buffer``, so everything
this console prints besides command output (the conversion summary, config
warnings, errors) goes to stderr and never ends up inside the YAML document.
"""

from __future__ import annotations

import sys
from typing import TextIO

from yamlblock.cli_shared.console_api import ConsoleLike


class StdConsole(ConsoleLike):
    """Uncolored console splitting command output (stdout) from status (stderr).

    Args:
        enable_color (bool): Ignored for this implementation. Present only to keep
            the signature compatible with other ConsoleLike implementations.
        out (TextIO | None): Stream for normal output. Defaults to sys.stdout.
        err (TextIO | None): Stream for messages and errors. Defaults to sys.stderr.
    """

    def __init__(
        self, *, enable_color: bool = False, out: TextIO | None = None, err: TextIO | None = None
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write command output (YAML, TOML or the version) to stdout."""
        self.out.write(text + ("\n" if nl else ""))

    def info(self, text: str, *, nl: bool = True) -> None:
        """Write a status line to stderr so stdout stays a clean document."""
        self.err.write(text + ("\n" if nl else ""))

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning (e.g. an ignored config key) to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error (decode or I/O failure) to stderr."""
        self.err.write(text + ("\n" if nl else ""))

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` unchanged; this console never emits ANSI codes."""
        return text
