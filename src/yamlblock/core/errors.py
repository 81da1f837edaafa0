# topmark:header:start
#
#   project      : YamlBlock
#   file         : errors.py
#   file_relpath : src/yamlblock/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for YamlBlock.

These exceptions are framework-agnostic (no Click). The CLI translates them into
[`yamlblock.cli.errors.YamlblockError`][] subclasses with dedicated exit codes.

The renderer itself never raises: every source value renders to some text.
"""

from __future__ import annotations


class YamlblockCoreError(Exception):
    """Base class for non-CLI YamlBlock errors."""


class SourceValueError(YamlblockCoreError, TypeError):
    """Plain Python data cannot be mapped onto the source value model.

    Attributes:
        path (str): JSONPath-like location of the offending value (``$`` is the root).
    """

    def __init__(self, message: str, *, path: str = "$") -> None:
        super().__init__(f"{message} (at {path})")
        self.path = path


class JsonDecodeError(YamlblockCoreError, ValueError):
    """Input text is not valid JSON.

    Attributes:
        reason (str): Short description of the problem.
        line (int | None): 1-based line of the error, when known.
        column (int | None): 1-based column of the error, when known.
    """

    def __init__(self, reason: str, *, line: int | None = None, column: int | None = None) -> None:
        location: str = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Invalid JSON: {reason}{location}")
        self.reason = reason
        self.line = line
        self.column = column
