# topmark:header:start
#
#   project      : YamlBlock
#   file         : types.py
#   file_relpath : src/yamlblock/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable public types for the YamlBlock API.

This module defines the dataclasses that appear in the public function
signatures and return values of [`yamlblock.api`][yamlblock.api]. These shapes
follow the project's semver policy.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single file conversion.

    Attributes:
        input (str): Input path (``-`` for standard input).
        output (str): Output path (``-`` for standard output).
        chars_read (int): Length of the decoded JSON text, in characters.
        bytes_written (int): Number of encoded bytes written to the output.
        explicit_start (bool): Whether the document starts with ``---``.
        diagnostics (tuple[str, ...]): Configuration warnings collected for this run.
    """

    input: str
    output: str
    chars_read: int
    bytes_written: int
    explicit_start: bool
    diagnostics: tuple[str, ...] = ()
