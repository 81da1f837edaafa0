# topmark:header:start
#
#   project      : YamlBlock
#   file         : types.py
#   file_relpath : src/yamlblock/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `TomlTable`: a parsed TOML table as plain Python data.
    - `WriteStrategy`: how rendered output is written to a file.
    - `ConfigError`: raised for configuration values that cannot be honored.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class ConfigError(ValueError):
    """A configuration value is invalid."""


class WriteStrategy(str, Enum):
    """How rendered YAML is written to an output file.

    Attributes:
        ATOMIC: Write a temporary file next to the target, then rename it over the
            target (the target is never left half-written).
        INPLACE: Truncate and write the target directly.
    """

    ATOMIC = "atomic"
    INPLACE = "inplace"

    @classmethod
    def parse(cls, raw: str) -> WriteStrategy:
        """Return the strategy named ``raw`` (case-insensitive).

        Raises:
            ConfigError: If ``raw`` does not name a strategy.
        """
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            choices: str = ", ".join(s.value for s in cls)
            raise ConfigError(
                f"Unknown write strategy {raw!r} (expected one of: {choices})"
            ) from exc
