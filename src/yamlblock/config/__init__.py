# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for YamlBlock.

Configuration is layered (defaults, project TOML files, explicit ``--config``
files, then CLI overrides) into a mutable draft that is frozen into an
immutable `Config` before any conversion takes place.
"""

from __future__ import annotations

from yamlblock.config.model import Config, MutableConfig
from yamlblock.config.types import ArgsLike, ConfigError, TomlTable, WriteStrategy

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigError",
    "MutableConfig",
    "TomlTable",
    "WriteStrategy",
]
