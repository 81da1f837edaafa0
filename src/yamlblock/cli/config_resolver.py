# topmark:header:start
#
#   project      : YamlBlock
#   file         : config_resolver.py
#   file_relpath : src/yamlblock/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for resolving YamlBlock configuration from Click parameters.

This module bridges CLI parsing and the configuration system: it merges the
default, discovered and explicit config sources, applies the CLI overrides and
freezes the result, translating configuration failures into
[`YamlblockConfigError`][yamlblock.cli.errors.YamlblockConfigError].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from yamlblock.cli.errors import YamlblockConfigError
from yamlblock.config import Config, ConfigError, MutableConfig
from yamlblock.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yamlblock.config.logging import YamlblockLogger
    from yamlblock.config.types import ArgsLike

logger: YamlblockLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    overrides: ArgsLike | None = None,
) -> Config:
    """Build a frozen [`Config`][yamlblock.config.Config] from Click parameters.

    Resolution order (lowest → highest precedence):
      1. **Built-in defaults**.
      2. **Project configs** in the current working directory, unless
         ``--no-config`` is set: ``pyproject.toml`` (``[tool.yamlblock]``),
         then ``yamlblock.toml``.
      3. **Explicit config files** passed via ``--config``, merged **in order**.
      4. **CLI overrides** (flags), applied last.

    Args:
        no_config (bool): If True, ignore local project config files.
        config_paths (Sequence[str]): Extra config TOML file paths to merge.
        overrides (ArgsLike | None): CLI flag values; ``None`` entries are ignored.

    Returns:
        Config: The immutable configuration snapshot.

    Raises:
        YamlblockConfigError: If a config file is unreadable or invalid, or a
            value cannot be honored.
    """
    args: dict[str, Any] = dict(overrides or {})
    logger.trace("CLI overrides: %s", args)
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft = draft.apply_cli_args(args)
        config: Config = draft.freeze()
    except ConfigError as exc:
        raise YamlblockConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config
