# topmark:header:start
#
#   project      : YamlBlock
#   file         : model.py
#   file_relpath : src/yamlblock/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the conversion API.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs in the working directory: ``pyproject.toml``
       (``[tool.yamlblock]``) first, then ``yamlblock.toml``
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) CLI overrides

Builder fields are tri-state (``None`` = not set by this layer) so that a later
layer only overrides what it actually declares.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from yamlblock.config.io import (
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_checked,
    load_defaults_dict,
    load_toml_dict,
    warn_unknown_keys,
)
from yamlblock.config.keys import KNOWN_KEYS, Toml
from yamlblock.config.logging import get_logger
from yamlblock.config.types import ConfigError, WriteStrategy
from yamlblock.constants import (
    PROJECT_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from yamlblock.config.logging import YamlblockLogger
    from yamlblock.config.types import ArgsLike, TomlTable

logger: YamlblockLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for YamlBlock.

    Attributes:
        explicit_start (bool): Whether documents start with the ``---`` marker.
        input_encoding (str): Text encoding of JSON input.
        output_encoding (str): Text encoding of YAML output.
        write_strategy (WriteStrategy): How output files are written.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
        diagnostics (tuple[str, ...]): Warnings collected while loading and merging.
    """

    explicit_start: bool = False
    input_encoding: str = "utf-8"
    output_encoding: str = "utf-8"
    write_strategy: WriteStrategy = WriteStrategy.ATOMIC
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict (same schema as the files)."""
        return {
            Toml.SECTION_RENDER: {
                Toml.KEY_EXPLICIT_START: self.explicit_start,
            },
            Toml.SECTION_INPUT: {
                Toml.KEY_ENCODING: self.input_encoding,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_ENCODING: self.output_encoding,
                Toml.KEY_STRATEGY: self.write_strategy.value,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            explicit_start=self.explicit_start,
            input_encoding=self.input_encoding,
            output_encoding=self.output_encoding,
            write_strategy=self.write_strategy.value,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


def _check_encoding(name: str, what: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise ConfigError(f"Unknown {what} encoding {name!r}") from exc
    return name


@dataclass
class MutableConfig:
    """Mutable configuration builder used while merging layers.

    Attributes:
        explicit_start (bool | None): ``[render] explicit_start``.
        input_encoding (str | None): ``[input] encoding``.
        output_encoding (str | None): ``[output] encoding``.
        write_strategy (str | None): ``[output] strategy``; validated by `freeze`.
        config_files (list[Path]): Config files merged into this draft.
        diagnostics (list[str]): Warnings collected so far.
    """

    explicit_start: bool | None = None
    input_encoding: str | None = None
    output_encoding: str | None = None
    write_strategy: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this draft and return an immutable `Config`.

        Unset fields fall back to the runtime defaults.

        Raises:
            ConfigError: If the write strategy or an encoding is unknown.
        """
        defaults: Config = Config()
        strategy: WriteStrategy = (
            WriteStrategy.parse(self.write_strategy)
            if self.write_strategy is not None
            else defaults.write_strategy
        )
        return Config(
            explicit_start=(
                self.explicit_start
                if self.explicit_start is not None
                else defaults.explicit_start
            ),
            input_encoding=_check_encoding(self.input_encoding or defaults.input_encoding, "input"),
            output_encoding=_check_encoding(
                self.output_encoding or defaults.output_encoding, "output"
            ),
            write_strategy=strategy,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str = "<defaults>") -> MutableConfig:
        """Build a draft from a parsed TOML table.

        Unknown sections/keys and wrongly-typed values are recorded in
        ``diagnostics`` and otherwise ignored.

        Args:
            data (TomlTable): Parsed TOML data (already unwrapped from ``[tool.yamlblock]``).
            source (str): Human-readable origin, used in log messages.

        Returns:
            MutableConfig: The parsed draft.
        """
        logger.debug("Parsing configuration from %s", source)
        draft: MutableConfig = cls()
        diags: list[str] = draft.diagnostics

        warn_unknown_keys(data, frozenset(KNOWN_KEYS), where="", diagnostics=diags)
        for section, known in KNOWN_KEYS.items():
            table: TomlTable = get_table_checked(data, section, diagnostics=diags)
            warn_unknown_keys(table, known, where=section, diagnostics=diags)

        render_tbl: TomlTable = get_table_checked(data, Toml.SECTION_RENDER, diagnostics=[])
        input_tbl: TomlTable = get_table_checked(data, Toml.SECTION_INPUT, diagnostics=[])
        output_tbl: TomlTable = get_table_checked(data, Toml.SECTION_OUTPUT, diagnostics=[])

        draft.explicit_start = get_bool_value_or_none_checked(
            render_tbl, Toml.KEY_EXPLICIT_START, where=Toml.SECTION_RENDER, diagnostics=diags
        )
        draft.input_encoding = get_string_value_or_none_checked(
            input_tbl, Toml.KEY_ENCODING, where=Toml.SECTION_INPUT, diagnostics=diags
        )
        draft.output_encoding = get_string_value_or_none_checked(
            output_tbl, Toml.KEY_ENCODING, where=Toml.SECTION_OUTPUT, diagnostics=diags
        )
        draft.write_strategy = get_string_value_or_none_checked(
            output_tbl, Toml.KEY_STRATEGY, where=Toml.SECTION_OUTPUT, diagnostics=diags
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.yamlblock]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft, or None for a ``pyproject.toml``
                without a ``[tool.yamlblock]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_CONFIG_NAME:
            tool_section = toml_data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the config files present in ``start``, lowest precedence first.

        ``pyproject.toml`` comes before ``yamlblock.toml`` so the dedicated file
        wins when both declare a value.
        """
        candidates: list[Path] = [start / PYPROJECT_CONFIG_NAME, start / PROJECT_CONFIG_NAME]
        found: list[Path] = [p for p in candidates if p.is_file()]
        logger.debug("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            start (Path | None): Directory searched for project config files
                (defaults to the current working directory).
            extra_config_files (Iterable[Path] | None): Explicit additional config
                files, merged after discovery in the given order.
            no_config (bool): If True, skip project config discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.

        Raises:
            ConfigError: If a config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        layers: list[Path] = []
        if not no_config:
            layers.extend(cls.discover_local_config_files(start or Path.cwd()))
        layers.extend(Path(p) for p in extra_config_files or ())

        for cfg_path in layers:
            layer: MutableConfig | None = cls.from_toml_file(cfg_path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def pick(mine: object, theirs: object) -> object:
            return theirs if theirs is not None else mine

        return MutableConfig(
            explicit_start=pick(self.explicit_start, other.explicit_start),  # type: ignore[arg-type]
            input_encoding=pick(self.input_encoding, other.input_encoding),  # type: ignore[arg-type]
            output_encoding=pick(self.output_encoding, other.output_encoding),  # type: ignore[arg-type]
            write_strategy=pick(self.write_strategy, other.write_strategy),  # type: ignore[arg-type]
            config_files=[*self.config_files, *other.config_files],
            diagnostics=[*self.diagnostics, *other.diagnostics],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI (or API) overrides in place and return ``self``.

        Recognized keys: ``explicit_start``, ``input_encoding``, ``output_encoding``
        and ``write_strategy``. ``None`` values leave the draft unchanged.
        """
        if args.get("explicit_start") is not None:
            self.explicit_start = bool(args["explicit_start"])
        if args.get("input_encoding") is not None:
            self.input_encoding = str(args["input_encoding"])
        if args.get("output_encoding") is not None:
            self.output_encoding = str(args["output_encoding"])
        strategy = args.get("write_strategy")
        if strategy is not None:
            self.write_strategy = (
                strategy.value if isinstance(strategy, WriteStrategy) else str(strategy)
            )
        return self
