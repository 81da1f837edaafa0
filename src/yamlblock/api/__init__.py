# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public YamlBlock API (stable surface).

This module exposes a **small, typed API** for integrations that want to convert
JSON to YAML programmatically without going through the CLI.

Versioning policy
-----------------
- The **signatures and dataclass shapes** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Configuration contract
----------------------
- `convert_file` accepts either a plain **mapping** (mirroring the TOML shape) or
  a frozen [`yamlblock.config.Config`][]. When `config` is `None`, project
  discovery is performed exactly like the CLI does.
- The input is fully read and decoded before the output is opened, so a failed
  conversion never touches the output file.

```python
from yamlblock import api

api.convert_text('{"a": [1, 2]}')  # 'a:\\n  - 1\\n  - 2\\n'
api.convert_file(
    "data.json",
    "data.yaml",
    config={"render": {"explicit_start": True}, "output": {"strategy": "inplace"}},
)
```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from yamlblock.api.types import ConversionResult
from yamlblock.config import Config, MutableConfig
from yamlblock.config.logging import get_logger
from yamlblock.constants import YAMLBLOCK_VERSION
from yamlblock.core.decoder import decode_json
from yamlblock.rendering import render
from yamlblock.utils.file import read_text_input, write_text_output

if TYPE_CHECKING:
    from collections.abc import Mapping

    from yamlblock.config.logging import YamlblockLogger
    from yamlblock.core.values import SourceValue
    from yamlblock.utils.file import WriteResult

logger: YamlblockLogger = get_logger(__name__)

__all__: list[str] = [
    "ConversionResult",
    "convert_file",
    "convert_text",
    "resolve_config",
    "version",
]


def version() -> str:
    """Return the installed YamlBlock version."""
    return YAMLBLOCK_VERSION


def resolve_config(config: Config | Mapping[str, Any] | None = None) -> Config:
    """Return a frozen `Config` for the given public configuration input.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen `Config` (returned as is),
            a mapping in TOML shape (merged over the defaults), or `None` for project
            discovery in the current working directory.

    Returns:
        Config: The immutable configuration snapshot.

    Raises:
        ConfigError: If a config file is invalid or a value cannot be honored.
    """
    if isinstance(config, Config):
        return config
    if config is None:
        return MutableConfig.load_merged().freeze()
    overlay: MutableConfig = MutableConfig.from_toml_dict(dict(config), source="<api>")
    return MutableConfig.from_defaults().merge_with(overlay).freeze()


def convert_text(text: str | bytes, *, explicit_start: bool = False, encoding: str = "utf-8") -> str:
    """Convert a JSON document to a YAML block-style document.

    Args:
        text (str | bytes): The JSON document.
        explicit_start (bool): If True, start the YAML document with ``---``.
        encoding (str): Encoding used when ``text`` is ``bytes``.

    Returns:
        str: The YAML document, ending with exactly one newline.

    Raises:
        JsonDecodeError: If ``text`` is not valid JSON.
        UnicodeDecodeError: If ``text`` is ``bytes`` not valid in ``encoding``.
    """
    value: SourceValue = decode_json(text, encoding=encoding)
    return render(value, explicit_start=explicit_start)


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> ConversionResult:
    """Convert a JSON file to a YAML file.

    Either path may be ``-`` for standard input/output.

    Args:
        input_path (str | Path): JSON input path.
        output_path (str | Path): YAML output path.
        config (Config | Mapping[str, Any] | None): Configuration, see `resolve_config`.

    Returns:
        ConversionResult: Summary of the conversion.

    Raises:
        ConfigError: If the configuration is invalid.
        OSError: If the input cannot be read or the output cannot be written.
        UnicodeError: If the input cannot be decoded or the output cannot be encoded.
        JsonDecodeError: If the input is not valid JSON.
    """
    cfg: Config = resolve_config(config)
    text: str = read_text_input(input_path, encoding=cfg.input_encoding)
    document: str = convert_text(text, explicit_start=cfg.explicit_start)

    written: WriteResult = write_text_output(
        document,
        output_path,
        encoding=cfg.output_encoding,
        strategy=cfg.write_strategy,
    )
    logger.info("Converted %s -> %s (%d bytes)", input_path, output_path, written.bytes_written)
    return ConversionResult(
        input=str(input_path),
        output=str(output_path),
        chars_read=len(text),
        bytes_written=written.bytes_written,
        explicit_start=cfg.explicit_start,
        diagnostics=cfg.diagnostics,
    )
