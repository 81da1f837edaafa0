# topmark:header:start
#
#   project      : YamlBlock
#   file         : io.py
#   file_relpath : src/yamlblock/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for YamlBlock configuration.

This module provides:
- the runtime defaults as a plain dict (no I/O),
- loading of on-disk TOML files (`yamlblock.toml` / `pyproject.toml`) via `tomlkit`,
- rendering of a `TomlTable` back to TOML text,
- *checked* value getters that validate shapes and record warnings instead of
  failing, so user mistakes are surfaced without crashing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from yamlblock.config.keys import Toml
from yamlblock.config.logging import get_logger
from yamlblock.config.types import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from yamlblock.config.logging import YamlblockLogger
    from yamlblock.config.types import TomlTable

logger: YamlblockLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return YamlBlock's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. The returned value is a new
    dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_RENDER: {
            Toml.KEY_EXPLICIT_START: False,
        },
        Toml.SECTION_INPUT: {
            Toml.KEY_ENCODING: "utf-8",
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_ENCODING: "utf-8",
            Toml.KEY_STRATEGY: "atomic",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``yamlblock.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings (TOML has no `null`)."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


# --- Checked getters: validate shapes and record warnings ---


def get_table_checked(
    table: TomlTable,
    key: str,
    *,
    diagnostics: list[str],
) -> TomlTable:
    """Return a sub-table, recording a warning when the value is not a table."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    message: str = f"Expected table [{key}], got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.append(message)
    return {}


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    message: str = f"Expected boolean in {where}.{key}, got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.append(message)
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    message: str = f"Expected string in {where}.{key}, got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.append(message)
    return None


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: list[str],
) -> None:
    """Record a warning for every key of ``table`` that is not in ``known``."""
    for key in table:
        if key not in known:
            loc: str = f"{where}.{key}" if where else key
            message: str = f"Ignoring unknown config key {loc}"
            logger.warning(message)
            diagnostics.append(message)
