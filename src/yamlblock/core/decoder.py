# topmark:header:start
#
#   project      : YamlBlock
#   file         : decoder.py
#   file_relpath : src/yamlblock/core/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode JSON text into a source value tree.

Decoding uses the standard library ``json`` parser with hooks so that:

- numbers keep their original text (``1.50`` stays ``1.50``, ``1E3`` stays ``1E3``);
- objects keep document order (duplicate keys: last value wins);
- the non-standard ``NaN`` / ``Infinity`` / ``-Infinity`` literals are rejected.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from yamlblock.config.logging import get_logger
from yamlblock.core.errors import JsonDecodeError
from yamlblock.core.values import SourceValue, YMapping, YNumber, to_source_value

logger = get_logger(__name__)

UTF8_BOM: str = "\ufeff"


def _reject_constant(name: str) -> NoReturn:
    raise JsonDecodeError(f"non-standard numeric literal {name!r}")


def _mapping_from_pairs(pairs: list[tuple[str, Any]]) -> YMapping:
    return YMapping.from_pairs([(key, to_source_value(value)) for key, value in pairs])


def decode_json(data: str | bytes, *, encoding: str = "utf-8") -> SourceValue:
    """Decode a JSON document into a source value.

    Args:
        data (str | bytes): JSON text, or raw bytes in ``encoding``.
        encoding (str): Encoding used when ``data`` is ``bytes``.

    Returns:
        SourceValue: The decoded value tree.

    Raises:
        JsonDecodeError: If ``data`` is not a single well-formed JSON value, or is
            nested too deeply for the parser.
        UnicodeDecodeError: If ``data`` is ``bytes`` that cannot be decoded with
            ``encoding``.
    """
    text: str = data.decode(encoding) if isinstance(data, bytes) else data
    if text.startswith(UTF8_BOM):
        logger.debug("Stripping UTF-8 BOM from JSON input")
        text = text[len(UTF8_BOM) :]

    try:
        raw: Any = json.loads(
            text,
            parse_int=YNumber,
            parse_float=YNumber,
            parse_constant=_reject_constant,
            object_pairs_hook=_mapping_from_pairs,
        )
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except RecursionError as exc:
        raise JsonDecodeError("document is nested too deeply") from exc

    value: SourceValue = to_source_value(raw)
    logger.trace("Decoded JSON document into %s", type(value).__name__)
    return value
