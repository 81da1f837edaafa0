# topmark:header:start
#
#   project      : YamlBlock
#   file         : scalars.py
#   file_relpath : src/yamlblock/rendering/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline text for scalars and empty collections.

This is a deliberately naive emitter: strings are written verbatim, and only the
empty string is quoted (as ``''``). Empty collections use the flow tokens ``[]``
and ``{}`` so they can sit on the same line as their key or dash.
"""

from __future__ import annotations

from typing import Final

from yamlblock.core.values import (
    SourceValue,
    YBool,
    YMapping,
    YNull,
    YNumber,
    YSequence,
    YString,
    is_scalar,
)

EMPTY_STRING_TOKEN: Final[str] = "''"
EMPTY_SEQUENCE_TOKEN: Final[str] = "[]"
EMPTY_MAPPING_TOKEN: Final[str] = "{}"

EMPTY_COLLECTION_TOKENS: Final[frozenset[str]] = frozenset(
    {EMPTY_SEQUENCE_TOKEN, EMPTY_MAPPING_TOKEN}
)


def format_scalar(value: YNull | YBool | YNumber | YString) -> str:
    """Return the inline text of a scalar.

    Args:
        value (YNull | YBool | YNumber | YString): The scalar to format.

    Returns:
        str: ``""`` for null, ``true``/``false``, the number text, or the string
        (``''`` when empty).
    """
    if isinstance(value, YNull):
        return ""
    if isinstance(value, YBool):
        return "true" if value.value else "false"
    if isinstance(value, YNumber):
        return value.text
    if value.value == "":
        return EMPTY_STRING_TOKEN
    return value.value


def format_leaf(value: SourceValue) -> str:
    """Return the inline text of a scalar or an empty collection.

    Raises:
        ValueError: If ``value`` is a non-empty collection (those render as blocks).
    """
    if isinstance(value, YSequence):
        if len(value) > 0:
            raise ValueError("non-empty sequence is not a leaf")
        return EMPTY_SEQUENCE_TOKEN
    if isinstance(value, YMapping):
        if len(value) > 0:
            raise ValueError("non-empty mapping is not a leaf")
        return EMPTY_MAPPING_TOKEN
    return format_scalar(value)


def is_inline(value: SourceValue, rendered: str) -> bool:
    """Return True when ``value`` may share a line with its key or dash.

    Scalars always may; collections only when their rendering trims to ``[]`` or ``{}``.
    """
    if is_scalar(value):
        return True
    return rendered.strip() in EMPTY_COLLECTION_TOKENS
