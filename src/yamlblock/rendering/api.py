# topmark:header:start
#
#   project      : YamlBlock
#   file         : api.py
#   file_relpath : src/yamlblock/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level entry point for rendering YAML documents.

`render` wraps [`render_block`][yamlblock.rendering.block.render_block]: it renders
the value at depth 0, trims surrounding whitespace, terminates the document with a
single newline and optionally prepends the ``---`` document start marker.
"""

from __future__ import annotations

from typing import Any

from yamlblock.constants import DOCUMENT_START_MARKER
from yamlblock.core.values import SourceValue, to_source_value
from yamlblock.rendering.block import render_block


def render(value: SourceValue | Any, *, explicit_start: bool = False) -> str:
    """Render a value as a YAML block-style document.

    Args:
        value (SourceValue | Any): A source value, or plain Python data accepted by
            [`to_source_value`][yamlblock.core.values.to_source_value].
        explicit_start (bool): If True, start the document with ``---``.

    Returns:
        str: The YAML document, ending with exactly one newline.

    Raises:
        SourceValueError: If ``value`` is plain data that cannot be mapped onto the
            source value model. Source values themselves always render.
    """
    source: SourceValue = to_source_value(value)
    document: str = render_block(source, 0).strip() + "\n"
    if explicit_start:
        return f"{DOCUMENT_START_MARKER}\n{document}"
    return document
