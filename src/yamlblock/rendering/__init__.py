# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML block rendering for YamlBlock.

Public modules:
    - yamlblock.rendering.api
    - yamlblock.rendering.block
    - yamlblock.rendering.scalars
"""

from __future__ import annotations

from yamlblock.rendering.api import render
from yamlblock.rendering.block import render_block

__all__ = [
    "render",
    "render_block",
]
