# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks: the source value model, JSON decoding and errors.

Nothing in this package depends on Click or on the console layer.
"""

from __future__ import annotations
