# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlBlock package.

YamlBlock converts JSON documents to block-style YAML. It exposes a CLI
(``yamlblock convert INPUT OUTPUT``) and a small typed API
([`yamlblock.api`][]) for automation.
"""

from __future__ import annotations
