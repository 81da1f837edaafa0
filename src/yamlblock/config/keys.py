# topmark:header:start
#
#   project      : YamlBlock
#   file         : keys.py
#   file_relpath : src/yamlblock/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for YamlBlock configuration.

This module defines the authoritative string constants used when reading,
writing, and validating YamlBlock configuration from TOML sources
(``yamlblock.toml`` and ``[tool.yamlblock]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI keys and TOML keys are intentionally kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by YamlBlock configuration.

    The ordering of constants mirrors the runtime defaults in
    [`load_defaults_dict`][yamlblock.config.io.load_defaults_dict].
    """

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_EXPLICIT_START: Final[str] = "explicit_start"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_ENCODING: Final[str] = "encoding"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    # KEY_ENCODING is shared with [input]
    KEY_STRATEGY: Final[str] = "strategy"


# Keys accepted per section; anything else is reported and ignored.
KNOWN_KEYS: Final[dict[str, frozenset[str]]] = {
    Toml.SECTION_RENDER: frozenset({Toml.KEY_EXPLICIT_START}),
    Toml.SECTION_INPUT: frozenset({Toml.KEY_ENCODING}),
    Toml.SECTION_OUTPUT: frozenset({Toml.KEY_ENCODING, Toml.KEY_STRATEGY}),
}
