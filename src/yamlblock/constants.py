# topmark:header:start
#
#   project      : YamlBlock
#   file         : constants.py
#   file_relpath : src/yamlblock/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlBlock Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

YAMLBLOCK_VERSION: str = get_version("yamlblock")

# Project-local config files, looked up in the working directory:
PROJECT_CONFIG_NAME: str = "yamlblock.toml"
PYPROJECT_CONFIG_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "yamlblock"

DOCUMENT_START_MARKER: str = "---"

# Path value meaning "standard input" or "standard output" on the CLI.
STDIO_PATH: str = "-"

TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="
