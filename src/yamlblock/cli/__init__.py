# topmark:header:start
#
#   project      : YamlBlock
#   file         : __init__.py
#   file_relpath : src/yamlblock/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for YamlBlock.

The ``yamlblock`` console script (``yamlblock.cli.main:cli``) exposes three
commands under [`yamlblock.cli.commands`][]: ``convert`` turns a JSON file or
stdin into block YAML, ``dump-config`` prints the effective TOML settings, and
``version`` prints the package version.

Standard output is reserved for the document a command produces (YAML, TOML or
the version) so it can be piped or redirected; summaries, warnings and errors
go to stderr. Exit statuses follow ``sysexits.h`` (see
[`yamlblock.cli.errors`][]).
"""

from __future__ import annotations

__all__: list[str] = []
# Importing .main here would load Click and the renderer for every submodule import.
