# topmark:header:start
#
#   project      : YamlBlock
#   file         : __main__.py
#   file_relpath : src/yamlblock/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running YamlBlock via ``python -m yamlblock``.

It delegates directly to :func:`yamlblock.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how YamlBlock is launched.

Examples:
    Convert a file using the module interface::

        python -m yamlblock convert data.json data.yaml
"""

from __future__ import annotations

from yamlblock.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli(prog_name="yamlblock")
