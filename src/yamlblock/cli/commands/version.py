# topmark:header:start
#
#   project      : YamlBlock
#   file         : version.py
#   file_relpath : src/yamlblock/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlBlock `version` command.

Prints the current YamlBlock version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from yamlblock.cli.cli_types import EnumChoiceParam, OutputFormat
from yamlblock.cli.console_helpers import get_console_safely
from yamlblock.constants import YAMLBLOCK_VERSION

if TYPE_CHECKING:
    from yamlblock.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of YamlBlock.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of YamlBlock.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console_safely()
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": YAMLBLOCK_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("YamlBlock version:", bold=True, underline=True))
        console.print(f"    {console.styled(YAMLBLOCK_VERSION, bold=True)}")
    else:
        console.print(console.styled(YAMLBLOCK_VERSION, bold=True))

    # No explicit return needed for Click commands.
