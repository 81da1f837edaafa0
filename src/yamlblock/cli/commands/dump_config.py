# topmark:header:start
#
#   file         : dump_config.py
#   file_relpath : src/yamlblock/cli/commands/dump_config.py
#   project      : YamlBlock
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlBlock `dump-config` command.

Emits the effective YamlBlock configuration as TOML after applying defaults,
project config files and any explicit ``--config`` files. The output is wrapped
between `# === BEGIN[TOML] ===` and `# === END[TOML] ===` markers for easy
parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yamlblock.cli.config_resolver import resolve_config_from_click
from yamlblock.cli.console_helpers import get_console_safely
from yamlblock.cli.options import common_config_options
from yamlblock.config.io import to_toml
from yamlblock.config.logging import get_logger
from yamlblock.constants import TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from yamlblock.cli_shared.console_api import ConsoleLike
    from yamlblock.config import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged YamlBlock configuration as TOML.",
    epilog=(
        "Notes:\n"
        f"  • Output is wrapped between '{TOML_BLOCK_START}' and '{TOML_BLOCK_END}' markers.\n"
        "  • Config files that contributed to the result are listed with -v."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@common_config_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config: If True, skip loading project configuration files.
        config_paths: Additional TOML config files to merge into the effective config.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console_safely()
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    config: Config = resolve_config_from_click(no_config=no_config, config_paths=config_paths)
    logger.trace("Config after merging discovered and explicit config: %s", config)

    for message in config.diagnostics:
        console.warn(f"Warning: {message}")
    if vlevel > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "(defaults only)"
        console.info(console.styled(f"Config sources: {sources}", bold=True))

    console.print(TOML_BLOCK_START)
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print(TOML_BLOCK_END)

    # No explicit return needed for Click commands.
