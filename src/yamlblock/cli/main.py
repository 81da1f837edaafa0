# topmark:header:start
#
#   project      : YamlBlock
#   file         : main.py
#   file_relpath : src/yamlblock/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``yamlblock`` CLI.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Click's own usage errors are re-raised as
  [`YamlblockUsageError`][yamlblock.cli.errors.YamlblockUsageError] so that every
  invocation error exits with ``EX_USAGE`` (64).
- Subcommands stay thin and delegate to the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from yamlblock.cli.commands.convert import convert_command
from yamlblock.cli.commands.dump_config import dump_config_command
from yamlblock.cli.commands.version import version_command
from yamlblock.cli.console import ClickConsole
from yamlblock.cli.errors import translate_exception

# --- We use a module import here instead of relative import
from yamlblock.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from yamlblock.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from yamlblock.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


class YamlblockGroup(click.Group):
    """Click group that reports invocation errors with the ``EX_USAGE`` exit code."""

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        """Parse group-level arguments, translating Click usage errors."""
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            raise translate_exception(exc) from exc

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the selected subcommand, translating Click usage errors."""
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            raise translate_exception(exc) from exc


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=YamlblockGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="YamlBlock: convert JSON documents to block-style YAML.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the YamlBlock CLI."""
    # Initialize verbosity and color state once for all subcommands
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'yamlblock convert INPUT OUTPUT' to convert a JSON file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
