# topmark:header:start
#
#   project      : YamlBlock
#   file         : convert.py
#   file_relpath : src/yamlblock/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlBlock `convert` command.

Reads one JSON document and writes it as a block-style YAML document.

Input modes:
  * ``INPUT`` may be ``-`` to read the JSON document from STDIN.
  * ``OUTPUT`` may be ``-`` to write the YAML document to STDOUT.

The output is only written once the input has been read and decoded
successfully, so a failed conversion never creates or truncates ``OUTPUT``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yamlblock.api import convert_file
from yamlblock.cli.config_resolver import resolve_config_from_click
from yamlblock.cli.console_helpers import get_console_safely
from yamlblock.cli.errors import translate_exception
from yamlblock.cli.options import common_config_options, common_render_options
from yamlblock.config.logging import get_logger
from yamlblock.constants import STDIO_PATH

if TYPE_CHECKING:
    from yamlblock.api.types import ConversionResult
    from yamlblock.cli_shared.console_api import ConsoleLike
    from yamlblock.config import Config, WriteStrategy

logger = get_logger(__name__)


def _display_path(path: str) -> str:
    return "<stdin/stdout>" if path == STDIO_PATH else path


@click.command(
    name="convert",
    help=(
        "Convert the JSON document INPUT to block-style YAML and write it to OUTPUT. "
        "Use '-' for STDIN (INPUT) or STDOUT (OUTPUT)."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("input_path", metavar="INPUT", type=str)
@click.argument("output_path", metavar="OUTPUT", type=str)
@common_render_options
@common_config_options
def convert_command(
    *,
    input_path: str,
    output_path: str,
    explicit_start: bool | None,
    write_strategy: WriteStrategy | None,
    input_encoding: str | None,
    output_encoding: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Convert a JSON file to a YAML file.

    Args:
        input_path: JSON input path, or ``-`` for STDIN.
        output_path: YAML output path, or ``-`` for STDOUT.
        explicit_start: Override ``[render] explicit_start`` when not None.
        write_strategy: Override ``[output] strategy`` when not None.
        input_encoding: Override ``[input] encoding`` when not None.
        output_encoding: Override ``[output] encoding`` when not None.
        no_config: If True, skip loading project configuration files.
        config_paths: Additional TOML config files to merge into the effective config.

    Raises:
        YamlblockError: A subclass matching the failure (see
            [`translate_exception`][yamlblock.cli.errors.translate_exception]).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console_safely()
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "explicit_start": explicit_start,
            "write_strategy": write_strategy,
            "input_encoding": input_encoding,
            "output_encoding": output_encoding,
        },
    )
    for message in config.diagnostics:
        console.warn(f"Warning: {message}")

    try:
        result: ConversionResult = convert_file(input_path, output_path, config=config)
    except Exception as exc:
        filename = getattr(exc, "filename", None)
        where: str = str(filename) if filename is not None else _display_path(input_path)
        logger.debug("Conversion failed for %s", where, exc_info=True)
        raise translate_exception(exc, path=where) from exc

    if vlevel > 0:
        console.info(
            console.styled(
                f"Converted {_display_path(result.input)} -> {_display_path(result.output)} "
                f"({result.bytes_written} bytes, strategy: {config.write_strategy.value})",
                fg="green",
            )
        )

    # No explicit return needed for Click commands.
