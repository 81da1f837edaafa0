# topmark:header:start
#
#   project      : YamlBlock
#   file         : console_helpers.py
#   file_relpath : src/yamlblock/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console lookup shared by the ``convert``, ``dump-config`` and ``version`` commands.

Under ``yamlblock`` the root group stores a Click-backed console, colored
according to ``--color/--no-color``, in ``ctx.obj["console"]``. Commands invoked
directly (``CliRunner.invoke(convert_command, ...)``, or callbacks called from
Python) have no such object and fall back to
[`yamlblock.cli.console_std.StdConsole`][].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yamlblock.cli.console_std import StdConsole

if TYPE_CHECKING:
    from yamlblock.cli_shared.console_api import ConsoleLike


def get_console_safely() -> ConsoleLike:
    """Return the console of the running ``yamlblock`` invocation.

    Returns:
        ConsoleLike: ``ctx.obj["console"]`` when the root group has set one up,
        otherwise an uncolored [`yamlblock.cli.console_std.StdConsole`][].
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return StdConsole()
