# topmark:header:start
#
#   project      : YamlBlock
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI exit codes for failing invocations.

Every failure exits with a sysexits-style code and an ``Error:`` line on stderr,
and never leaves a partially written output file behind.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from yamlblock.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr


@pytest.mark.parametrize(
    "argv",
    [
        ["convert"],
        ["convert", "in.json"],
        ["convert", "a", "b", "c"],
        ["convert", "--strategy", "sideways", "-", "-"],
        ["convert", "--bogus", "-", "-"],
        ["no-such-command"],
        ["--bogus"],
    ],
)
def test_invocation_errors_exit_with_usage_error(tmp_path: Path, argv: list[str]) -> None:
    result: Result = run_cli_in(tmp_path, argv)

    assert_USAGE_ERROR(result)


def test_underscored_option_is_trapped(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["convert", "--no_config", "-", "-"], input_text="1")

    assert_USAGE_ERROR(result)
    assert "--no-config" in result.stderr


def test_invalid_json_is_a_data_error(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_text('{"a": 1,}', "utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "convert", "in.json", "out.yaml"])

    assert_DATA_ERROR(result)
    assert "Error: in.json: Invalid JSON" in result.stderr
    assert not (tmp_path / "out.yaml").exists()


@pytest.mark.parametrize("text", ["", "NaN", "[1] [2]", '{"a": Infinity}'])
def test_rejected_documents_on_stdin(tmp_path: Path, text: str) -> None:
    result: Result = run_cli_in(tmp_path, ["convert", "-", "-"], input_text=text)

    assert_DATA_ERROR(result)
    assert result.stdout == ""


def test_undecodable_input_is_a_data_error(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_bytes(b'["\xff"]')

    result: Result = run_cli_in(tmp_path, ["convert", "in.json", "out.yaml"])

    assert_DATA_ERROR(result)
    assert not (tmp_path / "out.yaml").exists()


def test_unencodable_output_is_a_data_error(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_text('["\\u2603"]', "utf-8")
    (tmp_path / "out.yaml").write_text("keep\n", "utf-8")

    result: Result = run_cli_in(
        tmp_path, ["convert", "--output-encoding", "ascii", "in.json", "out.yaml"]
    )

    assert_DATA_ERROR(result)
    assert (tmp_path / "out.yaml").read_text("utf-8") == "keep\n"


def test_failed_conversion_leaves_existing_output_untouched(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_text("[1, 2", "utf-8")
    (tmp_path / "out.yaml").write_text("keep\n", "utf-8")

    result: Result = run_cli_in(tmp_path, ["convert", "in.json", "out.yaml"])

    assert_DATA_ERROR(result)
    assert (tmp_path / "out.yaml").read_text("utf-8") == "keep\n"


def test_missing_input_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "convert", "missing.json", "out.yaml"])

    assert_FILE_NOT_FOUND(result)
    assert "missing.json" in result.stderr
    assert not (tmp_path / "out.yaml").exists()


def test_directory_as_input(tmp_path: Path) -> None:
    (tmp_path / "data").mkdir()

    result: Result = run_cli_in(tmp_path, ["convert", "data", "out.yaml"])

    assert_FILE_NOT_FOUND(result)


def test_missing_output_directory_is_an_io_error(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_text("1", "utf-8")

    result: Result = run_cli_in(tmp_path, ["convert", "in.json", "nowhere/out.yaml"])

    assert result.exit_code in (ExitCode.FILE_NOT_FOUND, ExitCode.IO_ERROR), result.output


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_unreadable_input_is_a_permission_error(tmp_path: Path) -> None:
    src = tmp_path / "in.json"
    src.write_text("1", "utf-8")
    src.chmod(0)
    try:
        result: Result = run_cli_in(tmp_path, ["convert", "in.json", "out.yaml"])
    finally:
        src.chmod(0o644)

    assert result.exit_code == ExitCode.PERMISSION_DENIED, result.output


def test_invalid_config_value_is_a_config_error(tmp_path: Path) -> None:
    (tmp_path / "yamlblock.toml").write_text('[output]\nstrategy = "sideways"\n', "utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "convert", "-", "-"], input_text="1")

    assert_CONFIG_ERROR(result)
    assert "Unknown write strategy 'sideways'" in result.stderr
    assert result.stdout == ""


def test_malformed_config_file_is_a_config_error(tmp_path: Path) -> None:
    (tmp_path / "yamlblock.toml").write_text("[render\n", "utf-8")

    result: Result = run_cli_in(tmp_path, ["convert", "-", "-"], input_text="1")

    assert_CONFIG_ERROR(result)


def test_unknown_encoding_option_is_a_config_error(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["convert", "--input-encoding", "no-such-codec", "-", "-"], input_text="1"
    )

    assert_CONFIG_ERROR(result)
