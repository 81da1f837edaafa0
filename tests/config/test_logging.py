# topmark:header:start
#
#   project      : YamlBlock
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers (environment level, stderr routing)."""

from __future__ import annotations

import logging

import pytest

from yamlblock.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    StderrHandler,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("warn", logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_installs_single_stderr_handler() -> None:
    try:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], StderrHandler)
    finally:
        setup_logging(TRACE_LEVEL)


def test_logs_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        setup_logging(logging.DEBUG)
        get_logger("yamlblock.test").trace("hidden at DEBUG")
        get_logger("yamlblock.test").warning("visible warning")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "visible warning" in captured.err
        assert "hidden at DEBUG" not in captured.err
    finally:
        setup_logging(TRACE_LEVEL)
