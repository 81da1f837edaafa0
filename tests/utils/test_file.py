# topmark:header:start
#
#   project      : YamlBlock
#   file         : test_file.py
#   file_relpath : tests/utils/test_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for input reading and output sinks."""

from __future__ import annotations

import io
import os
import stat
import sys
from typing import TYPE_CHECKING

import pytest

from yamlblock.config.types import WriteStrategy
from yamlblock.utils.file import (
    AtomicFileSink,
    InplaceFileSink,
    StdoutSink,
    is_stdio,
    read_text_input,
    select_sink,
    write_text_output,
)

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class _FakeStdin:
    def __init__(self, data: bytes) -> None:
        self.buffer = io.BytesIO(data)


def test_is_stdio() -> None:
    assert is_stdio("-")
    assert not is_stdio("./-")
    assert not is_stdio("data.json")


def test_read_text_input_from_file(tmp_path: Path) -> None:
    path = tmp_path / "in.json"
    path.write_bytes('{"name": "café"}'.encode())

    assert read_text_input(path) == '{"name": "café"}'


def test_read_text_input_with_encoding(tmp_path: Path) -> None:
    path = tmp_path / "in.json"
    path.write_bytes('["café"]'.encode("latin-1"))

    assert read_text_input(path, encoding="latin-1") == '["café"]'
    with pytest.raises(UnicodeDecodeError):
        read_text_input(path)


def test_read_text_input_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdin", _FakeStdin(b"[1, 2]\n"))

    assert read_text_input("-") == "[1, 2]\n"


def test_read_text_input_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text_input(tmp_path / "missing.json")


def test_select_sink() -> None:
    assert isinstance(select_sink("-", WriteStrategy.INPLACE), StdoutSink)
    assert isinstance(select_sink("out.yaml", WriteStrategy.ATOMIC), AtomicFileSink)
    assert isinstance(select_sink("out.yaml", WriteStrategy.INPLACE), InplaceFileSink)


@pytest.mark.parametrize("strategy", list(WriteStrategy))
def test_write_text_output_writes_exact_bytes(tmp_path: Path, strategy: WriteStrategy) -> None:
    target = tmp_path / "out.yaml"
    target.write_text("old content that is longer than the new one\n", encoding="utf-8")

    result = write_text_output("a: 1\nb:\n  - é\n", target, strategy=strategy)

    expected = "a: 1\nb:\n  - é\n".encode()
    assert target.read_bytes() == expected
    assert result.bytes_written == len(expected)
    assert result.target == str(target)


def test_atomic_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    target = tmp_path / "out.yaml"

    AtomicFileSink(target).write(b"x: 1\n")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.yaml"]


def test_atomic_write_cleans_up_on_failure(tmp_path: Path) -> None:
    target = tmp_path / "out.yaml"
    target.mkdir()

    with pytest.raises(OSError):
        AtomicFileSink(target).write(b"x: 1\n")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["out.yaml"]
    assert target.is_dir()

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")


@pytest.fixture
def umask_027() -> Iterator[int]:
    previous = os.umask(0o027)
    try:
        yield 0o027
    finally:
        os.umask(previous)


@posix_only
def test_atomic_write_keeps_the_mode_of_a_replaced_file(tmp_path: Path) -> None:
    target = tmp_path / "out.yaml"
    target.write_text("old\n", encoding="utf-8")
    target.chmod(0o664)

    write_text_output("a: 1\n", target, strategy=WriteStrategy.ATOMIC)

    assert stat.S_IMODE(target.stat().st_mode) == 0o664


@posix_only
def test_atomic_write_creates_files_with_the_umask_mode(tmp_path: Path, umask_027: int) -> None:
    target = tmp_path / "new.yaml"

    write_text_output("a: 1\n", target, strategy=WriteStrategy.ATOMIC)

    assert stat.S_IMODE(target.stat().st_mode) == 0o666 & ~umask_027


def test_write_text_output_encoding(tmp_path: Path) -> None:
    target = tmp_path / "out.yaml"

    write_text_output("- é\n", target, encoding="latin-1")

    assert target.read_bytes() == "- é\n".encode("latin-1")


def test_write_text_output_unencodable_text(tmp_path: Path) -> None:
    target = tmp_path / "out.yaml"

    with pytest.raises(UnicodeEncodeError):
        write_text_output("- ☃\n", target, encoding="ascii")

    assert not target.exists()


def test_stdout_sink_writes_bytes() -> None:
    stream = io.BytesIO()

    result = StdoutSink(stream).write(b"- 1\n")

    assert stream.getvalue() == b"- 1\n"
    assert result.target == "-"
    assert result.bytes_written == 4
