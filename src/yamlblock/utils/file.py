# topmark:header:start
#
#   project      : YamlBlock
#   file         : file.py
#   file_relpath : src/yamlblock/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading JSON input and writing YAML output.

Input is read as bytes and decoded with the configured encoding, so decoding
errors surface as `UnicodeDecodeError` rather than being replaced silently.

Output goes to one of three sinks:

- StdoutSink: writes the encoded document to standard output (path ``-``).
- AtomicFileSink: writes a temporary file in the target directory and renames
  it over the target.
- InplaceFileSink: truncates and writes the target directly.
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol

from yamlblock.config.logging import get_logger
from yamlblock.config.types import WriteStrategy
from yamlblock.constants import STDIO_PATH

logger = get_logger(__name__)


def is_stdio(path: str | Path) -> bool:
    """Return True if ``path`` designates standard input/output."""
    return str(path) == STDIO_PATH


def read_text_input(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Read and decode a text document from a file or standard input.

    Args:
        path (str | Path): Input path, or ``-`` for standard input.
        encoding (str): Text encoding of the input.

    Returns:
        str: The decoded document.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content is not valid in ``encoding``.
    """
    if is_stdio(path):
        data: bytes = sys.stdin.buffer.read()
        logger.debug("Read %d bytes from stdin", len(data))
    else:
        data = Path(path).read_bytes()
        logger.debug("Read %d bytes from %s", len(data), path)
    return data.decode(encoding)


def safe_unlink(path: Path | None) -> None:
    """Attempt to delete a file, ignoring a file that is already gone."""
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove temporary file %s: %s", path, exc)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    target: str
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for output sinks."""

    def write(self, data: bytes) -> WriteResult:
        """Write the encoded document and report how many bytes were written."""
        ...


class StdoutSink:
    """Standard-output sink."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream: BinaryIO | None = stream

    def write(self, data: bytes) -> WriteResult:
        """Emit the document on standard output."""
        # Flush pending text first so bytes and text writes do not interleave.
        sys.stdout.flush()
        stream: BinaryIO = self._stream or sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return WriteResult(target=STDIO_PATH, bytes_written=len(data))


def _current_umask() -> int:
    mask: int = os.umask(0)
    os.umask(mask)
    return mask


def _apply_target_mode(tmp_path: Path, target: Path) -> None:
    """Give the temporary file the mode the target has, or would get if created.

    Temporary files are created with mode ``0600``.
    """
    if target.exists():
        shutil.copymode(target, tmp_path)
    else:
        os.chmod(tmp_path, 0o666 & ~_current_umask())


class AtomicFileSink:
    """Filesystem sink that replaces the target via a same-directory rename."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def write(self, data: bytes) -> WriteResult:
        """Write to a temporary sibling file, then rename it over ``path``.

        The temporary file is removed if anything fails before the rename.
        """
        directory: Path = self.path.parent if str(self.path.parent) else Path(".")
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            _apply_target_mode(tmp_path, self.path)
            os.replace(tmp_path, self.path)
            tmp_path = None
        finally:
            safe_unlink(tmp_path)
        logger.debug("AtomicFileSink: wrote %d bytes to file %s", len(data), self.path)
        return WriteResult(target=str(self.path), bytes_written=len(data))


class InplaceFileSink:
    """Filesystem sink that truncates and writes ``path`` directly."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def write(self, data: bytes) -> WriteResult:
        """Write ``data`` to ``path`` in place."""
        with open(self.path, "wb") as f:
            f.write(data)
        logger.debug("InplaceFileSink: wrote %d bytes to file %s", len(data), self.path)
        return WriteResult(target=str(self.path), bytes_written=len(data))


def select_sink(path: str | Path, strategy: WriteStrategy) -> WriteSink:
    """Return the sink for ``path`` and ``strategy``.

    Args:
        path (str | Path): Output path, or ``-`` for standard output.
        strategy (WriteStrategy): File write strategy (ignored for standard output).

    Returns:
        WriteSink: The selected sink.
    """
    if is_stdio(path):
        logger.debug("Selected STDOUT sink")
        return StdoutSink()
    if strategy is WriteStrategy.INPLACE:
        logger.debug("Selected in-place file sink for %s", path)
        return InplaceFileSink(Path(path))
    logger.debug("Selected atomic file sink for %s", path)
    return AtomicFileSink(Path(path))


def write_text_output(
    text: str,
    path: str | Path,
    *,
    encoding: str = "utf-8",
    strategy: WriteStrategy = WriteStrategy.ATOMIC,
) -> WriteResult:
    """Encode ``text`` and write it to a file or standard output.

    Newlines are written exactly as they appear in ``text`` (no platform
    translation).

    Args:
        text (str): The document to write.
        path (str | Path): Output path, or ``-`` for standard output.
        encoding (str): Text encoding of the output.
        strategy (WriteStrategy): How files are written.

    Returns:
        WriteResult: The target and the number of bytes written.

    Raises:
        OSError: If the output cannot be written.
        UnicodeEncodeError: If ``text`` cannot be represented in ``encoding``.
    """
    data: bytes = text.encode(encoding)
    return select_sink(path, strategy).write(data)
