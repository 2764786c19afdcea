"""Zsh history file decoding.

A zsh history file written with ``EXTENDED_HISTORY`` stores one record per
command::

    : 1700000000:0;git status

The part before the first ``;`` is metadata (start time and duration). A
command typed over several lines is written as one metadata line followed by
plain continuation lines, which are glued back onto the payload byte for byte.
"""

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from ..config import HISTORY_FILE_NAME, METADATA_PREFIX, PAYLOAD_SEPARATOR
from ..utils.logger import get_logger
from .errors import HistoryUnavailableError

logger = get_logger(__name__)

def default_history_path() -> Optional[Path]:
    """Return ``~/.zsh_history``, or None if the home directory is unknown."""
    try:
        return Path.home() / HISTORY_FILE_NAME
    except (RuntimeError, KeyError) as e:
        logger.debug(f"Could not determine home directory: {e}")
        return None

def open_history_file(path: Union[str, Path, None] = None) -> BinaryIO:
    """Open a history file for binary reading.

    Args:
        path: History file to open. If None, uses ``~/.zsh_history``.

    Raises:
        HistoryUnavailableError: If the path cannot be located or opened.
    """
    if path is None:
        path = default_history_path()
        if path is None:
            raise HistoryUnavailableError("Home directory could not be determined")
    try:
        return open(path, 'rb')
    except OSError as e:
        raise HistoryUnavailableError(f"Cannot open history file {path}: {e}") from e

def _read_lines(handle: BinaryIO) -> Iterator[bytes]:
    """Yield raw lines from an open file, closing it when done."""
    with handle:
        try:
            for line in handle:
                yield line
        except OSError as e:
            logger.warning(f"Error reading history file, stopping early: {e}")

class ZshHistory:
    """Lazy, single-pass sequence of logical commands.

    Wraps any iterable of raw byte lines (a binary file, ``io.BytesIO`` or a
    list) and yields each reconstructed command as ``bytes``.
    """

    _EMPTY = object()

    def __init__(self, lines: Iterable[bytes]):
        self._lines = iter(lines)
        self._pending = self._EMPTY
        self._handle: Optional[BinaryIO] = None

    @classmethod
    def open(cls, path: Union[str, Path, None] = None) -> Optional["ZshHistory"]:
        """Open the history file, or return None if it is unavailable."""
        try:
            handle = open_history_file(path)
        except HistoryUnavailableError as e:
            logger.info(str(e))
            return None
        logger.debug(f"Reading history from {getattr(handle, 'name', path)}")
        history = cls(_read_lines(handle))
        history._handle = handle
        return history

    def _pull(self) -> Optional[bytes]:
        line = next(self._lines, None)
        if line is not None and line.endswith(b'\n'):
            line = line[:-1]
        return line

    def peek(self) -> Optional[bytes]:
        """Return the next raw line without consuming it."""
        if self._pending is self._EMPTY:
            self._pending = self._pull()
        return self._pending

    def advance(self) -> Optional[bytes]:
        """Consume and return the next raw line, or None when exhausted."""
        line = self.peek()
        self._pending = self._EMPTY
        return line

    def close(self) -> None:
        """Release the underlying line source."""
        close = getattr(self._lines, 'close', None)
        if close is not None:
            close()
        if self._handle is not None:
            self._handle.close()
        self._lines = iter(())
        self._pending = self._EMPTY

    def __enter__(self) -> "ZshHistory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __iter__(self) -> "ZshHistory":
        return self

    def __next__(self) -> bytes:
        while True:
            line = self.advance()
            if line is None:
                raise StopIteration

            if not line.startswith(METADATA_PREFIX):
                logger.debug(f"Dropping orphan continuation line: {line!r}")
                continue

            _, separator, payload = line.partition(PAYLOAD_SEPARATOR)
            if not separator:
                logger.debug(f"Dropping metadata line without command: {line!r}")
                continue

            command = bytearray(payload)
            while True:
                following = self.peek()
                if following is None or following.startswith(METADATA_PREFIX):
                    break
                command += self.advance()
            return bytes(command)
