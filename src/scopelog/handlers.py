"""
Output handlers.

A handler receives fully formatted lines through ``write(line)``. Every
handler must keep concurrent writes from interleaving mid-line, and a
file-backed handler must have the line on disk before ``write`` returns.
Write failures are reported through stdlib logging and never propagate
to the code being logged.
"""

import logging
import logging.handlers
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Tuple, Union

from rich.console import Console

from .constants import DEFAULT_SYSLOG_SOCKET, LOG_FILE_ENCODING, SYSTEM_LOG_LOGGER_NAME
from .exceptions import SinkUnavailableError

logger = logging.getLogger(__name__)


class Handler(ABC):
    """Destination for formatted log lines."""

    @abstractmethod
    def write(self, line: str) -> None:
        """Deliver one line. Must not interleave with concurrent writes."""

    def close(self) -> None:
        """Release any resources held by the handler."""


class ConsoleHandler(Handler):
    """Writes lines to the terminal through a Rich console."""

    def __init__(self, console: Optional[Console] = None, style: Optional[str] = None):
        self.console = console or Console(highlight=False, markup=False, emoji=False)
        self.style = style
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            self.console.out(line, style=self.style, highlight=False)


class StreamHandler(Handler):
    """Writes lines to any text stream, flushing after each line."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            try:
                self.stream.write(line + "\n")
                self.stream.flush()
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to write log line to stream: {e}")


class SystemLogHandler(Handler):
    """Forwards lines to a stdlib logger backed by syslog.

    Without an address the platform syslog socket is used when it exists;
    otherwise lines only reach the target logger's own handlers. The
    target logger is set to ``level`` so forwarded lines are never
    dropped by an inherited threshold. While a syslog handler is attached
    the target stops propagating, so lines are not duplicated on the root
    logger.

    Stdlib logging serializes emission itself, so this handler takes no
    lock of its own.
    """

    def __init__(
        self,
        target: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        address: Optional[Union[str, Tuple[str, int]]] = None,
    ):
        self.target = target or logging.getLogger(SYSTEM_LOG_LOGGER_NAME)
        self.level = level
        self.syslog_handler: Optional[logging.Handler] = None
        if address is None and os.path.exists(DEFAULT_SYSLOG_SOCKET):
            address = DEFAULT_SYSLOG_SOCKET
        self.address = address

        self._previous_level = self.target.level
        self._previous_propagate = self.target.propagate
        if address is not None:
            try:
                self.syslog_handler = logging.handlers.SysLogHandler(address=address)
            except OSError as e:
                raise SinkUnavailableError(str(address), str(e)) from e
            self.target.addHandler(self.syslog_handler)
            self.target.propagate = False
        self.target.setLevel(level)

    def write(self, line: str) -> None:
        self.target.log(self.level, line)

    def close(self) -> None:
        if self.syslog_handler is not None:
            self.target.removeHandler(self.syslog_handler)
            self.syslog_handler.close()
            self.syslog_handler = None
            self.target.propagate = self._previous_propagate
            self.target.setLevel(self._previous_level)

    def __repr__(self) -> str:
        return f"SystemLogHandler(target={self.target.name!r}, address={self.address!r})"


class FileHandler(Handler):
    """Appends lines to a UTF-8 file, flushing and syncing after every line.

    The file is created if absent. Construction raises
    SinkUnavailableError when the file cannot be created or opened.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            self._file = open(self.path, "a", encoding=LOG_FILE_ENCODING)
        except OSError as e:
            raise SinkUnavailableError(str(self.path), e.strerror or str(e)) from e

    def write(self, line: str) -> None:
        with self._lock:
            if self._file.closed:
                return
            try:
                self._file.write(line + "\n")
                self._file.flush()
                os.fsync(self._file.fileno())
            except OSError as e:
                logger.warning(f"Failed to write log line to {self.path}: {e}")

    def close(self) -> None:
        with self._lock:
            if not self._file.closed:
                self._file.close()

    def __repr__(self) -> str:
        return f"FileHandler(path={str(self.path)!r})"


def open_file_handler(path: Union[str, Path]) -> Optional[FileHandler]:
    """Create a FileHandler, or report the failure and return None."""
    try:
        return FileHandler(path)
    except SinkUnavailableError as e:
        logger.error(e.message)
        return None
