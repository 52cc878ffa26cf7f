"""Leveled logger that serialises output through a single writer thread."""

from __future__ import annotations

import queue
import sys
import threading
from enum import IntEnum
from typing import TextIO

from .messages import Message

_QUEUE_SIZE = 10_000
_CLOSE = object()


class LogLevel(IntEnum):
    """Severity of a log message."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    ERROR = 3

    @property
    def prefix(self) -> str:
        """Text printed before a message of this level."""
        return _PREFIXES.get(self, "UNKNOWN ")


# Trace output already carries its own prefix, so none is added here.
_PREFIXES = {
    LogLevel.TRACE: "",
    LogLevel.DEBUG: "DEBUG ",
    LogLevel.INFO: "",
    LogLevel.ERROR: "ERROR ",
}

_LEVEL_NAMES = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "error": LogLevel.ERROR,
}


def level_from_string(name: str) -> LogLevel:
    """Return the level with the given name, INFO when it is unknown."""
    return _LEVEL_NAMES.get(name, LogLevel.INFO)


class Logger:
    """Writes messages at or above its level to stdout or stderr, in order."""

    def __init__(
        self,
        level: str = "info",
        json_output: bool = False,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.level = level_from_string(level)
        self.json_output = json_output
        self._stdout = stdout
        self._stderr = stderr
        self._queue: queue.Queue = queue.Queue(maxsize=_QUEUE_SIZE)
        self._lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(target=self._drain, daemon=True)
        self._thread.start()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _drain(self) -> None:
        while True:
            item = self._queue.get()
            if item is _CLOSE:
                return
            to_stderr, text = item
            if to_stderr:
                stream = self._stderr if self._stderr is not None else sys.stderr
            else:
                stream = self._stdout if self._stdout is not None else sys.stdout
            print(text, file=stream, flush=True)

    def _emit(self, level: LogLevel, message: Message, to_stderr: bool, force: bool = False) -> None:
        if not force and level < self.level:
            return
        text = message.json() if self.json_output else f"{level.prefix}{message}"
        with self._lock:
            if self._closed:
                raise RuntimeError("logger is closed")
            self._queue.put((to_stderr, text))

    def trace(self, message: Message) -> None:
        """Log a message at trace level."""
        self._emit(LogLevel.TRACE, message, False)

    def debug(self, message: Message) -> None:
        """Log a message at debug level."""
        self._emit(LogLevel.DEBUG, message, False)

    def info(self, message: Message) -> None:
        """Log a message at info level."""
        self._emit(LogLevel.INFO, message, False)

    def stat(self, message: Message) -> None:
        """Log a message with info formatting, whatever the level."""
        self._emit(LogLevel.INFO, message, False, force=True)

    def error(self, message: Message) -> None:
        """Log a message at error level to stderr."""
        self._emit(LogLevel.ERROR, message, True)

    def close(self) -> None:
        """Flush all pending messages and stop the writer thread."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSE)
        self._thread.join()


_global: Logger | None = None


def _require() -> Logger:
    if _global is None:
        raise RuntimeError("logger is not initialized")
    return _global


def init(level: str, json_output: bool) -> None:
    """Create the process-wide logger, replacing any previous one."""
    global _global
    if _global is not None:
        _global.close()
    _global = Logger(level, json_output)


def trace(message: Message) -> None:
    """Log at trace level through the global logger."""
    _require().trace(message)


def debug(message: Message) -> None:
    """Log at debug level through the global logger."""
    _require().debug(message)


def info(message: Message) -> None:
    """Log at info level through the global logger."""
    _require().info(message)


def stat(message: Message) -> None:
    """Log statistics through the global logger regardless of level."""
    _require().stat(message)


def error(message: Message) -> None:
    """Log at error level through the global logger."""
    _require().error(message)


def close() -> None:
    """Flush and close the global logger, if any."""
    global _global
    if _global is not None:
        _global.close()
        _global = None