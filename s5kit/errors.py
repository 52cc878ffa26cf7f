"""Error types shared by storage operations and sync decisions."""

from __future__ import annotations

import asyncio
import concurrent.futures
from typing import Any


class OperationError(Exception):
    """An error raised while performing an operation on a source and destination."""

    def __init__(self, op: str, src: Any, dst: Any, err: BaseException) -> None:
        super().__init__(str(err))
        self.op = op
        self.src = src
        self.dst = dst
        self.err = err
        self.__cause__ = err

    def full_command(self) -> str:
        """Return the command line the error occurred at."""
        return f"{self.op} {self.src} {self.dst}"

    def __str__(self) -> str:
        return str(self.err)


class _SyncWarning(Exception):
    """Base for conditions that are reported as warnings, not failures."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ObjectExistsError(_SyncWarning):
    """The specified object already exists."""

    default_message = "object already exists"


class ObjectIsNewerError(_SyncWarning):
    """The specified object is newer or of the same age."""

    default_message = "object is newer or same age"


class ObjectSizesMatchError(_SyncWarning):
    """The sizes of the objects match."""

    default_message = "object size matches"


class ObjectIsNewerAndSizesMatchError(_SyncWarning):
    """The object is newer or of the same age and the sizes match."""

    default_message = (
        f"{ObjectIsNewerError.default_message} and {ObjectSizesMatchError.default_message}"
    )


_CANCELLED_TYPES = (asyncio.CancelledError, concurrent.futures.CancelledError)


def _causes(err: BaseException):
    """Yield the error and everything it wraps."""
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, OperationError):
            current = current.err
        else:
            current = current.__cause__


def is_cancelation(err: BaseException | None) -> bool:
    """Report whether the given error is, or wraps, a cancellation."""
    if err is None:
        return False
    for cause in _causes(err):
        if isinstance(cause, _CANCELLED_TYPES):
            return True
        nested = getattr(cause, "exceptions", None)
        if nested and any(is_cancelation(inner) for inner in nested):
            return True
    return False


def is_warning(err: BaseException | None) -> bool:
    """Report whether the given error is one of the warning conditions."""
    return isinstance(
        err,
        (
            ObjectExistsError,
            ObjectIsNewerError,
            ObjectSizesMatchError,
            ObjectIsNewerAndSizesMatchError,
        ),
    )