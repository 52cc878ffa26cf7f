"""Strategies deciding whether a source object should be synced to a destination."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .errors import ObjectIsNewerAndSizesMatchError, ObjectSizesMatchError


class SyncStrategy(ABC):
    """Decides whether a source object should be copied over a destination object."""

    @abstractmethod
    def should_sync(self, src: Any, dst: Any) -> bool:
        """Return True if src should be synced, or raise a warning error explaining why not."""


class SizeOnlyStrategy(SyncStrategy):
    """Syncs when the sizes of the objects differ."""

    def should_sync(self, src: Any, dst: Any) -> bool:
        if src.size == dst.size:
            raise ObjectSizesMatchError()
        return True


class SizeAndModificationStrategy(SyncStrategy):
    """Syncs when the source is newer or the sizes differ.

    The source is the source of truth:
    a newer source is always synced; an older or same-age source is
    synced only when the sizes differ.
    """

    def should_sync(self, src: Any, dst: Any) -> bool:
        if src.mod_time > dst.mod_time:
            return True
        if src.size != dst.size:
            return True
        raise ObjectIsNewerAndSizesMatchError()


def new_strategy(size_only: bool) -> SyncStrategy:
    """Create the comparison strategy selected by the size-only flag."""
    return SizeOnlyStrategy() if size_only else SizeAndModificationStrategy()