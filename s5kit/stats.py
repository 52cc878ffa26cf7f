"""Collection and reporting of per-operation success and error counts."""

from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

_TAB_WIDTH = 8
_PADDING = 1

_lock = threading.Lock()
_enabled = False
_total: dict[str, int] = {}
_success: dict[str, int] = {}


@dataclass
class Stat:
    """Counts for one operation."""

    operation: str
    success: int = 0
    error: int = 0

    @property
    def total(self) -> int:
        return self.success + self.error

    def json(self) -> str:
        return json.dumps(
            {"operation": self.operation, "success": self.success, "error": self.error},
            separators=(",", ":"),
            ensure_ascii=False,
        )


def _tab_layout(rows: list[list[str]]) -> list[str]:
    """Lay out tab-terminated cells in columns padded with tabs."""
    if not rows:
        return []
    columns = len(rows[0])
    widths = [max(len(row[i]) for row in rows) + _PADDING for i in range(columns)]
    lines = []
    for row in rows:
        parts = []
        for cell, width in zip(row, widths):
            cell_width = -(-width // _TAB_WIDTH) * _TAB_WIDTH
            tabs = -(-(cell_width - len(cell)) // _TAB_WIDTH)
            parts.append(cell + "\t" * tabs)
        lines.append("".join(parts))
    return lines


class Stats(list):
    """A list of Stat entries that prints as a table or as JSON lines."""

    def __str__(self) -> str:
        rows = [["Operation", "Total", "Error", "Success"]]
        rows.extend(
            [stat.operation, str(stat.total), str(stat.error), str(stat.success)]
            for stat in self
        )
        return "\n" + "".join(line + "\n" for line in _tab_layout(rows))

    def json(self) -> str:
        """Return one JSON object per line."""
        return "".join(stat.json() + "\n" for stat in self)


def init_stat() -> None:
    """Enable statistics collection and clear previous counts."""
    global _enabled
    with _lock:
        _enabled = True
        _total.clear()
        _success.clear()


def _record(operation: str, succeeded: bool) -> None:
    with _lock:
        if not _enabled:
            return
        if succeeded:
            _success[operation] = _success.get(operation, 0) + 1
        _total[operation] = _total.get(operation, 0) + 1


@contextmanager
def collect(operation: str) -> Iterator[None]:
    """Count the enclosed block as one run of operation; an exception counts as an error."""
    try:
        yield
    except BaseException:
        _record(operation, False)
        raise
    _record(operation, True)


def statistics() -> Stats:
    """Return the statistics collected so far."""
    with _lock:
        if not _enabled:
            return Stats()
        return Stats(
            Stat(
                operation=op,
                success=_success.get(op, 0),
                error=total - _success.get(op, 0),
            )
            for op, total in _total.items()
        )