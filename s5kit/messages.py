"""Structured log messages with plain-text and JSON representations."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


def _to_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _version_id(url: Any) -> str:
    if url is None:
        return ""
    return getattr(url, "version_id", "") or ""


class Message(ABC):
    """A log message that can be printed as text or as a JSON line."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the plain-text representation."""

    @abstractmethod
    def json(self) -> str:
        """Return the JSON representation."""


@dataclass
class InfoMessage(Message):
    """Message describing a successful operation."""

    operation: str
    source: Any = None
    destination: Any = None
    obj: Message | None = None

    def __str__(self) -> str:
        if self.source is not None and self.destination is not None:
            return f"{self.operation} {self.source} {self.destination}"
        version_id = _version_id(self.source)
        if self.source is not None and version_id:
            return f"{self.operation} {str(self.source):<50} {version_id}"
        if self.destination is not None:
            return f"{self.operation} {self.destination}"
        source = self.source if self.source is not None else "<nil>"
        return f"{self.operation} {source}"

    def json(self) -> str:
        payload: dict[str, Any] = {"operation": self.operation, "success": True}
        if self.source is not None:
            payload["source"] = str(self.source)
        if self.destination is not None:
            payload["destination"] = str(self.destination)
        if self.obj is not None:
            payload["object"] = json.loads(self.obj.json())
        if self.destination is None:
            version_id = _version_id(self.source)
            if version_id:
                payload["version_id"] = version_id
        return _to_json(payload)


@dataclass
class ErrorMessage(Message):
    """Message describing a failed operation."""

    err: str
    operation: str = ""
    command: str = ""

    def __str__(self) -> str:
        if not self.command:
            return str(self.err)
        return f"{_quote(self.command)}: {self.err}"

    def json(self) -> str:
        payload: dict[str, Any] = {}
        if self.operation:
            payload["operation"] = self.operation
        if self.command:
            payload["command"] = self.command
        payload["error"] = self.err
        return _to_json(payload)


@dataclass
class DebugMessage(Message):
    """Message carrying debugging detail about a job."""

    err: str
    operation: str = ""
    command: str = ""

    def __str__(self) -> str:
        if not self.command:
            return self.err
        return f"{_quote(self.command)}: {self.err}"

    def json(self) -> str:
        payload: dict[str, Any] = {}
        if self.operation:
            payload["operation"] = self.operation
        if self.command:
            payload["job"] = self.command
        payload["error"] = self.err
        return _to_json(payload)


@dataclass
class TraceMessage(Message):
    """Free-form trace output."""

    message: str

    def __str__(self) -> str:
        return self.message

    def json(self) -> str:
        return _to_json({"message": self.message})