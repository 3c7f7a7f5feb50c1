# application/ports/logger.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """
    Structured event sink for walks.

    Events are named "area.action" (walk.start, step.failed, http.response,
    cookie.ignored, trace.failed) and carry keyword fields. The walker binds
    walk_id once, so every event of one walk can be grouped.
    """

    @abstractmethod
    def debug(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def info(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def error(self, event: str, **fields: Any) -> None:
        ...

    @abstractmethod
    def bind(self, **fields: Any) -> "LoggerPort":
        """Logger sharing this sink that adds `fields` to each event (walk_id, step_id)."""
        ...
