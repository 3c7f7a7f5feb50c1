# infrastructure/logging/console_logger.py
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TextIO

from application.ports.logger import LoggerPort

_LEVELS = {"debug": 10, "info": 20, "error": 40}


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """One `event {json}` line per event, for machine-readable runs."""

    bound: Dict[str, Any] = field(default_factory=dict)
    level: str = "debug"
    stream: Optional[TextIO] = None

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(bound=merged, level=self.level, stream=self.stream)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        if _LEVELS[level] < _LEVELS.get(self.level.lower(), 10):
            return
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        payload.setdefault("level", level)
        print(
            f"{event} {json.dumps(payload, ensure_ascii=False, default=str)}",
            file=self.stream or sys.stdout,
        )
