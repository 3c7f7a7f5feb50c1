# application/http_trace.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from application.ports.http_client import HttpHistoryItem
from domain.request import EffectiveRequest
from domain.response import StepResponse


@dataclass(frozen=True)
class CookieSnapshot:
    items: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class HttpTrace:
    walk_id: str
    step_id: str
    step_index: int
    url: str
    request: EffectiveRequest
    response: StepResponse
    history: List[HttpHistoryItem] = field(default_factory=list)
    cookies_before: CookieSnapshot = field(default_factory=CookieSnapshot)
    cookies_after: CookieSnapshot = field(default_factory=CookieSnapshot)
    elapsed_ms: int = 0
