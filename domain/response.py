# domain/response.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RawCookie:
    name: str
    value: str
    expires: Optional[int] = None  # seconds since epoch
    max_age: Optional[int] = None
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: bool = False
    http_only: bool = False


@dataclass(frozen=True)
class StepResponse:
    """
    Normalized result of one step's HTTP exchange.

    headers never contains set-cookie; cookies are surfaced through
    cookies (last occurrence wins) and raw_cookies (every occurrence).
    """
    status: int
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)
    raw_cookies: Tuple[RawCookie, ...] = ()
    text: str = ""
    output: Any = None
