# application/ports/http_client.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from domain.request import EffectiveRequest


def _values(headers: List[Tuple[str, str]], name: str) -> List[str]:
    lower = name.lower()
    return [v for k, v in headers if k.lower() == lower]


@dataclass(frozen=True)
class HttpHistoryItem:
    status: int
    url: str
    location: Optional[str] = None
    set_cookies: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FetchResponse:
    """
    Raw transport response.

    headers keeps the wire pairs in order, so repeated headers
    (Set-Cookie in particular) are not folded together.
    """
    status: int
    url: str
    headers: List[Tuple[str, str]] = field(default_factory=list)
    text: str = ""
    history: List[HttpHistoryItem] = field(default_factory=list)

    def get_all(self, name: str) -> List[str]:
        return _values(self.headers, name)

    def get(self, name: str) -> Optional[str]:
        values = self.get_all(name)
        return ", ".join(values) if values else None


class FetchClientPort(ABC):
    @abstractmethod
    async def fetch(self, url: str, request: EffectiveRequest) -> FetchResponse:
        """
        Perform one exchange, following redirects when request.allow_redirects.
        Non-2xx statuses are returned, not raised.
        """
        ...
