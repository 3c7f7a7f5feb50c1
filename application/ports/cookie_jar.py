# application/ports/cookie_jar.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List


class CookieJarPort(ABC):
    @abstractmethod
    def get_cookie_string(self, url: str) -> str:
        """
        Serialized Cookie header value applicable to url ("" if none).
        """
        ...

    @abstractmethod
    def set_cookie(self, raw_line: str, url: str) -> None:
        ...

    @abstractmethod
    def snapshot(self) -> List[Dict[str, object]]:
        ...
