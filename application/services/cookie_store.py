# application/services/cookie_store.py
from __future__ import annotations

from typing import Dict, List

from application.ports.cookie_jar import CookieJarPort
from application.ports.logger import LoggerPort


class CookieStore:
    """
    Walk-scoped cookie state: one instance per walk, never shared.

    Malformed Set-Cookie directives are dropped instead of aborting the walk.
    """

    def __init__(self, jar: CookieJarPort, logger: LoggerPort):
        self._jar = jar
        self._logger = logger

    def cookie_string_for(self, url: str) -> str:
        return self._jar.get_cookie_string(url)

    def absorb(self, set_cookie_line: str, url: str) -> None:
        if not set_cookie_line or not set_cookie_line.strip():
            return
        try:
            self._jar.set_cookie(set_cookie_line, url)
        except Exception as e:
            self._logger.debug("cookie.ignored", url=url, error=str(e))

    def absorb_all(self, set_cookie_lines: List[str], url: str) -> None:
        for line in set_cookie_lines:
            self.absorb(line, url)

    def snapshot(self) -> List[Dict[str, object]]:
        return self._jar.snapshot()
