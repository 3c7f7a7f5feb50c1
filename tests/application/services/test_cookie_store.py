# tests/application/services/test_cookie_store.py
from typing import Dict, List

from application.ports.cookie_jar import CookieJarPort
from application.services.cookie_store import CookieStore
from infrastructure.cookies.requests_cookie_jar import RequestsCookieJarAdapter
from tests.mock_http_client import MockLogger


class ExplodingJar(CookieJarPort):
    def __init__(self) -> None:
        self.lines: List[str] = []

    def get_cookie_string(self, url: str) -> str:
        return ""

    def set_cookie(self, raw_line: str, url: str) -> None:
        if "bad" in raw_line:
            raise ValueError("unparseable cookie")
        self.lines.append(raw_line)

    def snapshot(self) -> List[Dict[str, object]]:
        return [{"name": line.split("=")[0]} for line in self.lines]


def test_absorb_then_query_same_site():
    store = CookieStore(RequestsCookieJarAdapter(), MockLogger())

    store.absorb("session=abc; Path=/", "https://example.com/login")

    assert store.cookie_string_for("https://example.com/account") == "session=abc"


def test_malformed_directive_is_ignored_and_logged():
    logger = MockLogger()
    jar = ExplodingJar()
    store = CookieStore(jar, logger)

    store.absorb_all(["bad cookie", "good=1"], "https://example.com/")

    assert jar.lines == ["good=1"]
    assert logger.events() == ["cookie.ignored"]


def test_blank_lines_are_skipped():
    jar = ExplodingJar()
    store = CookieStore(jar, MockLogger())

    store.absorb("  ", "https://example.com/")

    assert jar.lines == []
    assert store.snapshot() == []
