# infrastructure/cookies/requests_cookie_jar.py
from __future__ import annotations

from email.message import Message
from typing import Dict, List, Optional

import requests
from requests.cookies import MockRequest, MockResponse, RequestsCookieJar, get_cookie_header

from application.ports.cookie_jar import CookieJarPort


def _url_request(url: str) -> requests.PreparedRequest:
    return requests.Request("GET", url).prepare()


class RequestsCookieJarAdapter(CookieJarPort):
    """
    CookieJarPort over requests' RequestsCookieJar.

    Domain/path matching, secure and expiry handling are http.cookiejar's;
    requests' MockRequest/MockResponse shims feed it plain URLs and lines.
    """

    def __init__(self, jar: Optional[RequestsCookieJar] = None):
        self._jar = jar if jar is not None else RequestsCookieJar()

    def get_cookie_string(self, url: str) -> str:
        return get_cookie_header(self._jar, _url_request(url)) or ""

    def set_cookie(self, raw_line: str, url: str) -> None:
        headers = Message()
        headers["Set-Cookie"] = raw_line
        self._jar.extract_cookies(MockResponse(headers), MockRequest(_url_request(url)))

    def snapshot(self) -> List[Dict[str, object]]:
        out: List[Dict[str, object]] = []
        for c in self._jar:
            out.append(
                {
                    "name": c.name,
                    "value": c.value,
                    "domain": c.domain,
                    "path": c.path,
                    "secure": bool(getattr(c, "secure", False)),
                    "expires": getattr(c, "expires", None),
                }
            )
        return out
