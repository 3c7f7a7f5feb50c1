# application/ports/requests_client.py
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Tuple
from urllib.parse import urljoin

import requests
from requests.cookies import RequestsCookieJar, get_cookie_header
from requests.utils import requote_uri

from application.ports.http_client import FetchClientPort, FetchResponse, HttpHistoryItem
from domain.request import EffectiveRequest

_KEEP_BODY_STATUSES = (307, 308)
_BODY_HEADERS = ("content-length", "content-type", "transfer-encoding")


def _set_cookie_lines(resp: requests.Response) -> List[str]:
    # requests folds repeated headers into one comma-joined value;
    # urllib3 still has every Set-Cookie line separately.
    raw_headers = getattr(resp.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return list(raw_headers.getlist("Set-Cookie"))
    line = resp.headers.get("Set-Cookie")
    return [line] if line else []


def _header_pairs(resp: requests.Response) -> List[Tuple[str, str]]:
    pairs = [(k, v) for k, v in resp.headers.items() if k.lower() != "set-cookie"]
    pairs.extend(("Set-Cookie", line) for line in _set_cookie_lines(resp))
    return pairs


def _pop_header(headers: Dict[str, str], name: str) -> Optional[str]:
    value = None
    for key in [k for k in headers if k.lower() == name]:
        value = headers.pop(key)
    return value


def _cookie_pairs(header: Optional[str]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for part in (header or "").split(";"):
        part = part.strip()
        if part:
            pairs.append((part.partition("=")[0].strip(), part))
    return pairs


def _cookie_header(walk_cookie: Optional[str], hop_jar: RequestsCookieJar, url: str) -> Optional[str]:
    """
    Cookie header for one hop: the walk's cookies, with names re-set by an
    earlier hop of this exchange replaced by the hop's value.
    """
    hop_pairs = _cookie_pairs(get_cookie_header(hop_jar, requests.Request("GET", url)))
    hop_names = {name for name, _ in hop_pairs}
    kept = [part for name, part in _cookie_pairs(walk_cookie) if name not in hop_names]
    parts = kept + [part for _, part in hop_pairs]
    return ";".join(parts) if parts else None


def _redirect_method(status: int, method: str) -> str:
    # same rewrite rules as requests' Session.rebuild_method
    if status in (302, 303) and method != "HEAD":
        return "GET"
    if status == 301 and method == "POST":
        return "GET"
    return method


def _redirect_url(current_url: str, location: str) -> str:
    if location.startswith("//"):
        scheme = current_url.split(":", 1)[0]
        return f"{scheme}:{location}"
    return urljoin(current_url, requote_uri(location))


class RequestsFetchClient(FetchClientPort):
    """
    Transport backed by requests.

    Each exchange uses its own Session: the walk's cookie jar is the only
    place cookies live between steps. Redirects are followed here rather
    than by requests, so the walk's Cookie header is re-sent on every hop
    (requests rebuilds it from the session jar, which never holds them).
    Cookies set by a hop reach the later hops of the same exchange.
    """

    def __init__(self, timeout_sec: Optional[float] = 20):
        self._timeout = timeout_sec

    async def fetch(self, url: str, request: EffectiveRequest) -> FetchResponse:
        return await asyncio.to_thread(self._fetch_sync, url, request)

    def _fetch_sync(self, url: str, request: EffectiveRequest) -> FetchResponse:
        timeout = request.timeout_sec if request.timeout_sec is not None else self._timeout
        method = request.method.upper()
        headers = dict(request.headers)
        walk_cookie = _pop_header(headers, "cookie")
        body = request.body.encode("utf-8") if request.body is not None else None
        history_items: List[HttpHistoryItem] = []

        with requests.Session() as session:
            while True:
                hop_headers = dict(headers)
                cookie = _cookie_header(walk_cookie, session.cookies, url)
                if cookie:
                    hop_headers["cookie"] = cookie

                resp = session.request(
                    method=method,
                    url=url,
                    headers=hop_headers,
                    data=body,
                    timeout=timeout,
                    allow_redirects=False,
                )
                if not (request.allow_redirects and resp.is_redirect):
                    break
                if len(history_items) >= session.max_redirects:
                    raise requests.TooManyRedirects(
                        f"Exceeded {session.max_redirects} redirects.", response=resp
                    )

                location = session.get_redirect_target(resp)
                history_items.append(
                    HttpHistoryItem(
                        status=resp.status_code,
                        url=str(resp.url),
                        location=location,
                        set_cookies=_set_cookie_lines(resp),
                    )
                )

                next_url = _redirect_url(str(resp.url), location)
                if session.should_strip_auth(url, next_url):
                    walk_cookie = None
                    _pop_header(headers, "authorization")
                method = _redirect_method(resp.status_code, method)
                if resp.status_code not in _KEEP_BODY_STATUSES:
                    body = None
                    for name in _BODY_HEADERS:
                        _pop_header(headers, name)
                url = next_url

        return FetchResponse(
            status=resp.status_code,
            url=str(resp.url),
            headers=_header_pairs(resp),
            text=resp.text,
            history=history_items,
        )
