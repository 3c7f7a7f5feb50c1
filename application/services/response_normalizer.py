# application/services/response_normalizer.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from application.ports.http_client import FetchResponse
from domain.response import RawCookie, StepResponse

CookieParser = Callable[[str], Optional[RawCookie]]


def transform_headers(response: FetchResponse) -> Dict[str, str]:
    """Lower-case header map without set-cookie; repeats are comma-joined."""
    collected: Dict[str, List[str]] = {}
    for key, value in response.headers:
        lower = key.lower()
        if lower == "set-cookie":
            continue
        collected.setdefault(lower, []).append(value)
    return {k: ", ".join(v) for k, v in collected.items()}


def extract_cookies(set_cookie_lines: List[str], parse_cookie: CookieParser) -> List[RawCookie]:
    parsed: List[RawCookie] = []
    for line in set_cookie_lines:
        cookie = parse_cookie(line)
        if cookie is not None:
            parsed.append(cookie)
    return parsed


def normalize_response(response: FetchResponse, parse_cookie: CookieParser) -> StepResponse:
    raw_cookies = extract_cookies(response.get_all("set-cookie"), parse_cookie)
    return StepResponse(
        status=response.status,
        url=response.url,
        headers=transform_headers(response),
        # last occurrence of a name wins
        cookies={c.name: c.value for c in raw_cookies},
        raw_cookies=tuple(raw_cookies),
        text=response.text,
    )
