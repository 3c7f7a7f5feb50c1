# infrastructure/cookies/set_cookie_parser.py
from __future__ import annotations

from http.cookiejar import parse_ns_headers
from typing import Optional

from domain.response import RawCookie


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_set_cookie(raw_line: str) -> Optional[RawCookie]:
    """
    Parse one Set-Cookie line leniently.

    Returns None for lines without a usable name=value pair. Unknown
    attributes are ignored; an unparseable expires date becomes None.
    """
    if not raw_line or not raw_line.strip():
        return None

    parsed = parse_ns_headers([raw_line])
    if not parsed:
        return None

    pairs = parsed[0]
    name, value = pairs[0]
    if value is None:
        return None

    attrs = {}
    for key, val in pairs[1:]:
        attrs.setdefault(key.lower(), val)

    return RawCookie(
        name=name,
        value=value,
        expires=attrs.get("expires"),
        max_age=_to_int(attrs.get("max-age")),
        domain=attrs.get("domain") or None,
        path=attrs.get("path") or None,
        secure="secure" in attrs,
        http_only="httponly" in attrs,
    )
