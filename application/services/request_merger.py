# application/services/request_merger.py
from __future__ import annotations

from dataclasses import fields
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from application.version import __version__
from domain.request import EffectiveRequest, FormValue, StepRequest, StringPairs
from domain.walk import StepConfig, WalkConfig

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_default_headers(user_agent: Optional[str] = None) -> StringPairs:
    return {
        "accept": "*/*",
        "accept-encoding": "gzip, deflate",
        "connection": "close",
        "user-agent": user_agent or f"webwalk/{__version__}",
    }


def merge_headers(*sources: Optional[Mapping[str, str]]) -> StringPairs:
    """
    Flatten header sources into one mapping with lower-case keys.
    Later sources win on (case-insensitive) collisions.
    """
    merged: StringPairs = {}
    for source in sources:
        for key, value in (source or {}).items():
            merged[key.lower()] = value
    return merged


def merge_cookie_overrides(*sources: Optional[Mapping[str, str]]) -> StringPairs:
    merged: StringPairs = {}
    for source in sources:
        merged.update(source or {})
    return merged


def build_cookie_header(site_cookies: str, overrides: Mapping[str, str]) -> str:
    """
    Jar cookies first, then the mandatory overrides, joined with ';'.

    Overrides are appended rather than replacing same-named jar cookies;
    which duplicate a server honours is up to the server.
    """
    override = ";".join(f"{name}={value}" for name, value in overrides.items())
    return ";".join(part for part in (site_cookies, override) if part)


def inject_cookie_header(headers: StringPairs, cookie_header: str) -> StringPairs:
    merged = ";".join(v.strip() for v in (headers.get("cookie"), cookie_header) if v)
    if merged:
        return {**headers, "cookie": merged}
    return headers


def _expand(form_data: Mapping[str, FormValue]) -> List[Tuple[str, str]]:
    # ("date", ["a", "b"]) => ("date", "a"), ("date", "b")
    pairs: List[Tuple[str, str]] = []
    for key, value in form_data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, "" if item is None else str(item)) for item in value)
        else:
            pairs.append((key, "" if value is None else str(value)))
    return pairs


def encode_form_data(form_data: Optional[Mapping[str, FormValue]]) -> Optional[str]:
    """
    application/x-www-form-urlencoded body, or None when there is nothing to send.
    """
    if not form_data:
        return None
    return "&".join(
        quote(key, safe=_URI_COMPONENT_SAFE) + "=" + quote(value, safe=_URI_COMPONENT_SAFE)
        for key, value in _expand(form_data)
    )


def overlay_requests(*requests: Optional[StepRequest]) -> StepRequest:
    """Field-wise overlay; a later non-None field replaces an earlier one."""
    values: Dict[str, object] = {}
    for req in requests:
        if req is None:
            continue
        for f in fields(StepRequest):
            v = getattr(req, f.name)
            if v is not None:
                values[f.name] = v
    return StepRequest(**values)


def compose_request(
    config: WalkConfig,
    step: StepConfig,
    prepared: StepRequest,
    site_cookies: str,
    default_headers: Optional[StringPairs] = None,
) -> EffectiveRequest:
    template = step.request or StepRequest()
    merged = overlay_requests(template, prepared)

    headers = merge_headers(
        default_headers if default_headers is not None else build_default_headers(),
        config.headers,
        template.headers,
        prepared.headers,
    )
    cookies = merge_cookie_overrides(config.cookies, template.cookies, prepared.cookies)
    headers = inject_cookie_header(headers, build_cookie_header(site_cookies, cookies))

    form_body = encode_form_data({**(template.form_data or {}), **(prepared.form_data or {})})

    body = merged.body
    if not body and form_body:
        body = form_body
        if not headers.get("content-type"):
            headers = {**headers, "content-type": FORM_CONTENT_TYPE}

    method = merged.method or ("POST" if body else "GET")

    return EffectiveRequest(
        method=method.upper(),
        headers=headers,
        body=body,
        timeout_sec=merged.timeout_sec,
        allow_redirects=True if merged.allow_redirects is None else merged.allow_redirects,
    )
