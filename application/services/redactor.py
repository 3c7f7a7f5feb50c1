# application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

SENSITIVE_KEYS = {
    "password",
    "passwd",
    "pass",
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
}

MASK = "********"


def mask_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_KEYS and value is not None:
        return MASK
    return value


def mask_dict(d: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return {k: mask_value(k, v) for k, v in (d or {}).items()}


def mask_form_body(body: Optional[str]) -> Optional[str]:
    """Mask sensitive values inside an url-encoded body, keeping the keys."""
    if not body:
        return body
    parts: List[str] = []
    for part in body.split("&"):
        key, sep, value = part.partition("=")
        parts.append(f"{key}{sep}{MASK}" if sep and key.lower() in SENSITIVE_KEYS else part)
    return "&".join(parts)


def cookie_names(cookie_header: Optional[str]) -> List[str]:
    if not cookie_header:
        return []
    names = []
    for part in cookie_header.split(";"):
        name = part.split("=", 1)[0].strip()
        if name:
            names.append(name)
    return names
