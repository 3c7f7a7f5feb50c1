# domain/request.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Union

StringPairs = Dict[str, str]
FormValue = Union[str, List[str]]


@dataclass(frozen=True)
class StepRequest:
    """
    Request template of a step, or the overrides returned by a prepare hook.

    cookies / form_data are construction-time conveniences only: they are
    folded into the cookie header and the body and never reach the transport.
    """
    url: Optional[str] = None
    method: Optional[str] = None
    headers: Optional[StringPairs] = None
    cookies: Optional[StringPairs] = None
    form_data: Optional[Dict[str, FormValue]] = None
    body: Optional[str] = None
    timeout_sec: Optional[float] = None
    allow_redirects: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "StepRequest":
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown request fields: {', '.join(unknown)}")
        return cls(**dict(data))


@dataclass(frozen=True)
class EffectiveRequest:
    method: str
    headers: StringPairs
    body: Optional[str] = None
    timeout_sec: Optional[float] = None
    allow_redirects: bool = True
