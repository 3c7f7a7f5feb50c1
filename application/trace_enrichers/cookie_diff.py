# application/trace_enrichers/cookie_diff.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from application.http_trace import HttpTrace
from application.http_trace_enricher import HttpTraceEnricher
from application.services.execution_deps import ExecutionDeps

CookieKey = Tuple[str, str, str]


def cookie_index(items: List[Dict[str, object]]) -> Dict[CookieKey, object]:
    """(name, domain, path) -> value. Same-named cookies in other scopes stay distinct."""
    return {
        (str(c.get("name", "")), str(c.get("domain", "")), str(c.get("path", ""))): c.get("value")
        for c in items or []
    }


@dataclass(frozen=True)
class CookieDiff:
    added: List[str]
    removed: List[str]
    changed: List[str]

    @property
    def empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def diff_cookies(before: List[Dict[str, object]], after: List[Dict[str, object]]) -> CookieDiff:
    b = cookie_index(before)
    a = cookie_index(after)

    added = {k[0] for k in a.keys() - b.keys()}
    removed = {k[0] for k in b.keys() - a.keys()}
    # values are compared, never logged
    changed = {k[0] for k in a.keys() & b.keys() if a[k] != b[k]}

    return CookieDiff(added=sorted(added), removed=sorted(removed), changed=sorted(changed))


class CookieDiffLogger(HttpTraceEnricher):
    def enrich_and_log(self, trace: HttpTrace, deps: ExecutionDeps) -> None:
        d = diff_cookies(trace.cookies_before.items, trace.cookies_after.items)

        deps.logger.info(
            "http.cookie_diff",
            step_id=trace.step_id,
            added=d.added,
            removed=d.removed,
            changed=d.changed,
            jar_size=len(trace.cookies_after.items),
        )
