# application/trace_enrichers/html_signals.py
from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup

from application.http_trace import HttpTrace
from application.http_trace_enricher import HttpTraceEnricher
from application.services.execution_deps import ExecutionDeps


def _get_title(soup: BeautifulSoup) -> Optional[str]:
    return soup.title.get_text(strip=True) if soup.title else None


def _get_first_form_action(soup: BeautifulSoup) -> Optional[str]:
    form = soup.find("form")
    if not form:
        return None
    action = form.get("action")
    return str(action) if action is not None else None


def _hidden_input_names(soup: BeautifulSoup) -> list[str]:
    names = []
    for x in soup.find_all("input", {"type": "hidden"}):
        name = x.get("name")
        if name:
            names.append(str(name))
    return names


class HtmlSignalLogger(HttpTraceEnricher):
    """
    Lightweight page signals for HTML responses.

    No JavaScript runs during a walk, so auto-submitting forms and meta
    refreshes are flagged: they usually mean a step is missing.
    """

    def enrich_and_log(self, trace: HttpTrace, deps: ExecutionDeps) -> None:
        content_type = trace.response.headers.get("content-type", "")
        if "html" not in content_type.lower():
            return

        html = trace.response.text or ""
        auto_submit = bool(re.search(r"document\.forms?\[0\]\.submit\(\)", html, re.I))
        meta_refresh = bool(re.search(r"<meta[^>]+http-equiv=[\"']refresh", html, re.I))

        soup = BeautifulSoup(html, "html.parser")

        deps.logger.info(
            "http.html_signals",
            step_id=trace.step_id,
            title=_get_title(soup),
            form_action=_get_first_form_action(soup),
            hidden_inputs=_hidden_input_names(soup),
            auto_submit=auto_submit,
            meta_refresh=meta_refresh,
        )
