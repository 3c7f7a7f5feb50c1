# application/trace_enrichers/core.py
from __future__ import annotations

from application.http_trace import HttpTrace
from application.http_trace_enricher import HttpTraceEnricher
from application.services.execution_deps import ExecutionDeps
from application.services.redactor import cookie_names, mask_dict, mask_form_body


class HttpCoreTraceLogger(HttpTraceEnricher):
    def enrich_and_log(self, trace: HttpTrace, deps: ExecutionDeps) -> None:
        req = trace.request
        resp = trace.response

        deps.logger.info(
            "http.request",
            step_id=trace.step_id,
            method=req.method,
            url=trace.url,
            allow_redirects=req.allow_redirects,
            cookie_names=cookie_names(req.headers.get("cookie")),
        )

        deps.logger.info(
            "http.response",
            step_id=trace.step_id,
            status=resp.status,
            final_url=resp.url,
            content_type=resp.headers.get("content-type"),
            body_len=len(resp.text),
            set_cookie=sorted(resp.cookies.keys()),
            redirects=[{"status": h.status, "url": h.url, "location": h.location} for h in trace.history],
            elapsed_ms=trace.elapsed_ms,
        )

        deps.logger.debug(
            "http.request_detail",
            step_id=trace.step_id,
            headers=mask_dict(req.headers),
            body=mask_form_body(req.body),
        )

        deps.logger.debug(
            "http.response_detail",
            step_id=trace.step_id,
            headers=mask_dict(resp.headers),
            text_head=resp.text[:200],
        )
