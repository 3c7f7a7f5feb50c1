# application/http_trace_emitter.py
from __future__ import annotations

from typing import Iterable

from application.http_trace import HttpTrace
from application.http_trace_enricher import HttpTraceEnricher
from application.services.execution_deps import ExecutionDeps


class HttpTraceEmitter:
    def __init__(self, enrichers: Iterable[HttpTraceEnricher]):
        self._enrichers = list(enrichers)

    def emit(self, trace: HttpTrace, deps: ExecutionDeps) -> None:
        # runs after the step is committed; enricher errors are logged, not raised
        for e in self._enrichers:
            try:
                e.enrich_and_log(trace, deps)
            except Exception as ex:
                deps.logger.error(
                    "trace.failed",
                    step_id=trace.step_id,
                    enricher=type(e).__name__,
                    error_type=type(ex).__name__,
                    error=str(ex),
                )

    @classmethod
    def default(cls) -> "HttpTraceEmitter":
        from application.trace_enrichers.cookie_diff import CookieDiffLogger
        from application.trace_enrichers.core import HttpCoreTraceLogger
        from application.trace_enrichers.html_signals import HtmlSignalLogger

        return cls([HttpCoreTraceLogger(), CookieDiffLogger(), HtmlSignalLogger()])
