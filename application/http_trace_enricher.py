# application/http_trace_enricher.py
from __future__ import annotations

from abc import ABC, abstractmethod

from application.http_trace import HttpTrace
from application.services.execution_deps import ExecutionDeps


class HttpTraceEnricher(ABC):
    """
    Turns the trace of one committed step (effective request, normalized
    response, redirect hops, jar before and after) into http.* log events.
    Raising here is reported as trace.failed and never fails the step.
    """

    @abstractmethod
    def enrich_and_log(self, trace: HttpTrace, deps: ExecutionDeps) -> None:
        ...
