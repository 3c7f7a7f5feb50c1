# application/executor/step_executor.py
from __future__ import annotations

import inspect
import time
from dataclasses import replace
from typing import Any, Mapping, Optional

from application.http_trace import CookieSnapshot, HttpTrace
from application.http_trace_emitter import HttpTraceEmitter
from application.services.cookie_store import CookieStore
from application.services.execution_deps import ExecutionDeps
from application.services.request_merger import compose_request
from application.services.response_normalizer import normalize_response
from application.services.url_resolver import BaseUrlResolver
from domain.request import StepRequest
from domain.response import StepResponse
from domain.run import WalkContext
from domain.walk import History, StepConfig, WalkConfig


def _no_overrides(last: Optional[StepResponse], history: History) -> StepRequest:
    return StepRequest()


def _raw_text(response: StepResponse, history: History) -> str:
    return response.text


async def _call_hook(hook, *args: Any) -> Any:
    # hooks may be plain functions or coroutines
    result = hook(*args)
    if inspect.isawaitable(result):
        return await result
    return result


def _as_step_request(value: Any) -> StepRequest:
    if value is None:
        return StepRequest()
    if isinstance(value, StepRequest):
        return value
    if isinstance(value, Mapping):
        return StepRequest.from_dict(value)
    raise TypeError(f"prepare hook must return StepRequest, dict or None, got: {type(value).__name__}")


class StepExecutor:
    def __init__(self, trace_emitter: Optional[HttpTraceEmitter] = None):
        self._trace = trace_emitter if trace_emitter is not None else HttpTraceEmitter.default()

    async def execute(
        self,
        index: int,
        step: StepConfig,
        config: WalkConfig,
        ctx: WalkContext,
        cookies: CookieStore,
        deps: ExecutionDeps,
    ) -> StepResponse:
        """
        Run one step and commit it to ctx and cookies.
        Any exception (hook or transport) propagates after being logged.
        """
        step_id = step.id or f"step-{index + 1}"
        deps.logger.info("step.start", step_id=step_id, step_index=index)
        t0 = time.perf_counter()

        try:
            response = await self._run(index, step_id, step, config, ctx, cookies, deps)
        except Exception as e:
            deps.logger.error(
                "step.failed",
                step_id=step_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        deps.logger.info(
            "step.end",
            step_id=step_id,
            status=response.status,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return response

    async def _run(
        self,
        index: int,
        step_id: str,
        step: StepConfig,
        config: WalkConfig,
        ctx: WalkContext,
        cookies: CookieStore,
        deps: ExecutionDeps,
    ) -> StepResponse:
        history = ctx.snapshot()

        prepared = _as_step_request(await _call_hook(step.prepare or _no_overrides, ctx.last, history))

        url = BaseUrlResolver(config.base_url).resolve_url(prepared.url or step.url)

        site_cookies = cookies.cookie_string_for(url)
        request = compose_request(config, step, prepared, site_cookies, deps.default_headers)

        cookies_before = CookieSnapshot(items=cookies.snapshot())
        t0 = time.perf_counter()
        fetched = await deps.http_client.fetch(url, request)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        normalized = normalize_response(fetched, deps.parse_cookie)
        output = await _call_hook(step.process or _raw_text, normalized, history)
        response = replace(normalized, output=output)

        ctx.commit(response)
        # redirect hops first, each scoped to its own URL, then the final response
        for hop in fetched.history:
            cookies.absorb_all(hop.set_cookies, hop.url)
        cookies.absorb_all(fetched.get_all("set-cookie"), fetched.url)

        self._trace.emit(
            HttpTrace(
                walk_id=ctx.walk_id,
                step_id=step_id,
                step_index=index,
                url=url,
                request=request,
                response=response,
                history=list(fetched.history),
                cookies_before=cookies_before,
                cookies_after=CookieSnapshot(items=cookies.snapshot()),
                elapsed_ms=elapsed_ms,
            ),
            deps,
        )
        return response
