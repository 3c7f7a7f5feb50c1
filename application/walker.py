# application/walker.py
from __future__ import annotations

import time
import uuid
from typing import Any, Optional

from application.executor.step_executor import StepExecutor
from application.services.cookie_store import CookieStore
from application.services.execution_deps import ExecutionDeps
from domain.run import WalkContext
from domain.walk import WalkConfig


class SessionWalker:
    """
    Drives every step of a walk in order.

    The cookie store and history are created per walk() call and dropped
    when it returns or raises; nothing is kept on the walker itself.
    """

    def __init__(self, deps: ExecutionDeps, executor: Optional[StepExecutor] = None):
        self._deps = deps
        self._executor = executor if executor is not None else StepExecutor()

    async def walk(self, config: Optional[WalkConfig]) -> Any:
        if config is None or not config.steps:
            return None

        ctx = WalkContext(walk_id=uuid.uuid4().hex)
        deps = self._deps.with_logger(self._deps.logger.bind(walk_id=ctx.walk_id))
        cookies = CookieStore(deps.cookie_jar_factory(), deps.logger)

        deps.logger.info("walk.start", steps=len(config.steps), base_url=config.base_url or None)
        t0 = time.perf_counter()

        for index, step in enumerate(config.steps):
            await self._executor.execute(index, step, config, ctx, cookies, deps)

        deps.logger.info(
            "walk.end",
            steps=len(ctx.history),
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return ctx.last.output


async def walk(config: Optional[WalkConfig], deps: Optional[ExecutionDeps] = None) -> Any:
    """
    Run a walk and return the last step's output (None for no steps).
    """
    if deps is None:
        from infrastructure.bootstrap import build_default_deps

        deps = build_default_deps()
    return await SessionWalker(deps).walk(config)
