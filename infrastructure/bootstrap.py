# infrastructure/bootstrap.py
from __future__ import annotations

from typing import Optional

from application.ports.logger import LoggerPort
from application.ports.requests_client import RequestsFetchClient
from application.services.execution_deps import ExecutionDeps
from application.services.request_merger import build_default_headers
from infrastructure.cookies.requests_cookie_jar import RequestsCookieJarAdapter
from infrastructure.cookies.set_cookie_parser import parse_set_cookie
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.settings import WalkSettings


def build_default_deps(
    settings: Optional[WalkSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> ExecutionDeps:
    settings = settings if settings is not None else WalkSettings.from_env()
    return ExecutionDeps(
        http_client=RequestsFetchClient(timeout_sec=settings.timeout_sec),
        cookie_jar_factory=RequestsCookieJarAdapter,
        parse_cookie=parse_set_cookie,
        logger=logger if logger is not None else LoguruLogger(),
        default_headers=build_default_headers(settings.user_agent),
    )
