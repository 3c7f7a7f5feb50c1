# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from application.ports.cookie_jar import CookieJarPort
from application.ports.http_client import FetchClientPort
from application.ports.logger import LoggerPort
from application.services.response_normalizer import CookieParser
from domain.request import StringPairs


@dataclass(frozen=True)
class ExecutionDeps:
    """
    Collaborators of one walk. cookie_jar_factory is called once per walk,
    so concurrent walks never share a jar.
    """
    http_client: FetchClientPort
    cookie_jar_factory: Callable[[], CookieJarPort]
    parse_cookie: CookieParser
    logger: LoggerPort
    default_headers: Optional[StringPairs] = None

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
