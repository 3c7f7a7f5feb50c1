from __future__ import annotations

import pytest

from application.services.execution_deps import ExecutionDeps
from infrastructure.cookies.requests_cookie_jar import RequestsCookieJarAdapter
from infrastructure.cookies.set_cookie_parser import parse_set_cookie
from tests.mock_http_client import MockFetchClient, MockLogger


@pytest.fixture
def logger() -> MockLogger:
    return MockLogger()


@pytest.fixture
def make_deps(logger):
    def _make(client=None, **overrides) -> ExecutionDeps:
        kwargs = dict(
            http_client=client if client is not None else MockFetchClient(),
            cookie_jar_factory=RequestsCookieJarAdapter,
            parse_cookie=parse_set_cookie,
            logger=logger,
        )
        kwargs.update(overrides)
        return ExecutionDeps(**kwargs)

    return _make
