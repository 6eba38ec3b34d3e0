from unittest.mock import Mock

import pytest

from aws_lambda_router.placeholders import PlaceholderTable
from aws_lambda_router.router import Router
from aws_lambda_router.types import Request, Response


def make_router(
    url: str = "https://domain.tld/", method: str = "GET", headers=None, **kwargs
) -> Router:
    """Return a router for a request."""
    request = Request(method=method, url=url, headers=headers or {})
    kwargs.setdefault("placeholders", PlaceholderTable())
    return Router(Response(request), **kwargs)


@pytest.fixture
def router():
    """Router for GET https://domain.tld/."""
    return make_router()


@pytest.fixture
def router_factory():
    """Build routers for arbitrary requests."""
    return make_router


@pytest.fixture
def funct():
    """Mock function for testing purposes."""
    return Mock(__name__="Mock", return_value="mocked")
