"""aws-lambda-router: origin and path based HTTP routing for AWS Lambda."""

from enum import IntEnum
from http import HTTPStatus

__version__ = "1.0.0"


class StatusCode(IntEnum):
    """HTTP status codes used by the router."""

    OK = 200
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308
    BAD_REQUEST = 400
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    INTERNAL_SERVER_ERROR = 500

    @property
    def reason(self) -> str:
        """Return the reason phrase."""
        return HTTPStatus(self.value).phrase


from aws_lambda_router.collection import RouteCollection  # noqa: E402
from aws_lambda_router.placeholders import PlaceholderTable  # noqa: E402
from aws_lambda_router.router import Router  # noqa: E402
from aws_lambda_router.routing import Route  # noqa: E402

__all__ = [
    "PlaceholderTable",
    "Route",
    "RouteCollection",
    "Router",
    "StatusCode",
]
