"""Route AWS API Gateway proxy events through a Router."""

import base64
import json
import logging
import sys
from typing import Any, Callable, Dict, Optional

from aws_lambda_router import StatusCode
from aws_lambda_router.errors import InvalidActionResult
from aws_lambda_router.gateway import build_request
from aws_lambda_router.placeholders import PlaceholderTable
from aws_lambda_router.router import Router
from aws_lambda_router.routing import Route
from aws_lambda_router.types import Response


def _fold_result(route: Route, response: Response, result: Any) -> None:
    """Put an action result into the response."""
    if result is None or isinstance(result, Response):
        return
    if isinstance(result, (str, bytes)):
        response.append_body(result)
        return
    if isinstance(result, (bool, int, float)):
        response.append_body(str(result))
        return
    if isinstance(result, (dict, list, tuple)):
        response.set_json(result)
        return
    part = f"named route '{route.name}'" if route.name else "unnamed route"
    raise InvalidActionResult(
        f"Invalid action return type '{type(result).__name__}', on {part}"
    )


class API:
    """Lambda handler serving the routes registered by a callback.

    A fresh Router is built for every event and given to ``register``.
    Routes run with the router as construct argument: callables are called
    with ``(params, router)`` and action classes are built with
    ``Cls(router)``::

        def routes(router):
            router.serve(None, lambda routes: routes.get("/", lambda params, r: "Yo"))

        handler = API(name="app", register=routes)
    """

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str,
        register: Callable[[Router], Any],
        debug: bool = False,
        https: bool = True,
        configure_logs: bool = True,
        auto_options: bool = False,
        auto_methods: bool = False,
        placeholders: Optional[PlaceholderTable] = None,
    ) -> None:
        """Initialize API object."""
        self.name: str = name
        self.register = register
        self.debug: bool = debug
        self.https: bool = https
        self.auto_options: bool = auto_options
        self.auto_methods: bool = auto_methods
        self.placeholders = placeholders
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()

    def _configure_logging(self) -> None:
        if self._already_configured(self.log):
            return

        handler = logging.StreamHandler(sys.stdout)
        # Timestamp is handled by lambda itself so the
        # default FORMAT_STRING doesn't need to include it.
        formatter = logging.Formatter(self.FORMAT_STRING)
        handler.setFormatter(formatter)
        self.log.propagate = False
        if self.debug:
            level = logging.DEBUG
        else:
            level = logging.ERROR
        self.log.setLevel(level)
        self.log.addHandler(handler)

    def _already_configured(self, log) -> bool:
        if not log.handlers:
            return False

        for handler in log.handlers:
            if isinstance(handler, logging.StreamHandler):
                if handler.stream == sys.stdout:
                    return True

        return False

    def make_router(self, response: Response) -> Router:
        """Build the router of one request and register its routes."""
        router = Router(
            response,
            placeholders=self.placeholders,
            auto_options=self.auto_options,
            auto_methods=self.auto_methods,
        )
        self.register(router)
        return router

    def response(self, response: Response) -> Dict[str, Any]:
        """Return the API Gateway proxy response."""
        headers = dict(response.headers)
        headers["Content-Type"] = response.content_type

        body = response.body
        if response.request.method == "HEAD":
            body = ""

        message_data: Dict[str, Any] = {
            "headers": headers,
            "statusCode": int(response.status_code),
        }
        if isinstance(body, bytes):
            message_data["isBase64Encoded"] = True
            message_data["body"] = base64.b64encode(body).decode()
        else:
            message_data["body"] = body
        return message_data

    def _error(self, status_code: StatusCode, message: str) -> Dict[str, Any]:
        return {
            "headers": {"Content-Type": "application/json"},
            "statusCode": int(status_code),
            "body": json.dumps({"errorMessage": message}),
        }

    def __call__(self, event, context):
        """Match and run the route of an event."""
        self.log.debug(json.dumps(event, default=str))

        request = build_request(event, self.https)
        if request is None:
            return self._error(StatusCode.BAD_REQUEST, "Missing or invalid path")

        response = Response(request)
        router = self.make_router(response)
        route = router.match()
        self.log.debug(f"Matched route {route!r} for {request.method} {request.url}")

        try:
            _fold_result(route, response, route.run(router))
        except Exception as err:
            self.log.error(str(err))
            return self._error(StatusCode.INTERNAL_SERVER_ERROR, str(err))

        return self.response(response)
