"""Router: matches a request against route collections.

Collections are tried in the order they were served, the first one whose
origin matches the request origin wins. Inside it, routes of the request
method are tried in registration order and the first path match wins.
There is no specificity scoring.

When nothing matches, ``match()`` still returns a route: an automatic
``Allow`` route (OPTIONS or 405), the collection not found route or the
default not found route.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from aws_lambda_router import StatusCode
from aws_lambda_router.collection import RouteCollection
from aws_lambda_router.errors import RouteNotFound
from aws_lambda_router.placeholders import PlaceholderTable
from aws_lambda_router.placeholders import placeholders as default_placeholders
from aws_lambda_router.routing import Action, Route
from aws_lambda_router.templates import not_found_page
from aws_lambda_router.types import Response

logger = logging.getLogger(__name__)


class Router:
    """HTTP router bound to one request/response cycle.

    Usage::

        router = Router(response, auto_methods=True)
        router.serve("https://{subdomain}.example.com", lambda routes: (
            routes.get("/users/{int}", "app.users.Users::show/0", "users.show"),
        ))
        route = router.match()
        result = route.run()
    """

    def __init__(
        self,
        response: Response,
        placeholders: Optional[PlaceholderTable] = None,
        auto_options: bool = False,
        auto_methods: bool = False,
        default_route_action_method: str = "index",
        default_route_not_found: Optional[Action] = None,
    ) -> None:
        """Initialize router object."""
        self.response = response
        self.placeholders = (
            placeholders if placeholders is not None else default_placeholders
        )
        self.auto_options = auto_options
        self.auto_methods = auto_methods
        self.default_route_action_method = default_route_action_method
        self.default_route_not_found = default_route_not_found
        self.collections: List[RouteCollection] = []
        self._matched_route: Optional[Route] = None
        self._matched_collection: Optional[RouteCollection] = None
        self._matched_origin: Optional[str] = None
        self._matched_origin_params: List[str] = []
        self._matched_path: Optional[str] = None
        self._matched_path_params: List[str] = []

    @property
    def matched_route(self) -> Optional[Route]:
        """Return the route of the last match()."""
        return self._matched_route

    @property
    def matched_collection(self) -> Optional[RouteCollection]:
        """Return the collection whose origin matched, if any."""
        return self._matched_collection

    @property
    def matched_origin(self) -> Optional[str]:
        """Return the matched URL origin."""
        return self._matched_origin

    @property
    def matched_origin_params(self) -> List[str]:
        """Return the values captured by the origin placeholders."""
        return self._matched_origin_params

    @property
    def matched_path(self) -> Optional[str]:
        """Return the matched URL path."""
        return self._matched_path

    @property
    def matched_path_params(self) -> List[str]:
        """Return the values captured by the path placeholders."""
        return self._matched_path_params

    @property
    def matched_url(self) -> Optional[str]:
        """Return the matched origin and path, without query."""
        if not self._matched_origin:
            return None
        return f"{self._matched_origin}{self._matched_path or ''}"

    def add_placeholder(
        self,
        placeholder: Union[str, Mapping[str, str]],
        pattern: Optional[str] = None,
    ) -> "Router":
        """Add placeholders to the table used by this router."""
        self.placeholders.add(placeholder, pattern)
        return self

    def serve(
        self,
        origin: Optional[str],
        register: Callable[[RouteCollection], Any],
        name: Optional[str] = None,
    ) -> "Router":
        """Serve a collection of routes for an URL origin.

        ``origin`` is ``{scheme}://{hostname}[:{port}]`` and may contain
        placeholders; None serves the origin of the current request.
        """
        if origin is None:
            origin = self.response.request.origin
        collection = RouteCollection(self, origin, name)
        register(collection)
        self.collections.append(collection)
        logger.debug("Serving %d routes at %s", len(collection), collection.origin)
        return self

    @property
    def routes(self) -> Dict[str, List[Route]]:
        """Return all routes by HTTP method, not found routes excluded."""
        result: Dict[str, List[Route]] = {}
        for collection in self.collections:
            for method, routes in collection.routes.items():
                result.setdefault(method, []).extend(routes)
        return result

    def _iter_routes(self):
        for collection in self.collections:
            for routes in collection.routes.values():
                yield from routes

    def get_named_route(self, name: str) -> Route:
        """Return the route with the given name."""
        for route in self._iter_routes():
            if route.name == name:
                return route
        raise RouteNotFound(name)

    def has_named_route(self, name: str) -> bool:
        """Tell if a route with the given name exists."""
        return any(route.name == name for route in self._iter_routes())

    def _fullmatch(self, template: str, string: str) -> Optional[re.Match]:
        pattern = self.placeholders.resolve(template)
        try:
            return re.fullmatch(pattern, string)
        except re.error as err:
            # A broken template never matches
            logger.error("Invalid pattern %r from %r: %s", pattern, template, err)
            return None

    def match(self) -> Route:
        """Match the request against the served collections.

        Always returns a route, the not found route when nothing matches.
        """
        request = self.response.request
        method = "GET" if request.method == "HEAD" else request.method
        self._matched_route = None
        self._matched_collection = None
        self._matched_origin = request.origin
        self._matched_origin_params = []
        self._matched_path = request.path
        self._matched_path_params = []

        collection = self._match_collection(request.origin)
        if collection is None:
            logger.debug("No collection matches origin %s", request.origin)
            route = self._get_default_route_not_found()
        else:
            route = self._match_route(
                method, collection, request.path
            ) or self._get_alternative_route(method, collection)

        self._matched_route = route
        logger.debug(
            "%s %s%s matched %r", request.method, request.origin, request.path, route
        )
        return route

    def _match_collection(self, origin: str) -> Optional[RouteCollection]:
        for collection in self.collections:
            matches = self._fullmatch(collection.origin, origin)
            if matches:
                self._matched_origin = matches.group(0)
                self._matched_origin_params = list(matches.groups())
                self._matched_collection = collection
                return collection
        return None

    def _match_route(
        self, method: str, collection: RouteCollection, path: str
    ) -> Optional[Route]:
        for route in collection.routes.get(method, []):
            matches = self._fullmatch(route.path, path)
            if matches:
                self._matched_path_params = list(matches.groups())
                route.set_action_params(self._matched_path_params)
                return route
        return None

    def _get_alternative_route(
        self, method: str, collection: RouteCollection
    ) -> Route:
        route = None
        if method == "OPTIONS" and self.auto_options:
            route = self._get_route_with_allow_header(collection, StatusCode.OK)
        elif self.auto_methods:
            route = self._get_route_with_allow_header(
                collection, StatusCode.METHOD_NOT_ALLOWED
            )
        if route is None:
            route = (
                collection.get_route_not_found() or self._get_default_route_not_found()
            )
        return route

    def get_allowed_methods(self, collection: RouteCollection) -> List[str]:
        """Return the HTTP methods with a route matching the matched path."""
        path = self._matched_path or "/"
        allowed = set()
        for method, routes in collection.routes.items():
            if any(self._fullmatch(route.path, path) for route in routes):
                allowed.add(method)
        if allowed:
            if "GET" in allowed:
                allowed.add("HEAD")
            if self.auto_options:
                allowed.add("OPTIONS")
        return sorted(allowed)

    def _get_route_with_allow_header(
        self, collection: RouteCollection, code: int
    ) -> Optional[Route]:
        allowed = self.get_allowed_methods(collection)
        if not allowed:
            return None
        response = self.response

        def _allow(params: Dict[int, str], *args: Any) -> None:
            response.set_status(code)
            response.set_header("Allow", ", ".join(allowed))

        route = Route(
            self, self._matched_origin or "", self._matched_path or "/", _allow
        )
        route.name = f"auto-allow-{int(code)}"
        return route

    def _default_not_found(self, params: Dict[int, str], *args: Any) -> None:
        response = self.response
        response.set_status(StatusCode.NOT_FOUND)
        if response.request.is_json():
            response.set_json(
                {
                    "status": {
                        "code": int(StatusCode.NOT_FOUND),
                        "reason": StatusCode.NOT_FOUND.reason,
                    }
                }
            )
            return
        response.content_type = "text/html; charset=utf-8"
        response.set_body(not_found_page())

    def _get_default_route_not_found(self) -> Route:
        route = Route(
            self,
            self._matched_origin or "",
            self._matched_path or "/",
            self.default_route_not_found or self._default_not_found,
        )
        route.name = "not-found"
        return route

    def get_route_not_found(self) -> Route:
        """Return the not found route of the matched collection or the default.

        Must be called after match().
        """
        if self._matched_collection is not None:
            route = self._matched_collection.get_route_not_found()
            if route is not None:
                return route
        return self._get_default_route_not_found()
