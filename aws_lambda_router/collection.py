"""Route collections: routes served under one URL origin."""

import copy
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Union,
)

from aws_lambda_router import StatusCode
from aws_lambda_router.errors import InvalidAction, InvalidMethod
from aws_lambda_router.routing import Action, Route

if TYPE_CHECKING:
    from aws_lambda_router.router import Router

logger = logging.getLogger(__name__)

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

# A route, or arbitrarily nested lists of routes
RouteNode = Union[Route, Sequence["RouteNode"]]

# A callable, a string action or a (class, method, spec) sequence
ActionLike = Union[Action, Sequence[Any]]


def _walk(routes: Iterable[RouteNode]) -> Iterator[Route]:
    for node in routes:
        if isinstance(node, Route):
            yield node
        else:
            yield from _walk(node)


def _merge_value(base: Any, override: Any) -> Any:
    if isinstance(base, dict) and isinstance(override, dict):
        return _merge_options(base, override)
    if isinstance(base, list) and isinstance(override, list):
        # Lists are replaced item by item, extra base items are kept
        merged = copy.deepcopy(base)
        for index, value in enumerate(override):
            if index < len(merged):
                merged[index] = _merge_value(merged[index], value)
            else:
                merged.append(copy.deepcopy(value))
        return merged
    return copy.deepcopy(override)


def _merge_options(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dicts recursively into a new dict, values of override win."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key in merged:
            merged[key] = _merge_value(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _class_path(cls: Union[str, type]) -> str:
    if isinstance(cls, str):
        return cls.strip(".")
    return f"{cls.__module__}.{cls.__qualname__}"


class RouteCollection:
    """Routes of one origin, keyed by HTTP method.

    Created by :meth:`Router.serve`; routes registered first are matched
    first.
    """

    def __init__(
        self, router: "Router", origin: str, name: Optional[str] = None
    ) -> None:
        """Initialize the collection."""
        self.router = router
        self.origin = origin.lstrip("/")
        self.name = name
        self.routes: Dict[str, List[Route]] = {}
        self.not_found_action: Optional[Action] = None

    def __len__(self) -> int:
        count = 1 if self.not_found_action is not None else 0
        return count + sum(len(routes) for routes in self.routes.values())

    def __repr__(self) -> str:
        return f"<RouteCollection {self.name!r} {self.origin}>"

    def _route_name(self, name: str) -> str:
        if self.name:
            return f"{self.name}.{name}"
        return name

    def _make_action(self, action: ActionLike) -> Action:
        if isinstance(action, str) or callable(action):
            return action
        if not 1 <= len(action) <= 3:
            raise InvalidAction(f"Invalid action sequence: {action!r}")
        cls, *rest = action
        method = rest[0] if rest else self.router.default_route_action_method
        spec = rest[1] if len(rest) > 1 else "*"
        return f"{_class_path(cls)}::{method}/{spec}"

    def _add_route(self, method: str, route: Route) -> None:
        method = method.upper()
        if method not in HTTP_METHODS:
            raise InvalidMethod(method)
        self.routes.setdefault(method, []).append(route)

    def add(
        self,
        methods: Sequence[str],
        path: str,
        action: ActionLike,
        name: Optional[str] = None,
    ) -> Route:
        """Register one route under every given HTTP method."""
        if isinstance(methods, str):
            methods = (methods,)
        for method in methods:
            if method.upper() not in HTTP_METHODS:
                raise InvalidMethod(method)
        route = Route(self.router, self.origin, path, self._make_action(action))
        if name:
            route.name = self._route_name(name)
        for method in methods:
            self._add_route(method, route)
        logger.debug("Added route %r for %s", route, ", ".join(methods))
        return route

    def get(self, path: str, action: ActionLike, name: Optional[str] = None) -> Route:
        """Register GET route."""
        return self.add(["GET"], path, action, name)

    def post(self, path: str, action: ActionLike, name: Optional[str] = None) -> Route:
        """Register POST route."""
        return self.add(["POST"], path, action, name)

    def put(self, path: str, action: ActionLike, name: Optional[str] = None) -> Route:
        """Register PUT route."""
        return self.add(["PUT"], path, action, name)

    def patch(self, path: str, action: ActionLike, name: Optional[str] = None) -> Route:
        """Register PATCH route."""
        return self.add(["PATCH"], path, action, name)

    def delete(
        self, path: str, action: ActionLike, name: Optional[str] = None
    ) -> Route:
        """Register DELETE route."""
        return self.add(["DELETE"], path, action, name)

    def options(
        self, path: str, action: ActionLike, name: Optional[str] = None
    ) -> Route:
        """Register OPTIONS route."""
        return self.add(["OPTIONS"], path, action, name)

    def redirect(self, path: str, location: str, code: Optional[int] = None) -> Route:
        """Register GET route redirecting to location."""
        router = self.router

        def _redirect(params: Dict[int, str], *args: Any) -> None:
            router.response.redirect(location, code)

        return self.add(["GET"], path, _redirect)

    def not_found(self, action: Action) -> None:
        """Set the action to run when no route of this collection matches."""
        self.not_found_action = action

    def get_route_not_found(self) -> Optional[Route]:
        """Build the not found route of this collection, setting status 404."""
        if self.not_found_action is None:
            return None
        router = self.router
        router.response.set_status(StatusCode.NOT_FOUND)
        route = Route(
            router,
            router.matched_origin or "",
            router.matched_path or "/",
            self.not_found_action,
        )
        route.name = self._route_name("collection-not-found")
        return route

    def group(
        self,
        base_path: str,
        routes: Sequence[RouteNode],
        options: Optional[Dict[str, Any]] = None,
    ) -> Sequence[RouteNode]:
        """Prefix the path of routes with base_path and merge options.

        Options already set on a route take precedence over group options.
        """
        base_path = base_path.rstrip("/")
        for route in _walk(routes):
            route.path = base_path + route.path
            if options:
                route.options = _merge_options(options, route.options)
        return routes

    def namespace(
        self, namespace: str, routes: Sequence[RouteNode]
    ) -> Sequence[RouteNode]:
        """Prefix string actions of routes with a module namespace."""
        namespace = namespace.strip(".")
        for route in _walk(routes):
            if isinstance(route.action, str):
                route.action = f"{namespace}.{route.action}"
        return routes

    def resource(
        self,
        path: str,
        cls: Union[str, type],
        base_name: str,
        except_: Iterable[str] = (),
        placeholder: str = "{int}",
    ) -> List[Route]:
        """Register the REST routes of a resource class.

        Routes: index, create, show, update, replace and delete.
        """
        path = path.rstrip("/") + "/"
        action = _class_path(cls) + "::"
        skip = set(except_)
        table = [
            ("index", "GET", path),
            ("create", "POST", path),
            ("show", "GET", path + placeholder),
            ("update", "PATCH", path + placeholder),
            ("replace", "PUT", path + placeholder),
            ("delete", "DELETE", path + placeholder),
        ]
        return [
            self.add([method], route_path, f"{action}{key}/*", f"{base_name}.{key}")
            for key, method, route_path in table
            if key not in skip
        ]

    def presenter(
        self,
        path: str,
        cls: Union[str, type],
        base_name: str,
        except_: Iterable[str] = (),
        placeholder: str = "{int}",
    ) -> List[Route]:
        """Register the HTML routes of a presenter class.

        Routes: index, new, create, show, edit, update, remove and delete.
        """
        path = path.rstrip("/") + "/"
        action = _class_path(cls) + "::"
        skip = set(except_)
        table = [
            ("index", "GET", path),
            ("new", "GET", path + "new"),
            ("create", "POST", path),
            ("show", "GET", path + placeholder),
            ("edit", "GET", path + placeholder + "/edit"),
            ("update", "POST", path + placeholder + "/update"),
            ("remove", "GET", path + placeholder + "/remove"),
            ("delete", "POST", path + placeholder + "/delete"),
        ]
        return [
            self.add([method], route_path, f"{action}{key}/*", f"{base_name}.{key}")
            for key, method, route_path in table
            if key not in skip
        ]
