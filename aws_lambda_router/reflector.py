"""Declarative routes on action classes.

Usage::

    @origin("https://api.example.com")
    class Users(RouteActions):
        @route("GET", "/users/{int}", arguments="0", name="users.show")
        def show(self, id):
            ...

        @route_not_found()
        def missing(self):
            ...

    Reflector(Users).get_routes()
"""

import inspect
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

if TYPE_CHECKING:
    from aws_lambda_router.collection import RouteCollection
    from aws_lambda_router.routing import Route

ROUTES_ATTR = "__routing_routes__"
ORIGINS_ATTR = "__routing_origins__"
NOT_FOUND_ATTR = "__routing_not_found__"


def _as_tuple(value: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class RouteInfo:
    """Route metadata attached to an action method."""

    methods: Tuple[str, ...]
    path: str
    arguments: str = "*"
    name: Optional[str] = None
    origins: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RouteNotFoundInfo:
    """Not found metadata attached to an action method."""

    origins: Tuple[str, ...] = ()


def route(
    methods: Union[str, Sequence[str]],
    path: str,
    arguments: str = "*",
    name: Optional[str] = None,
    origins: Union[str, Sequence[str]] = (),
) -> Callable:
    """Declare a route on an action method. May be stacked."""
    info = RouteInfo(
        tuple(method.upper() for method in _as_tuple(methods)),
        path,
        arguments,
        name,
        _as_tuple(origins),
    )

    def _decorator(func: Callable) -> Callable:
        # Decorators apply bottom-up, keep source order
        setattr(func, ROUTES_ATTR, [info, *getattr(func, ROUTES_ATTR, [])])
        return func

    return _decorator


def route_not_found(origins: Union[str, Sequence[str]] = ()) -> Callable:
    """Declare an action method as the not found action of origins."""
    info = RouteNotFoundInfo(_as_tuple(origins))

    def _decorator(func: Callable) -> Callable:
        setattr(func, NOT_FOUND_ATTR, [info, *getattr(func, NOT_FOUND_ATTR, [])])
        return func

    return _decorator


def origin(url: str) -> Callable[[type], type]:
    """Declare a default origin of every route of a class. May be stacked."""

    def _decorator(cls: type) -> type:
        own = cls.__dict__.get(ORIGINS_ATTR, ())
        setattr(cls, ORIGINS_ATTR, (url, *own))
        return cls

    return _decorator


class Reflector:
    """Read declarative routes from an action class."""

    def __init__(self, route_actions: Union[type, Any]) -> None:
        """Initialize reflector for a class or one of its instances."""
        if not inspect.isclass(route_actions):
            route_actions = type(route_actions)
        self.cls: type = route_actions

    @property
    def class_path(self) -> str:
        """Return the dotted path of the class."""
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    def get_origins(self) -> List[str]:
        """Return the class origins, parents included, sorted."""
        origins = set()
        for klass in self.cls.__mro__:
            origins.update(klass.__dict__.get(ORIGINS_ATTR, ()))
        return sorted(origins)

    def _public_methods(self):
        for name, member in inspect.getmembers(self.cls, inspect.isfunction):
            if not name.startswith("_"):
                yield name, member

    def get_routes(self) -> List[Dict[str, Any]]:
        """Return the declared routes."""
        origins = self.get_origins()
        result = []
        for name, method in self._public_methods():
            for info in getattr(method, ROUTES_ATTR, []):
                result.append(
                    {
                        "origins": list(info.origins) or origins,
                        "methods": list(info.methods),
                        "path": info.path,
                        "arguments": info.arguments,
                        "name": info.name,
                        "action": f"{self.class_path}::{name}",
                    }
                )
        return result

    def get_routes_not_found(self) -> List[Dict[str, Any]]:
        """Return the declared not found actions."""
        origins = self.get_origins()
        result = []
        for name, method in self._public_methods():
            for info in getattr(method, NOT_FOUND_ATTR, []):
                result.append(
                    {
                        "origins": list(info.origins) or origins,
                        "action": f"{self.class_path}::{name}",
                    }
                )
        return result

    def register(self, collection: "RouteCollection") -> List["Route"]:
        """Add the declared routes served at the collection origin.

        Routes without origins are added to every collection.
        """
        routes = []
        for info in self.get_routes():
            if info["origins"] and collection.origin not in info["origins"]:
                continue
            action = info["action"]
            if info["arguments"]:
                action = f"{action}/{info['arguments']}"
            routes.append(
                collection.add(info["methods"], info["path"], action, info["name"])
            )
        for info in self.get_routes_not_found():
            if not info["origins"] or collection.origin in info["origins"]:
                collection.not_found(info["action"])
        return routes
