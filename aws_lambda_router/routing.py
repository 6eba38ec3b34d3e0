"""Route definition, string action parsing and dispatch."""

import importlib
import inspect
import logging
import weakref
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from aws_lambda_router.actions import ActionHooks
from aws_lambda_router.errors import (
    ClassNotFound,
    InvalidAction,
    MethodNotFound,
    UndefinedActionParameter,
)
from aws_lambda_router.patterns import class_path_pattern, identifier_pattern

if TYPE_CHECKING:
    from aws_lambda_router.router import Router

logger = logging.getLogger(__name__)

Action = Union[Callable[..., Any], str]

# Hook names are never dispatched as actions
_RESERVED_METHODS = ("before_action", "after_action")


@dataclass(frozen=True)
class ActionReference:
    """A parsed string action, ``module.Class[::method[/spec]]``.

    ``indices`` is the ordered tuple of captured parameter indices to pass
    to the method, or None to pass every captured parameter (``*``).
    ``method`` is None when the router default action method applies.
    """

    class_path: str
    method: Optional[str] = None
    indices: Optional[Tuple[int, ...]] = ()

    @classmethod
    def parse(cls, action: str) -> "ActionReference":
        """Parse an action string."""
        class_path, separator, part = action.partition("::")
        if not class_path_pattern.match(class_path):
            raise InvalidAction(f"Invalid action class: {action!r}")
        if not separator:
            return cls(class_path)

        method, *spec = part.split("/")
        if not identifier_pattern.match(method):
            raise InvalidAction(f"Invalid action method: {action!r}")
        if not spec:
            return cls(class_path, method)

        if "*" in spec:
            if spec != ["*"]:
                raise InvalidAction(
                    "Action arguments can only contain an asterisk wildcard "
                    f"and must be passed alone: {action!r}"
                )
            return cls(class_path, method, None)

        indices = []
        for index, arg in enumerate(spec):
            if not arg.isdigit():
                raise InvalidAction(
                    f"Action argument is not numeric on index {index}: {action!r}"
                )
            indices.append(int(arg))
        return cls(class_path, method, tuple(indices))

    def __str__(self) -> str:
        if self.method is None:
            return self.class_path
        if self.indices is None:
            return f"{self.class_path}::{self.method}/*"
        spec = "".join(f"/{index}" for index in self.indices)
        return f"{self.class_path}::{self.method}{spec}"


def _import_class(class_path: str) -> type:
    """Import a class from its dotted path."""
    parts = class_path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as err:
            # Only a missing target module means "try a shorter path"
            if err.name and module_name.startswith(err.name):
                continue
            raise
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                break
        if inspect.isclass(target):
            return target
        break
    raise ClassNotFound(f"Class not exists: {class_path}")


def _normalize_path(path: str) -> str:
    return "/" + path.strip("/")


class Route:
    """A routable unit: origin, path and action.

    The router is held by weak reference; it is only used to resolve
    placeholders and the default action method.
    """

    def __init__(
        self,
        router: "Router",
        origin: str,
        path: str,
        action: Action,
        name: Optional[str] = None,
    ) -> None:
        """Initialize route object."""
        self._router = weakref.ref(router)
        self._origin = ""
        self._path = "/"
        self._action: Action = ""
        self._reference: Optional[ActionReference] = None
        self._action_params: Dict[int, str] = {}
        self.origin = origin
        self.path = path
        self.action = action
        self.name = name
        self.options: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"<Route {self.name!r} {self._origin}{self._path}>"

    @property
    def router(self) -> "Router":
        """Return the owning router."""
        router = self._router()
        if router is None:
            raise ReferenceError("The router of this route no longer exists")
        return router

    @property
    def origin(self) -> str:
        """Return the origin template."""
        return self._origin

    @origin.setter
    def origin(self, origin: str) -> None:
        self._origin = origin.lstrip("/")

    @property
    def path(self) -> str:
        """Return the path template."""
        return self._path

    @path.setter
    def path(self, path: str) -> None:
        self._path = _normalize_path(path)

    def set_path(self, path: str) -> "Route":
        """Set the path, with one leading slash and no trailing slash."""
        self.path = path
        return self

    @property
    def action(self) -> Action:
        """Return the callable or string action."""
        return self._action

    @action.setter
    def action(self, action: Action) -> None:
        if isinstance(action, str):
            action = action.strip(".")
            self._reference = ActionReference.parse(action)
        else:
            self._reference = None
        self._action = action

    @property
    def reference(self) -> Optional[ActionReference]:
        """Return the parsed string action, if any."""
        return self._reference

    @property
    def action_params(self) -> Dict[int, str]:
        """Return the captured path parameters, by position."""
        return self._action_params

    def set_action_params(
        self, params: Union[Mapping[int, str], Sequence[str]]
    ) -> "Route":
        """Store captured parameters, sorted by position."""
        if not isinstance(params, Mapping):
            params = dict(enumerate(params))
        self._action_params = dict(sorted(params.items()))
        return self

    def set_options(self, options: Dict[str, Any]) -> "Route":
        """Replace the options."""
        self.options = options
        return self

    def get_origin(self, *arguments: Any) -> str:
        """Return the origin template, or the origin filled with arguments."""
        if arguments:
            return self.router.placeholders.fill(self._origin, *arguments)
        return self._origin

    def get_path(self, *arguments: Any) -> str:
        """Return the path template, or the path filled with arguments."""
        if arguments:
            return self.router.placeholders.fill(self._path, *arguments)
        return self._path

    def get_url(
        self, origin_args: Sequence[Any] = (), path_args: Sequence[Any] = ()
    ) -> str:
        """Build the URL of this route."""
        origin_args = [str(arg) for arg in origin_args]
        path_args = [str(arg) for arg in path_args]
        return self.get_origin(*origin_args) + self.get_path(*path_args)

    def _on_named_route(self) -> str:
        if self.name:
            return f", on named route '{self.name}'"
        return ", on unnamed route"

    def _get_arguments(self, reference: ActionReference) -> List[str]:
        if reference.indices is None:
            return list(self._action_params.values())
        arguments = []
        for index in reference.indices:
            if index not in self._action_params:
                raise UndefinedActionParameter(
                    f"Undefined action argument: {index}{self._on_named_route()}"
                )
            arguments.append(self._action_params[index])
        return arguments

    def run(self, *construct: Any) -> Any:
        """Run the route action and return its result.

        Callables receive the captured parameters followed by construct.
        String actions instantiate their class with construct and call the
        method with the parameters selected by the action spec.
        """
        if self._reference is None:
            logger.debug("Running callable action of %r", self)
            return self._action(self._action_params, *construct)  # type: ignore

        reference = self._reference
        method_name = reference.method or self.router.default_route_action_method
        arguments = self._get_arguments(reference)
        try:
            cls = _import_class(reference.class_path)
        except ClassNotFound as err:
            raise ClassNotFound(f"{err}{self._on_named_route()}") from None

        instance = cls(*construct)
        method = None
        if not method_name.startswith("_") and method_name not in _RESERVED_METHODS:
            method = getattr(instance, method_name, None)
        if not callable(method):
            raise MethodNotFound(
                f"Class action method not exists: "
                f"{reference.class_path}::{method_name}{self._on_named_route()}"
            )

        logger.debug("Running %s::%s%r", reference.class_path, method_name, arguments)
        if not isinstance(instance, ActionHooks):
            return method(*arguments)

        result = instance.before_action(method_name, arguments)
        ran = False
        if result is None:
            result = method(*arguments)
            ran = True
        return instance.after_action(method_name, arguments, ran, result)
