"""Routing exception hierarchy.

Shared across Router, RouteCollection, Route and the placeholder table so
every module raises and catches the same types. Matching never raises; only
registration mistakes and bad dispatch targets do.
"""


class RoutingError(Exception):
    """Base for all routing errors."""


class InvalidMethod(RoutingError, ValueError):
    """Raised when a route is registered for an unknown HTTP method."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Invalid HTTP method: {method}")


class InvalidAction(RoutingError, ValueError):
    """Raised when a string action can not be parsed."""


class InvalidParameter(RoutingError, ValueError):
    """Raised when placeholder values do not fit a template."""


class MissingPlaceholderValue(InvalidParameter):
    """A placeholder slot has no value."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Placeholder argument is not set: {index}")


class InvalidPlaceholderValue(InvalidParameter):
    """A value does not match its placeholder pattern."""

    def __init__(self, index: int, value: str) -> None:
        self.index = index
        self.value = value
        super().__init__(f"Placeholder argument is invalid: {index}")


class NoPlaceholdersInTemplate(InvalidParameter):
    """Values were given for a template without placeholders."""

    def __init__(self) -> None:
        super().__init__("String has no placeholders. Arguments not required")


class UndefinedActionParameter(RoutingError, LookupError):
    """An action references a path parameter that was not captured."""


class ClassNotFound(RoutingError, LookupError):
    """The class of a string action can not be imported."""


class MethodNotFound(RoutingError, LookupError):
    """The class of a string action has no such public method."""


class RouteNotFound(RoutingError, LookupError):
    """No route is registered with the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Named route not found: {name}")


class InvalidActionResult(RoutingError, TypeError):
    """An action returned a value that can not become a response body."""
