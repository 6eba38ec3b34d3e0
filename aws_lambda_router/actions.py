"""Base classes for route action targets.

String actions such as ``"app.users.Users::show/0"`` are dispatched to a
class instance. Classes opt in to before/after interception by implementing
the :class:`ActionHooks` protocol; :class:`RouteActions` gives no-op hooks.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class ActionHooks(Protocol):
    """Interception hooks run around an action method."""

    def before_action(self, method: str, arguments: List[Any]) -> Any:
        """Return a non-None value to skip the action method."""

    def after_action(
        self, method: str, arguments: List[Any], ran: bool, result: Any
    ) -> Any:
        """Return the final action result."""


class RouteActions:
    """Action class with pass-through hooks."""

    def before_action(self, method: str, arguments: List[Any]) -> Optional[Any]:
        """Prepare or intercept the action."""
        return None

    def after_action(
        self, method: str, arguments: List[Any], ran: bool, result: Any
    ) -> Any:
        """Return the action result unchanged."""
        return result


class Resource(RouteActions, ABC):
    """REST resource, see RouteCollection.resource()."""

    @abstractmethod
    def index(self) -> Any:
        """List the items, ``GET /``."""

    @abstractmethod
    def create(self) -> Any:
        """Create an item, ``POST /``."""

    @abstractmethod
    def show(self, id: str) -> Any:
        """Show one item, ``GET /{id}``."""

    @abstractmethod
    def update(self, id: str) -> Any:
        """Partially update an item, ``PATCH /{id}``."""

    @abstractmethod
    def replace(self, id: str) -> Any:
        """Replace an item, ``PUT /{id}``."""

    @abstractmethod
    def delete(self, id: str) -> Any:
        """Delete an item, ``DELETE /{id}``."""


class Presenter(RouteActions, ABC):
    """HTML presenter, see RouteCollection.presenter()."""

    @abstractmethod
    def index(self) -> Any:
        """List the items, ``GET /``."""

    @abstractmethod
    def new(self) -> Any:
        """Show the create form, ``GET /new``."""

    @abstractmethod
    def create(self) -> Any:
        """Create an item, ``POST /``."""

    @abstractmethod
    def show(self, id: str) -> Any:
        """Show one item, ``GET /{id}``."""

    @abstractmethod
    def edit(self, id: str) -> Any:
        """Show the edit form, ``GET /{id}/edit``."""

    @abstractmethod
    def update(self, id: str) -> Any:
        """Update an item, ``POST /{id}/update``."""

    @abstractmethod
    def remove(self, id: str) -> Any:
        """Show the delete confirmation, ``GET /{id}/remove``."""

    @abstractmethod
    def delete(self, id: str) -> Any:
        """Delete an item, ``POST /{id}/delete``."""
