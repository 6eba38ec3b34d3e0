"""Request and response objects consumed by the router."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit

from aws_lambda_router import StatusCode


@dataclass(frozen=True)
class Request:
    """An incoming HTTP request.

    ``url`` is the absolute request URL; ``origin`` and ``path`` are
    derived from it.
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(
            self, "headers", {key.lower(): value for key, value in self.headers.items()}
        )

    @property
    def origin(self) -> str:
        """Return the URL origin, ``scheme://host[:port]``."""
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}"

    @property
    def path(self) -> str:
        """Return the URL path."""
        return urlsplit(self.url).path or "/"

    def is_json(self) -> bool:
        """Tell if the client sends or accepts JSON."""
        for header in ("content-type", "accept"):
            value = self.headers.get(header, "")
            if "application/json" in value.lower():
                return True
        return False


@dataclass
class Response:
    """A mutable HTTP response, filled by route actions."""

    request: Request
    status_code: int = StatusCode.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: Union[str, bytes] = ""
    content_type: str = "text/html; charset=utf-8"

    def set_status(self, code: int) -> "Response":
        """Set the status code."""
        self.status_code = code
        return self

    def set_header(self, name: str, value: str) -> "Response":
        """Set a header, replacing any previous value."""
        self.headers[name] = value
        return self

    def get_header(self, name: str) -> Optional[str]:
        """Return a header value, case-insensitive."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def set_body(self, body: Union[str, bytes]) -> "Response":
        """Replace the body."""
        self.body = body
        return self

    def append_body(self, content: Union[str, bytes]) -> "Response":
        """Append content to the body."""
        if isinstance(self.body, bytes) and isinstance(content, str):
            content = content.encode()
        elif isinstance(self.body, str) and isinstance(content, bytes):
            self.body = self.body.encode()
        self.body += content  # type: ignore
        return self

    def set_json(self, data: Any) -> "Response":
        """Replace the body with JSON data."""
        self.content_type = "application/json"
        self.body = json.dumps(data)
        return self

    def redirect(self, location: str, code: Optional[int] = None) -> "Response":
        """Redirect to location.

        Without code, GET and HEAD requests get a 307 and other methods 303.
        """
        if code is None:
            if self.request.method in ("GET", "HEAD"):
                code = StatusCode.TEMPORARY_REDIRECT
            else:
                code = StatusCode.SEE_OTHER
        self.status_code = code
        self.headers["Location"] = location
        return self
