"""Build router requests from API Gateway proxy events."""

import base64
from typing import Dict, Optional
from urllib.parse import urlencode

from aws_lambda_router.patterns import proxy_pattern
from aws_lambda_router.types import Request


def _lower_headers(event: Dict) -> Dict[str, str]:
    # Header keys may come in any case
    headers = event.get("headers") or {}
    return {key.lower(): value for key, value in headers.items()}


def _get_host(headers: Dict[str, str]) -> str:
    return headers.get("x-forwarded-host", headers.get("host", "localhost"))


def _get_request_path(event: Dict) -> Optional[str]:
    """Return the path relative to the API, honouring ``{proxy+}`` resources."""
    resource_proxy = proxy_pattern.search(event.get("resource", "/"))
    if resource_proxy:
        parameters = event.get("pathParameters") or {}
        proxy_path = parameters.get(resource_proxy["name"])
        if proxy_path is None:
            return None
        return f"/{proxy_path}"
    return event.get("path")


def build_request(event: Dict, https: bool = True) -> Optional[Request]:
    """Return the Request of an API Gateway event, None without a path."""
    path = _get_request_path(event)
    if path is None:
        return None

    headers = _lower_headers(event)
    scheme = "https" if https else "http"
    url = f"{scheme}://{_get_host(headers)}{path}"
    query = event.get("queryStringParameters") or {}
    if query:
        url = f"{url}?{urlencode(query)}"

    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode()

    return Request(
        method=event.get("httpMethod", "GET"),
        url=url,
        headers=headers,
        body=body,
    )
