"""Test types functionality."""

import json
from dataclasses import FrozenInstanceError

import pytest

from aws_lambda_router import StatusCode
from aws_lambda_router.types import Request, Response


def test_status_code_reason():
    """Status codes know their reason phrase."""
    assert StatusCode.NOT_FOUND.reason == "Not Found"
    assert StatusCode.METHOD_NOT_ALLOWED.reason == "Method Not Allowed"
    assert StatusCode.OK == 200


def test_request():
    """Method is upper case and header names lower case."""
    request = Request(
        method="get",
        url="https://example.com:8080/users/1?page=2",
        headers={"Accept": "text/html"},
    )
    assert request.method == "GET"
    assert request.headers == {"accept": "text/html"}
    assert request.origin == "https://example.com:8080"
    assert request.path == "/users/1"
    assert not request.is_json()


def test_request_empty_path():
    """Path defaults to the root."""
    assert Request("GET", "https://example.com").path == "/"


def test_request_is_json():
    """JSON is detected from content type and accept headers."""
    assert Request("GET", "/", {"Accept": "application/json"}).is_json()
    assert Request(
        "POST", "/", {"Content-Type": "Application/JSON; charset=utf-8"}
    ).is_json()


def test_request_frozen():
    """Requests are immutable."""
    request = Request("GET", "https://example.com/")
    with pytest.raises(FrozenInstanceError):
        request.method = "POST"


def test_response_defaults():
    """Should start as an empty HTML 200."""
    response = Response(Request("GET", "https://example.com/"))
    assert response.status_code == StatusCode.OK
    assert response.headers == {}
    assert response.body == ""
    assert response.content_type == "text/html; charset=utf-8"


def test_response_headers():
    """Header lookup is case-insensitive."""
    response = Response(Request("GET", "https://example.com/"))
    assert response.set_header("X-Custom", "value") is response
    assert response.get_header("x-custom") == "value"
    assert response.get_header("nope") is None


def test_response_body():
    """Body can be replaced and appended to."""
    response = Response(Request("GET", "https://example.com/"))
    response.set_body("a").append_body("b")
    assert response.body == "ab"
    response.append_body(b"c")
    assert response.body == b"abc"
    response.append_body("d")
    assert response.body == b"abcd"


def test_response_json():
    """set_json sets the content type."""
    response = Response(Request("GET", "https://example.com/"))
    response.set_json({"a": [1, 2]})
    assert response.content_type == "application/json"
    assert json.loads(response.body) == {"a": [1, 2]}


def test_response_redirect():
    """Redirect codes depend on the request method."""
    response = Response(Request("GET", "https://example.com/"))
    response.redirect("/home")
    assert response.status_code == StatusCode.TEMPORARY_REDIRECT
    assert response.headers == {"Location": "/home"}

    response = Response(Request("POST", "https://example.com/"))
    response.redirect("/home")
    assert response.status_code == StatusCode.SEE_OTHER

    response.redirect("/other", StatusCode.MOVED_PERMANENTLY)
    assert response.status_code == 301
    assert response.get_header("location") == "/other"
