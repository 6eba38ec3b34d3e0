"""Test gateway functionality."""

import base64

from aws_lambda_router.gateway import _get_host, _get_request_path, build_request


def test_get_host():
    """Forwarded host takes precedence over host."""
    assert _get_host({}) == "localhost"
    assert _get_host({"host": "example.com"}) == "example.com"
    assert (
        _get_host({"host": "example.com", "x-forwarded-host": "api.example.com"})
        == "api.example.com"
    )


def test_get_request_path_no_proxy():
    """Test _get_request_path when no proxy pattern matches."""
    event = {"resource": "/static/path", "path": "/static/path"}
    assert _get_request_path(event) == "/static/path"


def test_get_request_path_with_proxy():
    """Test _get_request_path with proxy pattern match."""
    event = {
        "resource": "/{proxy+}",
        "pathParameters": {"proxy": "test/path"},
        "path": "/test/path",
    }
    assert _get_request_path(event) == "/test/path"


def test_get_request_path_custom_proxy_name():
    """Proxy parameters may have any name."""
    event = {
        "resource": "/api/{rest+}",
        "pathParameters": {"rest": "users/1"},
        "path": "/api/users/1",
    }
    assert _get_request_path(event) == "/users/1"


def test_get_request_path_missing():
    """Missing paths are None."""
    assert _get_request_path({}) is None
    assert _get_request_path({"resource": "/{proxy+}"}) is None


def test_build_request():
    """Should build the absolute request URL."""
    event = {
        "path": "/users",
        "httpMethod": "post",
        "headers": {"Host": "example.com", "Content-Type": "application/json"},
        "queryStringParameters": {"page": "2"},
        "body": '{"name": "yo"}',
    }
    request = build_request(event)
    assert request.method == "POST"
    assert request.url == "https://example.com/users?page=2"
    assert request.origin == "https://example.com"
    assert request.path == "/users"
    assert request.headers == {
        "host": "example.com",
        "content-type": "application/json",
    }
    assert request.body == '{"name": "yo"}'
    assert request.is_json()


def test_build_request_http_and_defaults():
    """Events may lack most fields."""
    request = build_request({"path": "/"}, https=False)
    assert request.method == "GET"
    assert request.url == "http://localhost/"
    assert request.headers == {}
    assert request.body is None


def test_build_request_base64_body():
    """Base64 bodies are decoded."""
    event = {
        "path": "/",
        "body": base64.b64encode(b"hello").decode(),
        "isBase64Encoded": True,
    }
    assert build_request(event).body == "hello"


def test_build_request_without_path():
    """No request without path."""
    assert build_request({"httpMethod": "GET"}) is None
