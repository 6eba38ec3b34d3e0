"""Test patterns functionality."""

import re

from aws_lambda_router.patterns import (
    DEFAULT_PLACEHOLDERS,
    class_path_pattern,
    group_expr,
    identifier_pattern,
    proxy_pattern,
)


def test_patterns_regex_usage():
    """Test that all patterns are working correctly."""
    matches = group_expr.findall("/([0-9]+)/([a-z]{2})")
    assert matches == ["[0-9]+", "[a-z]{2}"]

    match = proxy_pattern.search("/{proxy+}")
    assert match is not None
    assert match.groupdict()["name"] == "proxy"

    assert class_path_pattern.match("app.controllers.Users")
    assert class_path_pattern.match("Users")
    assert not class_path_pattern.match("app..Users")
    assert not class_path_pattern.match("app.1Users")

    assert identifier_pattern.match("show_all")
    assert not identifier_pattern.match("show-all")


def test_placeholder_patterns():
    """Built-in placeholders accept what their name says."""

    def accepts(name, value):
        return re.fullmatch(DEFAULT_PLACEHOLDERS[f"{{{name}}}"], value) is not None

    assert accepts("int", "123456789012345678")
    assert not accepts("int", "1234567890123456789")
    assert accepts("port", "65535")
    assert not accepts("port", "65536")
    assert accepts("scheme", "http")
    assert not accepts("scheme", "ftp")
    assert accepts("md5", "d41d8cd98f00b204e9800998ecf8427e")
    assert accepts("uuid", "f5c21e12-8317-11e9-bf96-2e2ca3acb545")
    assert accepts("slug", "hello-world_2")
    assert not accepts("slug", "Hello")
    assert not accepts("segment", "a/b")
    assert not accepts("subdomain", "a.b")
    assert accepts("any", "a/b.c")
