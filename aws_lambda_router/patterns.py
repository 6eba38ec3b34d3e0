"""Regex patterns for placeholder expansion and action parsing."""

import re

# Built-in placeholders, each one a single capturing group
DEFAULT_PLACEHOLDERS = {
    "{alpha}": r"([a-zA-Z]+)",
    "{alphanum}": r"([a-zA-Z0-9]+)",
    "{any}": r"(.*)",
    "{hex}": r"([0-9a-fA-F]+)",
    "{int}": r"([0-9]{1,18})",
    "{md5}": r"([a-f0-9]{32})",
    "{num}": r"([0-9]+)",
    "{port}": r"([0-9]{1,4}|[1-5][0-9]{4}|6[0-4][0-9]{3}|65[0-4][0-9]{2}|655[0-2][0-9]|6553[0-5])",
    "{scheme}": r"(https?)",
    "{segment}": r"([^/]+)",
    "{slug}": r"([a-z0-9_-]+)",
    "{subdomain}": r"([^.]+)",
    "{title}": r"([a-zA-Z0-9_-]+)",
    "{uuid}": r"([0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12})",
}

# Pattern matching expressions
group_expr = re.compile(r"\(([^)]+)\)")
class_path_pattern = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")
identifier_pattern = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
proxy_pattern = re.compile(r"/{(?P<name>.+)\+}$")
