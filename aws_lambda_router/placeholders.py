"""Placeholder registry shared by routers."""

import re
from typing import Dict, Iterator, Mapping, Optional, Union

from aws_lambda_router.errors import (
    InvalidPlaceholderValue,
    MissingPlaceholderValue,
    NoPlaceholdersInTemplate,
)
from aws_lambda_router.patterns import DEFAULT_PLACEHOLDERS, group_expr


def _token(name: str) -> str:
    if name.startswith("{") and name.endswith("}"):
        return name
    return "{" + name + "}"


def _translate(string: str, table: Mapping[str, str]) -> str:
    """Replace every key of table found in string, longest keys first."""
    if not table:
        return string
    keys = sorted(table, key=len, reverse=True)
    expr = re.compile("|".join(re.escape(key) for key in keys))
    return expr.sub(lambda match: table[match.group(0)], string)


class PlaceholderTable:
    """Named placeholder tokens mapped to regex capturing groups.

    Registration is expected to happen at start-up, before any request is
    matched; the table has no locking.

    Usage::

        table = PlaceholderTable()
        table.add("lang", r"(en|pt-br)")
        table.resolve("/{lang}/posts/{int}")
        # '/(en|pt-br)/posts/([0-9]{1,18})'
        table.fill("/{lang}/posts/{int}", "en", "25")
        # '/en/posts/25'
    """

    def __init__(self, placeholders: Optional[Mapping[str, str]] = None) -> None:
        """Initialize the table with the built-in placeholders."""
        self._placeholders: Dict[str, str] = dict(DEFAULT_PLACEHOLDERS)
        if placeholders:
            self.add(placeholders)

    def __getitem__(self, token: str) -> str:
        return self._placeholders[_token(token)]

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and _token(token) in self._placeholders

    def __iter__(self) -> Iterator[str]:
        return iter(self._placeholders)

    def __len__(self) -> int:
        return len(self._placeholders)

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the token to pattern mapping."""
        return dict(self._placeholders)

    def add(
        self, placeholder: Union[str, Mapping[str, str]], pattern: Optional[str] = None
    ) -> "PlaceholderTable":
        """Add or override one placeholder, or many from a mapping."""
        if isinstance(placeholder, Mapping):
            for name, value in placeholder.items():
                self._placeholders[_token(name)] = value
            return self
        if pattern is None:
            raise TypeError(f"No pattern given for placeholder {placeholder!r}")
        self._placeholders[_token(placeholder)] = pattern
        return self

    def resolve(self, string: str, flip: bool = False) -> str:
        """Replace placeholders with patterns, or patterns with placeholders."""
        table = self._placeholders
        if flip:
            table = {value: key for key, value in table.items()}
        return _translate(string, table)

    def fill(self, string: str, *arguments: str) -> str:
        """Render a template by putting argument values in place of placeholders."""
        string = self.resolve(string)
        patterns = [match.group(0) for match in group_expr.finditer(string)]
        if not patterns:
            if arguments:
                raise NoPlaceholdersInTemplate()
            return string

        for index, pattern in enumerate(patterns):
            if index >= len(arguments):
                raise MissingPlaceholderValue(index)
            value = str(arguments[index])
            if not re.fullmatch(pattern, value):
                raise InvalidPlaceholderValue(index, value)
            string = string.replace(pattern, value, 1)

        return string


# Process-wide table, used by every Router that is not given its own
placeholders = PlaceholderTable()
