"""Roll a flat query string up into a nested tree.

Given input of the form::

    employee.name.first=Jane;employee.name.last=Smith;employee.city=New%20York;
    id=444;phone=(212)123-4567;phone=(212)555-1212;@fax=(212)999-8877

``rollup_query_string`` builds::

    {
        "employee": {
            "name": {"first": "Jane", "last": "Smith"},
            "city": "New York",
        },
        "id": "444",
        "phone": ["(212)123-4567", "(212)555-1212"],
        "fax": ["(212)999-8877"],
    }

Dots nest, repeated names become lists, and a leading ``@`` on the leaf key
forces a list even for a single value. With ``FORCE_LIST`` the names are kept
flat and every value is a list, like a classic CGI parser.
"""
from __future__ import annotations

import typing as t
from collections.abc import Mapping

from httprollup.errors import ConfigurationError, StructuralConflictError
from httprollup.escaping import unescape

#: Separator between nesting levels in a name.
LEVEL_SEP = "."
#: Leading marker on a leaf key that forces list storage.
LIST_MARKER = "@"
#: A token equal to this ends the query string.
TERMINATOR = "="

DEFAULT_DELIM = ";"

Tree = dict[str, t.Any]


def get_delimiter(config: Mapping[str, t.Any]) -> str:
    """Return the configured token delimiter, or raise ConfigurationError."""
    delim = config.get("DELIM", DEFAULT_DELIM)
    if not isinstance(delim, str) or not delim:
        raise ConfigurationError(
            f"DELIM must be a non-empty string, got {delim!r}."
        )
    return delim


def iter_pairs(
    query_string: str | None, delim: str = DEFAULT_DELIM
) -> t.Iterator[tuple[str, str]]:
    """Yield raw ``(name, value)`` pairs from *query_string*, in order.

    Trailing empty tokens are dropped; any other empty token is an empty
    name with an empty value. A token without ``=`` yields an empty value,
    and a token that is exactly ``=`` ends the iteration.
    """
    if not query_string:
        return
    tokens = query_string.split(delim)
    while tokens and not tokens[-1]:
        tokens.pop()
    for token in tokens:
        if token == TERMINATOR:
            break
        name, _, value = token.partition("=")
        yield name, value


def _child_object(node: Tree, key: str, name: str, path: list[str]) -> Tree:
    child = node.get(key)
    if child is None:
        child = node[key] = {}
    elif not isinstance(child, dict):
        raise StructuralConflictError(name, path)
    return child


def _store(node: Tree, leaf: str, value: str, name: str, path: list[str]) -> None:
    forced = leaf.startswith(LIST_MARKER)
    if forced:
        leaf = leaf[len(LIST_MARKER):]

    current = node.get(leaf)
    if current is None:
        node[leaf] = [value] if forced else value
    elif isinstance(current, list):
        current.append(value)
    elif isinstance(current, str):
        node[leaf] = [current, value]
    else:
        raise StructuralConflictError(name, (*path[:-1], leaf))


def rollup_query_string(
    query_string: str | None,
    config: Mapping[str, t.Any] | None = None,
    decode: t.Callable[[str], str] = unescape,
) -> Tree:
    """Parse *query_string* into a nested tree of dicts, lists and strings.

    Args:
        query_string: The raw query string. ``None`` or ``""`` gives ``{}``.
        config: Mapping with the optional keys ``DELIM`` (token delimiter,
            default ``";"``) and ``FORCE_LIST`` (flat always-list mode).
            Other keys are ignored, so a full :class:`~httprollup.Config`
            may be passed.
        decode: Applied to every value. Defaults to
            :func:`~httprollup.escaping.unescape`.

    Raises:
        ConfigurationError: ``DELIM`` is empty or not a string.
        StructuralConflictError: A dotted name crosses an existing scalar or
            list, or a value lands on an existing object.
    """
    if config is None:
        config = {}
    delim = get_delimiter(config)
    force_list = bool(config.get("FORCE_LIST", False))

    root: Tree = {}

    for name, raw_value in iter_pairs(query_string, delim):
        value = decode(raw_value)

        if force_list:
            values = root.get(name)
            if isinstance(values, list):
                values.append(value)
            else:
                root[name] = [value]
            continue

        *levels, leaf = name.split(LEVEL_SEP)
        node = root
        path: list[str] = []
        for level in levels:
            path.append(level)
            node = _child_object(node, level, name, path)
        path.append(leaf)
        _store(node, leaf, value, name, path)

    return root
