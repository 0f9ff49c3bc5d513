"""Acquire the raw query string from wherever the request put it.

A CGI script or WSGI app gets its parameters from the query string for
``GET``/``HEAD`` requests and from the request body for everything else. When
run by hand, the parameters come from the command line or from stdin as
shell-quoted ``name=value`` words.
"""
from __future__ import annotations

import shlex
import typing as t
from collections.abc import Mapping

from werkzeug.wsgi import get_input_stream

from httprollup.logging import logger
from httprollup.rollup import (
    DEFAULT_DELIM,
    Tree,
    get_delimiter,
    rollup_query_string,
)

QUERY_METHODS = frozenset(("GET", "HEAD"))


def split_words(text: str) -> list[str]:
    """Split *text* into words the way a POSIX shell would.

    Quotes group words and backslashes escape the next character, so
    ``'name="Jane Smith" city=New\\ York'`` gives two words.
    Unbalanced quotes raise :exc:`ValueError`.
    """
    return shlex.split(text, posix=True)


def join_words(words: t.Iterable[str], delim: str = DEFAULT_DELIM) -> str:
    """Join command-line words into a query string.

    When any word is a ``name=value`` pair every word becomes one token.
    Otherwise the words are keywords and are joined with ``+``, which
    decodes back to spaces.
    """
    words = list(words)
    if any("=" in word for word in words):
        return delim.join(words)
    return "+".join(words)


def query_from_environ(
    environ: Mapping[str, t.Any],
    delim: str = DEFAULT_DELIM,
    max_content_length: int | None = None,
) -> str:
    """Return the raw query string carried by a WSGI/CGI *environ*.

    ``GET`` and ``HEAD`` use ``QUERY_STRING`` (falling back to
    ``REDIRECT_QUERY_STRING``). Other methods read ``CONTENT_LENGTH`` bytes
    of body from ``wsgi.input``; a ``QUERY_STRING`` present as well is
    appended after the body.

    Raises:
        werkzeug.exceptions.RequestEntityTooLarge: The body is longer than
            *max_content_length*.
    """
    method = environ.get("REQUEST_METHOD", "GET").upper()
    query = environ.get("QUERY_STRING") or ""

    if method in QUERY_METHODS:
        if not query:
            query = environ.get("REDIRECT_QUERY_STRING") or ""
        logger.debug("Using query string for %s request", method)
        return query

    if "wsgi.input" in environ:
        stream = get_input_stream(
            environ, max_content_length=max_content_length
        )
        data = stream.read()
    else:
        data = b""
    logger.debug("Read %d bytes of %s request body", len(data), method)
    body = data.decode("utf-8", "replace")

    if body and query:
        return body + delim + query
    return body or query


def read_query_string(
    query_string: str | None = None,
    environ: Mapping[str, t.Any] | None = None,
    argv: t.Sequence[str] | None = None,
    stdin: t.TextIO | None = None,
    config: Mapping[str, t.Any] | None = None,
) -> str:
    """Find the raw query string, trying each source in turn.

    1. *query_string*, if given (even when empty).
    2. *environ*, if it describes a request (has ``REQUEST_METHOD``).
    3. *argv* words, joined with :func:`join_words`.
    4. *stdin* text, split with :func:`split_words` and joined.

    Returns ``""`` when no source yields anything.
    """
    if config is None:
        config = {}
    delim = get_delimiter(config)

    if query_string is not None:
        logger.debug("Using explicit query string")
        return query_string

    if environ is not None and "REQUEST_METHOD" in environ:
        return query_from_environ(
            environ, delim, config.get("MAX_CONTENT_LENGTH")
        )

    if argv:
        logger.debug("Using %d command-line words", len(argv))
        return join_words(argv, delim)

    if stdin is not None:
        words = split_words(stdin.read())
        logger.debug("Read %d words from stdin", len(words))
        return join_words(words, delim)

    return ""


def rollup_request(
    environ: Mapping[str, t.Any], config: Mapping[str, t.Any] | None = None
) -> Tree:
    """Read the query string from a WSGI *environ* and roll it up."""
    if config is None:
        config = {}
    query = query_from_environ(
        environ, get_delimiter(config), config.get("MAX_CONTENT_LENGTH")
    )
    return rollup_query_string(query, config)
