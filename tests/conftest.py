"""Shared test fixtures for httprollup."""
import io

import pytest


@pytest.fixture(autouse=True)
def _isolate_rollup_env(monkeypatch):
    """Keep the developer's ROLLUP_* variables and dotenv files out of tests."""
    for key in ("ROLLUP_DELIM", "ROLLUP_FORCE_LIST", "ROLLUP_MAX_CONTENT_LENGTH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ROLLUP_SKIP_DOTENV", "1")


def make_environ(method="GET", query_string="", body=b"", content_length=None,
                 headers=None, **extra):
    """Create a minimal WSGI environ dict for testing."""
    environ = {
        "REQUEST_METHOD": method,
        "PATH_INFO": "/",
        "QUERY_STRING": query_string,
        "SERVER_NAME": "localhost",
        "SERVER_PORT": "80",
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": "http",
        "wsgi.input": io.BytesIO(body),
        "wsgi.errors": io.BytesIO(),
        "SCRIPT_NAME": "",
    }
    if content_length is not None:
        environ["CONTENT_LENGTH"] = str(content_length)
    elif body:
        environ["CONTENT_LENGTH"] = str(len(body))
    if headers:
        for key, value in headers.items():
            environ[f"HTTP_{key.upper().replace('-', '_')}"] = value
    environ.update(extra)
    return environ


@pytest.fixture(name="make_environ")
def make_environ_fixture():
    return make_environ
