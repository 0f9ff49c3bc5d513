"""httprollup — roll HTTP query strings up into nested dicts and lists."""

from httprollup.config import Config
from httprollup.errors import (
    ConfigurationError,
    RollupError,
    StructuralConflictError,
)
from httprollup.escaping import unescape
from httprollup.rollup import iter_pairs, rollup_query_string
from httprollup.sources import read_query_string, rollup_request

__version__ = "0.2.0"

__all__ = [
    "__version__",
    "Config",
    "ConfigurationError",
    "RollupError",
    "StructuralConflictError",
    "iter_pairs",
    "read_query_string",
    "rollup_query_string",
    "rollup_request",
    "unescape",
]
