"""CGI-style value unescaping."""
from urllib.parse import unquote_plus


def unescape(value):
    """Decode a raw query-string value.

    ``+`` becomes a space and ``%XX`` sequences are percent-decoded as
    UTF-8. Malformed escapes are left untouched and ``None`` becomes ``""``.
    """
    if not value:
        return ""
    return unquote_plus(value, encoding="utf-8", errors="replace")
