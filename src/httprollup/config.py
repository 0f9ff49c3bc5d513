"""Flask-style Config class for rollup options."""
import json
import os

from werkzeug.utils import import_string

#: Options understood by httprollup, with their defaults.
DEFAULTS = {
    "DELIM": ";",
    "FORCE_LIST": False,
    "MAX_CONTENT_LENGTH": None,
}


class Config(dict):
    """A dict of rollup options, loadable the way Flask's Config is.

    Recognized keys are ``DELIM``, ``FORCE_LIST`` and ``MAX_CONTENT_LENGTH``;
    any other uppercase key is kept but ignored by httprollup itself.
    """

    def __init__(self, defaults=None):
        super().__init__(DEFAULTS)
        if defaults:
            self.update(defaults)

    def from_mapping(self, mapping=None, **kwargs):
        """Update config from a mapping or keyword arguments.

        Returns True (for consistency with Flask).
        """
        if mapping is not None:
            if hasattr(mapping, "items"):
                for key, value in mapping.items():
                    self[key] = value
            else:
                for key, value in mapping:
                    self[key] = value
        for key, value in kwargs.items():
            self[key] = value
        return True

    def from_object(self, obj):
        """Update config from an object's uppercase attributes.

        *obj* may be a module, a class, any object, or an import string
        such as ``"myproject.settings"`` or ``"myproject.settings:Rollup"``.
        """
        if isinstance(obj, str):
            obj = import_string(obj)
        for key in dir(obj):
            if key.isupper():
                self[key] = getattr(obj, key)
        return True

    def from_file(self, filename, load, silent=False, text=True):
        """Update config from a file using a custom loader.

        Usage::

            import json
            config.from_file("rollup.json", load=json.load)

            import tomllib
            config.from_file("rollup.toml", load=tomllib.load, text=False)

        Returns True on success, False if silent and file not found.
        """
        filename = os.fspath(filename)
        try:
            mode = "r" if text else "rb"
            with open(filename, mode) as f:
                obj = load(f)
        except FileNotFoundError:
            if silent:
                return False
            raise OSError(
                f"[Errno 2] Unable to load configuration file"
                f" (No such file or directory): {filename!r}"
            )
        return self.from_mapping(obj)

    def from_prefixed_env(self, prefix="ROLLUP", loads=None):
        """Update config from environment variables with the given prefix.

        ``ROLLUP_DELIM=&`` sets ``config["DELIM"]``. Values go through
        ``loads`` (default: ``json.loads``) so ``ROLLUP_FORCE_LIST=true``
        becomes ``True``; values that fail to deserialize are kept as strings.
        """
        if loads is None:
            loads = json.loads
        prefix = prefix + "_"
        plen = len(prefix)
        for key, value in sorted(os.environ.items()):
            if not key.startswith(prefix):
                continue
            try:
                value = loads(value)
            except ValueError:
                pass
            self[key[plen:]] = value
        return True

    def __repr__(self):
        return f"<Config {dict.__repr__(self)}>"
