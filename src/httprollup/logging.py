"""Logging helpers for httprollup."""
import logging
import sys

logger = logging.getLogger("httprollup")


class _StderrStream:
    """Resolve ``sys.stderr`` at write time so redirected streams are honored."""

    def write(self, data):
        return sys.stderr.write(data)

    def flush(self):
        return sys.stderr.flush()


default_handler = logging.StreamHandler(_StderrStream())
default_handler.setFormatter(
    logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")
)


def has_level_handler(logger):
    level = logger.getEffectiveLevel()
    current = logger
    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True
        if not current.propagate:
            break
        current = current.parent
    return False


def create_logger(debug=False):
    """Configure and return the ``httprollup`` logger.

    The default handler is only attached when nothing up the logger
    hierarchy would already emit records at the effective level.
    """
    if debug and not logger.level:
        logger.setLevel(logging.DEBUG)
    if not has_level_handler(logger):
        logger.addHandler(default_handler)
    return logger
