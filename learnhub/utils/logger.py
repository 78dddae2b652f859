import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler = None


def configure_logging(level: str = "INFO"):
    """Install a single stream handler on the root logger.

    Repeat calls only change the level.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _handler is not None:
        return _handler
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    return _handler
