"""Root logger setup, applied once per Lambda cold start."""

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Set the root level and attach a console handler if none exists.

    The Lambda runtime installs its own root handler; a console handler is
    only added when running locally.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
