"""
logging_config.py — central logging setup for the storefront.

All modules log through ``get_logger(__name__)`` so that the format and the
handlers configured here apply everywhere.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s"


def setup_logging(level="INFO"):
    """
    Configures the root logger once for the application.

    Output goes to stdout only (container friendly). Calling it again just
    updates the level.

    Args:
        level (str | int): Log level name or number, e.g. ``"INFO"``.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_storefront", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._storefront = True
        root.addHandler(handler)
    root.setLevel(level)

    # requests logs every connection at DEBUG/INFO through urllib3
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name):
    """
    Returns the logger for a module or component.

    Args:
        name (str): Usually the module's ``__name__``.

    Returns:
        logging.Logger: Logger sharing the global configuration.
    """
    return logging.getLogger(name)
