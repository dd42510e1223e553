"""
Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler (idempotent) and set the package level."""
    global _configured

    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        _configured = True

    logging.getLogger("planscore").setLevel(level.upper())
