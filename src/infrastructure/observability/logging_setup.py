"""
Process-wide logging configuration, called once by each entrypoint.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # httpx logs every request URL at INFO, which would leak the provider API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
