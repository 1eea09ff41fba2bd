"""Logging setup shared by the command-line entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers; the CLI
calls :func:`setup_logging` once, at DEBUG level under ``--verbose``.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger with the project format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
