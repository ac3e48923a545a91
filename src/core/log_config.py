"""Logging setup. Modules only ever call logging.getLogger(__name__); the process decides where it goes."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root logger setup. Calling it again replaces the earlier configuration."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
