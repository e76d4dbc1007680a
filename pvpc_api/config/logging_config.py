"""
Logging setup shared by the API entry point.
"""

import logging

from .settings import app_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = None) -> None:
    """
    Configure root logging once for the whole application.

    Args:
        level: Optional logging level, defaults to the configured PVPC_LOG_LEVEL
    """
    logging.basicConfig(
        level=level if level is not None else app_config.log_level,
        format=LOG_FORMAT
    )
