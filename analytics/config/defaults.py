"""
Production implementations substituted for unset injectable fields.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone

import httpx

from analytics.constants import DEFAULT_LOG_FORMAT, DEFAULT_LOGGER_NAME


def new_message_id() -> str:
    """
    Return a random canonical UUID4 string.
    """
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def default_transport() -> httpx.BaseTransport:
    return httpx.HTTPTransport()


def new_default_logger(verbose: bool = False) -> logging.Logger:
    """
    Build a logger writing to stderr.

    The logger is not registered with the logging manager, so building one
    leaves the process-wide logging configuration untouched.

    Args:
        verbose (bool): Emit debug records when True.

    Returns:
        logging.Logger: The client logger.
    """
    level = logging.DEBUG if verbose else logging.INFO
    client_logger = logging.Logger(DEFAULT_LOGGER_NAME, level=level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    client_logger.addHandler(handler)

    return client_logger
