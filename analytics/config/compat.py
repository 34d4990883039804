"""
Mapping of deprecated ``Config`` options onto their replacements.

Kept apart from the defaulting rules so it can be dropped once ``endpoint``
and ``gzip`` are removed.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from analytics.constants import DEFAULT_ENDPOINT
from .log_codes import DEPRECATED_ENDPOINT, DEPRECATED_GZIP

if TYPE_CHECKING:
    from .main import Config

logger = logging.getLogger(__name__)


def resolve_endpoint(data_plane_url: str, endpoint: str) -> str:
    """
    Pick the URL the client sends to.

    ``data_plane_url`` wins, then the deprecated ``endpoint``, then
    ``DEFAULT_ENDPOINT``.
    """
    if data_plane_url:
        return data_plane_url

    if endpoint:
        if endpoint != DEFAULT_ENDPOINT:
            logger.warning(DEPRECATED_ENDPOINT, extra={"endpoint": endpoint})
        return endpoint

    return DEFAULT_ENDPOINT


def apply_deprecated_options(config: Config) -> Config:
    disable_gzip = config.disable_gzip

    # one-way: disable_gzip never feeds back into gzip
    if config.gzip != 0:
        logger.warning(DEPRECATED_GZIP, extra={"gzip": config.gzip})
        disable_gzip = True

    return dataclasses.replace(
        config,
        endpoint=resolve_endpoint(config.data_plane_url, config.endpoint),
        disable_gzip=disable_gzip,
    )
