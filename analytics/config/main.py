from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, TypeVar, Union

import httpx

from analytics.callbacks import Callback, NullCallback
from analytics.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_INTERVAL,
    DEFAULT_MAX_BATCH_BYTES,
    DEFAULT_MAX_CONCURRENT_REQUESTS,
    DEFAULT_MAX_MESSAGE_BYTES,
)
from analytics.context import Context, LibraryInfo
from analytics.errors import ConfigError
from analytics.meta import get_library_identity
from .backoff import ExponentialBackoff
from .compat import apply_deprecated_options
from .defaults import (
    default_transport,
    new_default_logger,
    new_message_id,
    utc_now,
)
from .log_codes import DEFAULTS_RESOLVED, VALIDATION_REJECTED

logger = logging.getLogger(__name__)

T = TypeVar("T")

ClientLogger = Union[logging.Logger, logging.LoggerAdapter]


@dataclass(frozen=True)
class Config:
    """
    Options used to build an analytics client.

    Every field's zero value (``0``, ``""``, ``False`` or ``None``) means
    "use the library default". ``make_config`` returns a copy where each of
    them has been filled in.
    """

    # Deprecated: use data_plane_url. Holds the resolved URL once defaulted.
    endpoint: str = ""
    data_plane_url: str = ""
    # Seconds between flushes of the queued messages.
    interval: float = 0
    transport: Optional[httpx.BaseTransport] = None
    logger: Optional[ClientLogger] = None
    callback: Optional[Callback] = None
    batch_size: int = 0
    verbose: bool = False
    default_context: Optional[Context] = None
    # Number of retries so far -> seconds to wait before the next one.
    retry_after: Optional[Callable[[int], float]] = None
    uid: Optional[Callable[[], str]] = None
    now: Optional[Callable[[], datetime]] = None
    max_concurrent_requests: int = 0
    # Skip the cluster-info lookup and send every batch to a single node.
    no_proxy_support: bool = False
    max_message_bytes: int = 0
    max_batch_bytes: int = 0
    # Deprecated: use disable_gzip. Any nonzero value disables gzip.
    gzip: int = 0
    disable_gzip: bool = False


def find_config_error(config: Config) -> Optional[ConfigError]:
    """
    Check the fields that have no valid default when negative or NaN.

    Args:
        config (Config): The raw configuration.

    Returns:
        Optional[ConfigError]: The first violation found, or None.
    """
    checks: list[tuple[str, Any, str]] = [
        (
            "interval",
            config.interval,
            "negative time intervals are not supported",
        ),
        (
            "batch_size",
            config.batch_size,
            "negative batch sizes are not supported",
        ),
        (
            "max_message_bytes",
            config.max_message_bytes,
            "negative value is not supported for max message bytes",
        ),
        (
            "max_batch_bytes",
            config.max_batch_bytes,
            "negative value is not supported for max batch bytes",
        ),
    ]

    for field_name, value, reason in checks:
        # NaN compares false both ways
        if not value >= 0:
            return ConfigError(reason=reason, field=field_name, value=value)

    return None


def validate_config(config: Config) -> None:
    """
    Raise the first violation reported by ``find_config_error``.

    Raises:
        ConfigError: If a field holds a negative value.
    """
    error = find_config_error(config)
    if error is not None:
        logger.debug(
            VALIDATION_REJECTED, extra={"field": error.field, "value": error.value}
        )
        raise error


def _default(value: Optional[T], factory: Callable[[], T]) -> T:
    return factory() if value is None else value


def _stamp_library(context: Optional[Context]) -> Context:
    # Always overwritten so the library identity reported upstream is accurate.
    name, version = get_library_identity()
    base = context if context is not None else Context()
    return base.model_copy(
        update={"library": LibraryInfo(name=name, version=version)}, deep=True
    )


def make_config(config: Config) -> Config:
    """
    Return a copy of ``config`` with every zero-valued field set to its
    default. Never raises; run ``validate_config`` first.
    """
    config = apply_deprecated_options(config)

    resolved = dataclasses.replace(
        config,
        interval=config.interval or DEFAULT_INTERVAL,
        transport=_default(config.transport, default_transport),
        logger=_default(config.logger, lambda: new_default_logger(config.verbose)),
        callback=_default(config.callback, NullCallback),
        batch_size=config.batch_size or DEFAULT_BATCH_SIZE,
        default_context=_stamp_library(config.default_context),
        retry_after=_default(config.retry_after, ExponentialBackoff),
        uid=_default(config.uid, lambda: new_message_id),
        now=_default(config.now, lambda: utc_now),
        max_concurrent_requests=(
            config.max_concurrent_requests or DEFAULT_MAX_CONCURRENT_REQUESTS
        ),
        max_message_bytes=config.max_message_bytes or DEFAULT_MAX_MESSAGE_BYTES,
        max_batch_bytes=config.max_batch_bytes or DEFAULT_MAX_BATCH_BYTES,
    )

    logger.debug(
        DEFAULTS_RESOLVED,
        extra={
            "endpoint": resolved.endpoint,
            "interval": resolved.interval,
            "batch_size": resolved.batch_size,
        },
    )
    return resolved


def resolve_config(config: Config) -> Config:
    """
    Validate ``config`` and fill in its defaults.

    Args:
        config (Config): The raw configuration supplied by the caller.

    Returns:
        Config: The resolved configuration.

    Raises:
        ConfigError: If validation fails; no defaults are applied then.
    """
    validate_config(config)
    return make_config(config)
