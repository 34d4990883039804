from .backoff import ExponentialBackoff
from .main import (
    Config,
    find_config_error,
    make_config,
    resolve_config,
    validate_config,
)
from .sources import get_config

__all__ = [
    "Config",
    "ExponentialBackoff",
    "find_config_error",
    "get_config",
    "make_config",
    "resolve_config",
    "validate_config",
]
