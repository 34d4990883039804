# -*- coding: utf-8 -*-

__author__ = """RudderStack"""
__email__ = 'sdk@rudderstack.com'

from analytics.callbacks import Callback, NullCallback
from analytics.config import (
    Config,
    ExponentialBackoff,
    find_config_error,
    get_config,
    make_config,
    resolve_config,
    validate_config,
)
from analytics.context import AppInfo, Context, LibraryInfo
from analytics.errors import AnalyticsError, ConfigError

__all__ = [
    "AnalyticsError",
    "AppInfo",
    "Callback",
    "Config",
    "ConfigError",
    "Context",
    "ExponentialBackoff",
    "LibraryInfo",
    "NullCallback",
    "find_config_error",
    "get_config",
    "make_config",
    "resolve_config",
    "validate_config",
]
