import configparser
import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from analytics.constants import CONFIG, CONFIG_SECTION_NAME, ENV_PREFIX
from analytics.errors import ConfigError
from .log_codes import (
    SOURCES_INVALID_VALUE,
    SOURCES_MISSING_SECTION,
    SOURCES_RESOLVED,
)
from .main import Config

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(raw)


def _parse_str(raw: str) -> str:
    return raw.strip()


def _parse_int(raw: str) -> int:
    return int(raw.strip())


def _parse_float(raw: str) -> float:
    return float(raw.strip())


# Fields that can be read from the environment or config.ini.
SCALAR_FIELDS: Dict[str, Callable[[str], Any]] = {
    "endpoint": _parse_str,
    "data_plane_url": _parse_str,
    "interval": _parse_float,
    "batch_size": _parse_int,
    "verbose": _parse_bool,
    "max_concurrent_requests": _parse_int,
    "no_proxy_support": _parse_bool,
    "max_message_bytes": _parse_int,
    "max_batch_bytes": _parse_int,
    "gzip": _parse_int,
    "disable_gzip": _parse_bool,
}

_KIND_NAMES = {
    _parse_bool: "boolean",
    _parse_int: "integer",
    _parse_float: "number",
}


def _parse_values(raw_values: Mapping[str, str], source: str) -> Dict[str, Any]:
    """
    Convert raw strings into typed field values.

    Blank values are treated as unset.

    Raises:
        ConfigError: If a value cannot be parsed for its field.
    """
    values: Dict[str, Any] = {}

    for field_name, raw in raw_values.items():
        if not raw or not raw.strip():
            continue

        parser = SCALAR_FIELDS[field_name]
        try:
            values[field_name] = parser(raw)
        except ValueError:
            logger.error(
                SOURCES_INVALID_VALUE,
                extra={"field": field_name, "value": raw, "source": source},
            )
            raise ConfigError(
                reason=f"invalid {_KIND_NAMES[parser]} value",
                field=field_name,
                value=raw,
            )

    return values


def _config_from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    """
    Retrieve configuration values from ``ANALYTICS_<FIELD>`` variables.

    Args:
        environ (Mapping[str, str]): The environment to read.

    Returns:
        Dict[str, Any]: The typed values found.
    """
    raw_values = {}
    for field_name in SCALAR_FIELDS:
        env_name = f"{ENV_PREFIX}{field_name.upper()}"
        if env_name in environ:
            raw_values[field_name] = environ[env_name]

    return _parse_values(raw_values, source="environment")


def _config_from_config_ini(config_path: Path) -> Dict[str, Any]:
    """
    Retrieve configuration values from the [analytics] section of config.ini.

    Args:
        config_path (Path): The path to the config.ini file.

    Returns:
        Dict[str, Any]: The typed values found.
    """
    # URLs may carry percent-encoded characters
    parser = configparser.ConfigParser(interpolation=None)
    config_files = parser.read([config_path])

    if not config_files or not parser.has_section(CONFIG_SECTION_NAME):
        if config_files:
            logger.debug(
                SOURCES_MISSING_SECTION, extra={"config_path": str(config_path)}
            )
        return {}

    section = parser[CONFIG_SECTION_NAME]
    raw_values = {
        field_name: section[field_name]
        for field_name in SCALAR_FIELDS
        if field_name in section
    }

    return _parse_values(raw_values, source="config")


def get_config(
    config_path: Path = CONFIG,
    environ: Optional[Mapping[str, str]] = None,
    **options: Any,
) -> Config:
    """
    Build a raw configuration from the available sources.

    Resolution order per field (first non-None wins):
      1. Keyword options
      2. Environment variables (ANALYTICS_DATA_PLANE_URL, ANALYTICS_BATCH_SIZE, ...)
      3. config.ini [analytics] section

    No defaults are applied; pass the result to ``resolve_config``.

    Args:
        config_path (Path): The path to the config.ini file.
        environ (Optional[Mapping[str, str]]): The environment to read,
            ``os.environ`` when None.
        **options: Any ``Config`` field.

    Returns:
        Config: The raw configuration.

    Raises:
        TypeError: If an option is not a ``Config`` field.
        ConfigError: If an environment or config.ini value cannot be parsed.
    """
    known = {f.name for f in dataclasses.fields(Config)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise TypeError(f"Unknown configuration options: {', '.join(unknown)}")

    environ = os.environ if environ is None else environ

    sources = [
        ("options", lambda: {k: v for k, v in options.items() if v is not None}),
        ("environment", lambda: _config_from_env(environ)),
        ("config", lambda: _config_from_config_ini(config_path)),
    ]

    values: Dict[str, Any] = {}
    for source_name, source_func in sources:
        for field_name, value in source_func().items():
            if field_name in values:
                continue

            values[field_name] = value
            extra = {"field": field_name, "source": source_name}
            if source_name == "config":
                extra["config_path"] = str(config_path)
            logger.debug(SOURCES_RESOLVED, extra=extra)

    return Config(**values)
