# -*- coding: utf-8 -*-
from pathlib import Path

LIBRARY_NAME = "rudder-analytics"

# Endpoint used when neither data_plane_url nor the deprecated endpoint is set.
DEFAULT_ENDPOINT = "https://hosted.rudderlabs.com"

# Seconds between background flushes.
DEFAULT_INTERVAL: float = 5.0

# Messages per batch.
DEFAULT_BATCH_SIZE: int = 250

# Retry policy: initial * factor ** attempt, clamped to [min, max] seconds.
DEFAULT_RETRY_INITIAL_DELAY: float = 0.1
DEFAULT_RETRY_FACTOR: int = 2
DEFAULT_RETRY_MIN_DELAY: float = 0.001
DEFAULT_RETRY_MAX_DELAY: float = 30.0

DEFAULT_MAX_CONCURRENT_REQUESTS: int = 1000

DEFAULT_MAX_MESSAGE_BYTES: int = 32 * 1024
DEFAULT_MAX_BATCH_BYTES: int = 500 * 1024

DEFAULT_LOGGER_NAME = "analytics"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s => %(message)s"

DIR_NAME = ".analytics"
USER_CONFIG_DIR = Path("~", DIR_NAME).expanduser()
CONFIG = USER_CONFIG_DIR / "config.ini"

ENV_PREFIX = "ANALYTICS_"
CONFIG_SECTION_NAME = "analytics"
