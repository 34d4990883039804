from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
import logging
from typing import Optional

from analytics.constants import LIBRARY_NAME


LOG = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_version() -> Optional[str]:
    """
    Get the version of the installed rudder-analytics distribution.

    Returns:
      Optional[str]: The version if found, otherwise None.
    """
    try:
        return version(LIBRARY_NAME)
    except PackageNotFoundError:
        LOG.exception("Unable to get rudder-analytics version.")
        return None


def get_library_identity() -> tuple[str, str]:
    """
    Get the name and version stamped on every default context.

    Returns:
      tuple[str, str]: The library name and version ("unknown" when the
      distribution metadata is missing).
    """
    return LIBRARY_NAME, get_version() or "unknown"
