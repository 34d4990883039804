from typing import Any


class AnalyticsError(Exception):
    """
    Generic analytics client error.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An error occurred in the analytics client."):
        self.message = message
        super().__init__(self.message)


class ConfigError(AnalyticsError):
    """
    Raised when a configuration field holds a value that no default can fix.

    Args:
        reason (str): Why the value was rejected.
        field (str): The name of the offending ``Config`` attribute, in
            snake_case (``"batch_size"``, ``"max_message_bytes"``).
        value (Any): The offending value, kept for diagnostics.
    """
    def __init__(self, reason: str, field: str, value: Any):
        self.reason = reason
        self.field = field
        self.value = value
        super().__init__(f"analytics.ConfigError: {reason} ({field}: {value!r})")
