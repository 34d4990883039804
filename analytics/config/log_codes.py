"""
Log codes for configuration-related operations.
"""

CONFIG = "config"

# Validation
VALIDATION = f"{CONFIG}.validation"
VALIDATION_REJECTED = f"{VALIDATION}.rejected"

# Defaulting
DEFAULTS = f"{CONFIG}.defaults"
DEFAULTS_RESOLVED = f"{DEFAULTS}.resolved"

# Deprecated options
DEPRECATED = f"{CONFIG}.deprecated"
DEPRECATED_ENDPOINT = f"{DEPRECATED}.endpoint"
DEPRECATED_GZIP = f"{DEPRECATED}.gzip"

# Sources
SOURCES = f"{CONFIG}.sources"
SOURCES_RESOLVED = f"{SOURCES}.resolved"
SOURCES_MISSING_SECTION = f"{SOURCES}.missing_section"
SOURCES_INVALID_VALUE = f"{SOURCES}.invalid_value"
