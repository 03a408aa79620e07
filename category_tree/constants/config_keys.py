"""Environment configuration keys."""


class ConfigKeys:
    """Names of the environment variables read by the package."""

    # Storage
    DB_PATH = "CATEGORY_DB_PATH"

    # Logging
    LOG_LEVEL = "LOG_LEVEL"

    # Tree retrieval
    OVERLAY_MODE = "CATEGORY_OVERLAY_MODE"
    MAX_DESCENDANTS = "CATEGORY_MAX_DESCENDANTS"
    LOCALE = "CATEGORY_LOCALE"


class ConfigDefaults:
    """Default values for environment configuration."""

    DB_PATH = "data/categories.db"

    LOG_LEVEL = "info"

    OVERLAY_MODE = "first"
    MAX_DESCENDANTS = "10000"
    LOCALE = "0"
