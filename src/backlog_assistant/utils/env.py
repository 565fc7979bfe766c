"""Environment variable utility functions for Backlog Assistant."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def is_env_enabled(env_var_name: str, default: str = "true") -> bool:
    """Check a feature flag that stays on unless set to a false value."""
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no", "off")


def getenv_float(env_var_name: str, default: float) -> float:
    """Read a float from the environment, falling back to ``default`` when unset or invalid."""
    raw = os.getenv(env_var_name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def getenv_list(env_var_name: str) -> list[str]:
    """Split a comma-separated environment variable into stripped, non-empty items."""
    raw = os.getenv(env_var_name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]
