"""
Utility functions for Backlog Assistant.
"""

from .env import (
    getenv_float,
    getenv_list,
    is_env_enabled,
    is_env_ssl_verify,
    is_env_truthy,
)

__all__ = [
    "getenv_float",
    "getenv_list",
    "is_env_enabled",
    "is_env_ssl_verify",
    "is_env_truthy",
]
