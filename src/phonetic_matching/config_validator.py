"""
Configuration validation utilities.

Helpers to read optional environment variables and parse them into the
numeric types used by matcher configurations.
"""
import os
from typing import Optional
from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    Blank values are treated as unset.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)
    
    if value is None or not value.strip():
        return default
    
    return value.strip()


def parse_float(value: str, key: str) -> float:
    """
    Parse a float configuration value.
    
    :param value: Raw value
    :param key: Name of the setting (for error messages)
    :return: Parsed float
    :raises: ConfigurationError if the value is not a number
    """
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{key} must be a number, got {value!r}"
        )


def parse_int(value: str, key: str, minimum: Optional[int] = None) -> int:
    """
    Parse an integer configuration value.
    
    :param value: Raw value
    :param key: Name of the setting (for error messages)
    :param minimum: Smallest accepted value, if any
    :return: Parsed integer
    :raises: ConfigurationError if the value is not an integer or below minimum
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{key} must be an integer, got {value!r}"
        )
    
    if minimum is not None and parsed < minimum:
        raise ConfigurationError(
            f"{key} must be at least {minimum}, got {parsed}"
        )
    
    return parsed
