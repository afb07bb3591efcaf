"""
Exceptions raised by the phonetic matching library.

Errors raised by an injected distance function or pronouncer are not
wrapped: they reach the caller of the query unchanged.
"""


class PhoneticMatchingError(Exception):
    """Base exception for the phonetic matching library."""

    pass


class InvalidArgumentError(PhoneticMatchingError, ValueError):
    """Raised when a query, field or configuration value is missing or out of range."""

    pass


class TypeMismatchError(PhoneticMatchingError, TypeError):
    """Raised when targets cannot be used as features and no mapping was provided."""

    pass


class ConfigurationError(PhoneticMatchingError):
    """Raised when configuration loaded from the environment is invalid."""

    pass
