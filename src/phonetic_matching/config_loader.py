"""
Configuration loader with validation.

Builds matcher configurations from environment variables (and a local .env
file), falling back to the defaults of each domain.
"""
import logging
from dataclasses import replace
from typing import Optional, TypeVar
from dotenv import load_dotenv
from .config import MatcherConfig, ContactMatcherConfig, PlaceMatcherConfig
from .config_validator import get_optional_env, parse_float, parse_int
from .exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=MatcherConfig)


def load_matcher_config_from_env(prefix: str, defaults: C) -> C:
    """
    Load a matcher configuration from environment variables.
    
    Reads ``{prefix}_PHONETIC_WEIGHT_PERCENTAGE``, ``{prefix}_MAX_RETURNS``,
    ``{prefix}_FIND_THRESHOLD``, ``{prefix}_MAX_DISTANCE_MARGIN_RETURNS`` and
    ``{prefix}_BEST_DISTANCE_MULTIPLIER``. Unset variables keep the value
    from ``defaults``.
    
    Usage:
        config = load_matcher_config_from_env("CONTACT_MATCHER", ContactMatcherConfig())
        matcher = ContactMatcher(contacts, extract_fields, config)
    
    :param prefix: Environment variable prefix
    :param defaults: Configuration providing fallback values (left untouched)
    :return: New configuration of the same type as defaults
    :raises: ConfigurationError if a value is malformed or out of range
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    overrides = {}
    
    weight = get_optional_env(f"{prefix}_PHONETIC_WEIGHT_PERCENTAGE")
    if weight is not None:
        overrides["phonetic_weight_percentage"] = parse_float(
            weight, f"{prefix}_PHONETIC_WEIGHT_PERCENTAGE"
        )
    
    max_returns = get_optional_env(f"{prefix}_MAX_RETURNS")
    if max_returns is not None:
        overrides["max_returns"] = parse_int(max_returns, f"{prefix}_MAX_RETURNS", minimum=0)
    
    threshold = get_optional_env(f"{prefix}_FIND_THRESHOLD")
    if threshold is not None:
        overrides["find_threshold"] = parse_float(threshold, f"{prefix}_FIND_THRESHOLD")
    
    margin = get_optional_env(f"{prefix}_MAX_DISTANCE_MARGIN_RETURNS")
    if margin is not None:
        overrides["max_distance_margin_returns"] = parse_float(
            margin, f"{prefix}_MAX_DISTANCE_MARGIN_RETURNS"
        )
    
    multiplier = get_optional_env(f"{prefix}_BEST_DISTANCE_MULTIPLIER")
    if multiplier is not None:
        overrides["best_distance_multiplier"] = parse_float(
            multiplier, f"{prefix}_BEST_DISTANCE_MULTIPLIER"
        )
    
    try:
        config = replace(defaults, **overrides)
    except InvalidArgumentError as e:
        raise ConfigurationError(f"Invalid {prefix} configuration: {e}") from e
    
    if overrides:
        logger.info(f"Loaded {prefix} configuration overrides: {sorted(overrides)}")
    
    return config


def load_contact_config_from_env(
    defaults: Optional[ContactMatcherConfig] = None,
) -> ContactMatcherConfig:
    """
    Load contact matcher configuration (``CONTACT_MATCHER_*`` variables).
    
    :param defaults: Fallback configuration, ContactMatcherConfig() if None
    :return: Validated ContactMatcherConfig
    """
    return load_matcher_config_from_env(
        "CONTACT_MATCHER",
        defaults if defaults is not None else ContactMatcherConfig(),
    )


def load_place_config_from_env(
    defaults: Optional[PlaceMatcherConfig] = None,
) -> PlaceMatcherConfig:
    """
    Load place matcher configuration (``PLACE_MATCHER_*`` variables).
    
    :param defaults: Fallback configuration, PlaceMatcherConfig() if None
    :return: Validated PlaceMatcherConfig
    """
    return load_matcher_config_from_env(
        "PLACE_MATCHER",
        defaults if defaults is not None else PlaceMatcherConfig(),
    )
