"""
Phonetic matching: fuzzy retrieval of contacts, places and arbitrary labeled
objects from noisy (misheard or mistyped) query phrases.
"""
from .config import MatcherConfig, ContactMatcherConfig, PlaceMatcherConfig
from .config_loader import (
    load_matcher_config_from_env,
    load_contact_config_from_env,
    load_place_config_from_env,
)
from .distance import (
    Distance,
    DistanceInput,
    StringDistance,
    PhoneticDistance,
    HybridDistance,
)
from .exceptions import (
    PhoneticMatchingError,
    InvalidArgumentError,
    TypeMismatchError,
    ConfigurationError,
)
from .models import Target, Match
from .pronunciation import Pronunciation, Pronouncer, SpellingPronouncer
from .matchers import (
    FuzzyMatcher,
    SearchStrategy,
    NormalizedFuzzyMatcher,
    StringFuzzyMatcher,
    PhoneticFuzzyMatcher,
    HybridFuzzyMatcher,
    WindowGenerator,
    select_matches,
    merge_matches,
    BaseMatcher,
    ContactFields,
    ContactMatcher,
    PlaceFields,
    PlaceMatcher,
)

__version__ = "0.1.0"

__all__ = [
    "MatcherConfig",
    "ContactMatcherConfig",
    "PlaceMatcherConfig",
    "load_matcher_config_from_env",
    "load_contact_config_from_env",
    "load_place_config_from_env",
    "Distance",
    "DistanceInput",
    "StringDistance",
    "PhoneticDistance",
    "HybridDistance",
    "PhoneticMatchingError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "ConfigurationError",
    "Target",
    "Match",
    "Pronunciation",
    "Pronouncer",
    "SpellingPronouncer",
    "FuzzyMatcher",
    "SearchStrategy",
    "NormalizedFuzzyMatcher",
    "StringFuzzyMatcher",
    "PhoneticFuzzyMatcher",
    "HybridFuzzyMatcher",
    "WindowGenerator",
    "select_matches",
    "merge_matches",
    "BaseMatcher",
    "ContactFields",
    "ContactMatcher",
    "PlaceFields",
    "PlaceMatcher",
]
