"""
Fuzzy matchers.

Key components:
- FuzzyMatcher: k-nearest-neighbor search over any distance function
- NormalizedFuzzyMatcher: length-normalized string queries (string, phonetic, hybrid)
- WindowGenerator: prefix/suffix phrase variants of entity fields
- ContactMatcher, PlaceMatcher: domain matchers returning entities
"""
from .fuzzy_matcher import FuzzyMatcher, SearchStrategy
from .normalized import (
    NormalizedFuzzyMatcher,
    StringFuzzyMatcher,
    PhoneticFuzzyMatcher,
    HybridFuzzyMatcher,
)
from .windows import WindowGenerator
from .selection import select_matches, merge_matches
from .base_matcher import BaseMatcher
from .contact_matcher import ContactFields, ContactMatcher
from .place_matcher import PlaceFields, PlaceMatcher

__all__ = [
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
