from dataclasses import dataclass

from .exceptions import InvalidArgumentError


@dataclass
class MatcherConfig:
    """
    Tuning of a domain matcher.

    :param phonetic_weight_percentage: Trade-off between phonetic and lexical distance, 1 meaning 100% phonetic
    :param max_returns: Maximum number of entities returned by a query
    :param find_threshold: Maximum normalized distance to a match (0 exact, ~1 unrelated)
    :param max_distance_margin_returns: Floor of the candidate cutoff
    :param best_distance_multiplier: Multiplier of the best distance for the candidate cutoff
    """
    phonetic_weight_percentage: float
    max_returns: int
    find_threshold: float
    max_distance_margin_returns: float
    best_distance_multiplier: float

    def __post_init__(self):
        if not 0.0 <= self.phonetic_weight_percentage <= 1.0:
            raise InvalidArgumentError(
                f"require 0 <= phonetic_weight_percentage <= 1, got {self.phonetic_weight_percentage}"
            )


@dataclass
class ContactMatcherConfig(MatcherConfig):
    # Defaults tuned for short person names
    phonetic_weight_percentage: float = 0.7
    max_returns: int = 4
    find_threshold: float = 0.35
    max_distance_margin_returns: float = 0.02
    best_distance_multiplier: float = 1.1


@dataclass
class PlaceMatcherConfig(MatcherConfig):
    phonetic_weight_percentage: float = 0.7
    max_returns: int = 8
    find_threshold: float = 0.35
    max_distance_margin_returns: float = 0.02
    best_distance_multiplier: float = 1.1
