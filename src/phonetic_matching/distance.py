"""
Distance metrics consumed by the fuzzy matchers.

Any callable ``(first, second) -> float`` that is symmetric, non-negative and
zero on identical inputs can be used as a distance. The classes below are
the lexical, phonetic and hybrid metrics used by the domain matchers; they
compute raw edit distances with rapidfuzz and leave normalization to the
matchers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from rapidfuzz.distance import Levenshtein

from .exceptions import InvalidArgumentError
from .pronunciation import Pronunciation

E = TypeVar("E")

DistanceFunc = Callable[[E, E], float]


@dataclass(frozen=True)
class DistanceInput:
    """Phrase and its pronunciation, compared by the hybrid distance."""
    phrase: str
    pronunciation: Pronunciation


class Distance(ABC, Generic[E]):
    """
    Base class for distance metrics.

    Instances are callable so they can be passed wherever a DistanceFunc is
    expected.
    """

    @abstractmethod
    def distance(self, first: E, second: E) -> float:
        """
        Compute the distance between two features.

        :param first: First feature
        :param second: Second feature
        :return: Non-negative distance, 0 for identical features
        """
        pass

    def __call__(self, first: E, second: E) -> float:
        return self.distance(first, second)


class StringDistance(Distance[str]):
    """Levenshtein edit distance between two strings."""

    def distance(self, first: str, second: str) -> float:
        if first is None or second is None:
            raise InvalidArgumentError("distance input can't be None")
        return float(Levenshtein.distance(first, second))


class PhoneticDistance(Distance[Pronunciation]):
    """Edit distance between two phone sequences."""

    def distance(self, first: Pronunciation, second: Pronunciation) -> float:
        if first is None or second is None:
            raise InvalidArgumentError("distance input can't be None")
        return float(Levenshtein.distance(first.phones, second.phones))


class HybridDistance(Distance[DistanceInput]):
    """
    Weighted blend of phonetic and lexical distances.

    ``weight * phonetic + (1 - weight) * lexical``. Both parts are raw edit
    counts, so the result stays comparable with the hybrid threshold scale
    computed by HybridFuzzyMatcher.
    """

    def __init__(self, phonetic_weight_percentage: float):
        """
        :param phonetic_weight_percentage: Weight of the phonetic part (0.0-1.0)
        """
        if not 0.0 <= phonetic_weight_percentage <= 1.0:
            raise InvalidArgumentError(
                f"phonetic_weight_percentage must be between 0 and 1, got {phonetic_weight_percentage}"
            )
        self.phonetic_weight_percentage = phonetic_weight_percentage
        self._phonetic = PhoneticDistance()
        self._lexical = StringDistance()

    def distance(self, first: DistanceInput, second: DistanceInput) -> float:
        if first is None or second is None:
            raise InvalidArgumentError("distance input can't be None")
        if first.phrase is None or first.pronunciation is None:
            raise InvalidArgumentError("First distance input is invalid. Phrase or pronunciation is None")
        if second.phrase is None or second.pronunciation is None:
            raise InvalidArgumentError("Second distance input is invalid. Phrase or pronunciation is None")

        weight = self.phonetic_weight_percentage
        phonetic = self._phonetic.distance(first.pronunciation, second.pronunciation) if weight > 0 else 0.0
        lexical = self._lexical.distance(first.phrase, second.phrase) if weight < 1 else 0.0
        return weight * phonetic + (1 - weight) * lexical
