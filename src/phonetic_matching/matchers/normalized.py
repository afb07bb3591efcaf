"""
Length-normalized fuzzy matchers taking string queries.

Raw edit distances grow with the length of the phrases compared, so a fixed
threshold would be strict on short queries and lax on long ones. These
matchers scale the caller's limit up by a query-dependent factor before
searching and scale the returned distances back down, so that 0 means
identical and ~1 means unrelated whatever the query length.
"""
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..distance import DistanceInput, HybridDistance, PhoneticDistance, StringDistance
from ..exceptions import InvalidArgumentError, TypeMismatchError
from ..models import Match
from ..pronunciation import Pronouncer, Pronunciation, SpellingPronouncer
from .fuzzy_matcher import FuzzyMatcher, SearchStrategy

T = TypeVar("T")
E = TypeVar("E")


class NormalizedFuzzyMatcher(Generic[T, E]):
    """
    Wraps a FuzzyMatcher over extractions of type E behind string queries.

    :param matcher: Underlying matcher
    :param query_to_extraction: Builds the query extraction from the query string
    :param threshold_scale: Scale factor of a query extraction
    """

    def __init__(
        self,
        matcher: FuzzyMatcher[T, E],
        query_to_extraction: Callable[[str], E],
        threshold_scale: Callable[[E], float],
    ):
        self._matcher = matcher
        self._query_to_extraction = query_to_extraction
        self._threshold_scale = threshold_scale

    @property
    def size(self) -> int:
        return self._matcher.size

    def __len__(self) -> int:
        return self._matcher.size

    def nearest(self, query: str) -> Optional[Match[T]]:
        matches = self.k_nearest_within(query, 1, float("inf"))
        return matches[0] if matches else None

    def nearest_within(self, query: str, limit: float) -> Optional[Match[T]]:
        matches = self.k_nearest_within(query, 1, limit)
        return matches[0] if matches else None

    def k_nearest(self, query: str, k: int) -> List[Match[T]]:
        return self.k_nearest_within(query, k, float("inf"))

    def k_nearest_within(self, query: str, k: int, limit: float) -> List[Match[T]]:
        """
        Find up to k targets whose normalized distance is below limit.

        :param query: Query phrase
        :param k: Number of matches wanted, clamped to [1, size]
        :param limit: Exclusive normalized distance limit
        :return: Matches in ascending normalized distance
        :raises InvalidArgumentError: If query is None
        """
        if query is None:
            raise InvalidArgumentError("query can't be None")

        extraction = self._query_to_extraction(query)
        scale = self._threshold_scale(extraction)
        # Empty queries would divide by zero
        if scale == 0:
            scale = 1

        matches = self._matcher.k_nearest_within(extraction, k, limit * scale)
        return [Match(match.element, match.distance / scale) for match in matches]


def _phrase_mapping(
    targets: Sequence[T],
    target_to_phrase: Optional[Callable[[T], str]],
) -> Callable[[T], str]:
    if target_to_phrase is not None:
        return target_to_phrase

    for target in targets:
        if not isinstance(target, str):
            raise TypeMismatchError(
                f"Can't use target type [{type(target).__name__}] as a phrase. "
                f"You must provide a conversion function 'target_to_phrase'."
            )
    return lambda target: target


class StringFuzzyMatcher(NormalizedFuzzyMatcher[T, str]):
    """Lexical matcher: edit distance normalized by the query length."""

    def __init__(
        self,
        targets: Sequence[T],
        target_to_phrase: Optional[Callable[[T], str]] = None,
        strategy: SearchStrategy = SearchStrategy.ACCELERATED,
    ):
        to_phrase = _phrase_mapping(targets, target_to_phrase)
        super().__init__(
            FuzzyMatcher(targets, StringDistance(), to_phrase, strategy=strategy),
            query_to_extraction=lambda query: query,
            threshold_scale=len,
        )


class PhoneticFuzzyMatcher(NormalizedFuzzyMatcher[T, Pronunciation]):
    """Phonetic matcher: phone edit distance normalized by the query phone count."""

    def __init__(
        self,
        targets: Sequence[T],
        target_to_phrase: Optional[Callable[[T], str]] = None,
        pronouncer: Optional[Pronouncer] = None,
        strategy: SearchStrategy = SearchStrategy.ACCELERATED,
    ):
        to_phrase = _phrase_mapping(targets, target_to_phrase)
        self.pronouncer = pronouncer if pronouncer is not None else SpellingPronouncer()
        super().__init__(
            FuzzyMatcher(
                targets,
                PhoneticDistance(),
                lambda target: self.pronouncer.pronounce(to_phrase(target)),
                strategy=strategy,
            ),
            query_to_extraction=self.pronouncer.pronounce,
            threshold_scale=lambda pronunciation: len(pronunciation.phones),
        )


class HybridFuzzyMatcher(NormalizedFuzzyMatcher[T, DistanceInput]):
    """
    Blend of phonetic and lexical matching.

    The threshold scale blends the query phone count and character count with
    the same weight as the distance.
    """

    def __init__(
        self,
        targets: Sequence[T],
        phonetic_weight_percentage: float,
        target_to_phrase: Optional[Callable[[T], str]] = None,
        pronouncer: Optional[Pronouncer] = None,
        strategy: SearchStrategy = SearchStrategy.ACCELERATED,
    ):
        """
        :param targets: Elements to index
        :param phonetic_weight_percentage: Weight of the phonetic distance (0.0-1.0)
        :param target_to_phrase: Maps a target to its phrase. Required unless targets are strings
        :param pronouncer: Pronunciation provider, SpellingPronouncer if None
        :param strategy: Search strategy of the underlying matcher
        """
        to_phrase = _phrase_mapping(targets, target_to_phrase)
        self.phonetic_weight_percentage = phonetic_weight_percentage
        self.pronouncer = pronouncer if pronouncer is not None else SpellingPronouncer()
        super().__init__(
            FuzzyMatcher(
                targets,
                HybridDistance(phonetic_weight_percentage),
                lambda target: self._to_distance_input(to_phrase(target)),
                strategy=strategy,
            ),
            query_to_extraction=self._to_distance_input,
            threshold_scale=self._scale,
        )

    def _to_distance_input(self, phrase: str) -> DistanceInput:
        return DistanceInput(phrase, self.pronouncer.pronounce(phrase))

    def _scale(self, extraction: DistanceInput) -> float:
        weight = self.phonetic_weight_percentage
        return weight * len(extraction.pronunciation.phones) + (1 - weight) * len(extraction.phrase)
