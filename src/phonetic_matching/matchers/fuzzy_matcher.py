"""
Generic nearest-neighbor matcher parameterized by a distance function.

Targets are compared through a feature ("extraction") derived from each
target on first use and cached for the lifetime of the matcher:

    target --target_to_extraction--> extraction --extraction_to_pronounceable--> feature

Queries are given as extractions; their feature is computed on every call.
"""
import heapq
import logging
import threading
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from ..exceptions import InvalidArgumentError, TypeMismatchError
from ..models import Match
from .vp_tree import VantagePointTree

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")

_UNSET = object()


class SearchStrategy(Enum):
    """How the nearest neighbors are searched."""
    BRUTE_FORCE = "brute_force"
    ACCELERATED = "accelerated"


class FuzzyMatcher(Generic[T, E]):
    """
    K-nearest-neighbor search over a fixed list of targets.

    Usage:
        matcher = FuzzyMatcher(["andrew", "john b"], StringDistance())
        match = matcher.nearest("andru")  # Match(element="andrew", distance=2.0)
    """

    def __init__(
        self,
        targets: Sequence[T],
        distance: Callable[[Any, Any], float],
        target_to_extraction: Optional[Callable[[T], E]] = None,
        extraction_to_pronounceable: Optional[Callable[[E], Any]] = None,
        strategy: SearchStrategy = SearchStrategy.BRUTE_FORCE,
        extraction_type: Optional[type] = None,
    ):
        """
        Initialize the matcher.

        :param targets: Elements to index (copied, never mutated)
        :param distance: Symmetric, non-negative distance between two features
        :param target_to_extraction: Maps a target to its extraction. Identity if None
        :param extraction_to_pronounceable: Maps an extraction to the compared feature. Identity if None
        :param strategy: Brute-force scan or vantage-point tree
        :param extraction_type: Expected extraction type, checked against the targets when no mapping is given
        :raises TypeMismatchError: If targets are not of extraction_type and no mapping is provided
        """
        if distance is None:
            raise InvalidArgumentError("distance function is required")

        self._targets: List[T] = list(targets)
        self._distance = distance
        self._target_to_extraction = target_to_extraction
        self._extraction_to_pronounceable = extraction_to_pronounceable
        self._strategy = strategy

        if target_to_extraction is None and extraction_type is not None:
            for target in self._targets:
                if not isinstance(target, extraction_type):
                    raise TypeMismatchError(
                        f"Can't use target type [{type(target).__name__}] as extraction type "
                        f"[{extraction_type.__name__}]. You must provide a conversion function "
                        f"'target_to_extraction'."
                    )

        # One slot per target, filled on first access
        self._features: List[Any] = [_UNSET] * len(self._targets)

        self._tree: Optional[VantagePointTree] = None
        self._tree_lock = threading.Lock()

        logger.debug(f"FuzzyMatcher created with {len(self._targets)} targets ({strategy.value})")

    @property
    def size(self) -> int:
        """Number of indexed targets."""
        return len(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def nearest(self, query: E) -> Optional[Match[T]]:
        """
        Find the nearest target.

        :param query: Query extraction
        :return: Best match, or None if there are no targets
        """
        return self.nearest_within(query, float("inf"))

    def nearest_within(self, query: E, limit: float) -> Optional[Match[T]]:
        """
        Find the nearest target strictly closer than limit.

        :param query: Query extraction
        :param limit: Exclusive distance limit
        :return: Best match, or None if none qualifies
        """
        matches = self.k_nearest_within(query, 1, limit)
        return matches[0] if matches else None

    def k_nearest(self, query: E, k: int) -> List[Match[T]]:
        """
        Find up to k nearest targets.

        :param query: Query extraction
        :param k: Number of matches wanted, clamped to [1, size]
        :return: Matches in ascending distance
        """
        return self.k_nearest_within(query, k, float("inf"))

    def k_nearest_within(self, query: E, k: int, limit: float) -> List[Match[T]]:
        """
        Find up to k nearest targets strictly closer than limit.

        :param query: Query extraction
        :param k: Number of matches wanted, clamped to [1, size]
        :param limit: Exclusive distance limit
        :return: Matches in ascending distance, ties in target order
        :raises InvalidArgumentError: If query is None
        """
        if query is None:
            raise InvalidArgumentError("query can't be None")

        # The number of targets is the maximum count
        k = max(min(k, len(self._targets)), 1)
        query_feature = self._to_pronounceable(query)

        if self._strategy is SearchStrategy.ACCELERATED:
            ranked = self._search_tree(query_feature, k, limit)
        else:
            ranked = self._search_brute_force(query_feature, k, limit)

        return [Match(self._targets[idx], dist) for dist, idx in ranked]

    def _search_brute_force(self, query_feature: Any, k: int, limit: float):
        candidates = []
        for idx in range(len(self._targets)):
            dist = self._distance(query_feature, self._feature_at(idx))
            if dist < limit:
                candidates.append((dist, idx))
        return heapq.nsmallest(k, candidates)

    def _search_tree(self, query_feature: Any, k: int, limit: float):
        tree = self._get_tree()
        return tree.search(
            lambda idx: self._distance(query_feature, self._feature_at(idx)),
            k,
            limit,
        )

    def _get_tree(self) -> VantagePointTree:
        if self._tree is None:
            with self._tree_lock:
                if self._tree is None:
                    self._tree = VantagePointTree(
                        len(self._targets),
                        lambda first, second: self._distance(
                            self._feature_at(first), self._feature_at(second)
                        ),
                    )
                    logger.debug(f"Built vantage-point tree over {len(self._targets)} targets")
        return self._tree

    def _feature_at(self, idx: int) -> Any:
        feature = self._features[idx]
        if feature is _UNSET:
            target = self._targets[idx]
            extraction = target if self._target_to_extraction is None else self._target_to_extraction(target)
            feature = self._to_pronounceable(extraction)
            # Idempotent: a racing thread computes and stores the same value
            self._features[idx] = feature
        return feature

    def _to_pronounceable(self, extraction: Any) -> Any:
        if self._extraction_to_pronounceable is None:
            return extraction
        return self._extraction_to_pronounceable(extraction)
