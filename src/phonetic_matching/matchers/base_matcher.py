"""
Common logic of the domain matchers.
"""
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Sequence, TypeVar

from ..config import MatcherConfig
from ..models import Match, Target
from .selection import select_matches

T = TypeVar("T")


class BaseMatcher(ABC, Generic[T]):
    """
    Base class of simplified matchers returning entities for a query.

    :param config: Matcher configuration
    """

    def __init__(self, config: MatcherConfig):
        self.config = config

    @abstractmethod
    def find(self, query: str) -> List[T]:
        """
        Find the entities matching a query.

        :param query: Search query
        :return: Matched entities, best first
        """
        pass

    def _select_matches(self, candidates: Sequence[Match[Target]]) -> List[T]:
        return select_matches(candidates, self.config)

    @staticmethod
    def _unique_targets(targets: Iterable[Target]) -> List[Target]:
        # Target equality is over (phrase, id), first occurrence wins
        return list(dict.fromkeys(targets))
