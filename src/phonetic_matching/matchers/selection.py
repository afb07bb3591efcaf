"""
Candidate selection and merging for the domain matchers.
"""
from typing import Any, List, Sequence

from ..config import MatcherConfig
from ..models import Match, Target


def select_matches(candidates: Sequence[Match[Target]], config: MatcherConfig) -> List[Any]:
    """
    Reduce ascending candidates to distinct entities close to the best one.

    The cutoff is the best distance times ``best_distance_multiplier``, but
    never below ``max_distance_margin_returns``. Candidates strictly under
    the cutoff are kept in order, one per entity id, up to ``max_returns``.

    :param candidates: Matches over Targets in ascending distance
    :param config: Matcher configuration
    :return: Entity values, best first
    """
    matches = []
    if not candidates:
        return matches

    best_distance = candidates[0].distance
    max_distance = max(best_distance * config.best_distance_multiplier, config.max_distance_margin_returns)

    seen = set()
    for candidate in candidates:
        # Also covers max_returns == 0
        if len(matches) >= config.max_returns:
            break
        if candidate.distance >= max_distance:
            break
        if candidate.element.id not in seen:
            seen.add(candidate.element.id)
            matches.append(candidate.element.value)

    return matches


def merge_matches(first: Sequence[Match], second: Sequence[Match]) -> List[Match]:
    """
    Merge two ascending match lists into one ascending list.

    On equal distances the head of ``second`` is taken first.

    :param first: Ascending matches
    :param second: Ascending matches
    :return: Every match of both inputs
    """
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i].distance < second[j].distance:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1

    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged
