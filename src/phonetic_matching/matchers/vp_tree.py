"""
Vantage-point tree used by the accelerated search strategy.

The tree only stores target indices. Distances are obtained through a
callback so the tree shares the fuzzy matcher's lazily cached features.
Pruning relies on the triangle inequality: results equal a brute-force scan
as long as the distance is a metric.
"""
import heapq
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple


@dataclass
class _Node:
    index: int
    radius: float = 0.0
    inside: Optional["_Node"] = None
    outside: Optional["_Node"] = None


class VantagePointTree:
    """
    Metric index over ``count`` items.

    :param count: Number of indexed items (indices ``0..count-1``)
    :param pairwise_distance: Distance between two indexed items
    """

    def __init__(self, count: int, pairwise_distance: Callable[[int, int], float]):
        self._count = count
        self._root = self._build(list(range(count)), pairwise_distance)

    def __len__(self) -> int:
        return self._count

    @staticmethod
    def _build(indices: List[int], pairwise_distance: Callable[[int, int], float]) -> Optional[_Node]:
        if not indices:
            return None

        root = _Node(indices[0])
        # Iterative construction: (node, items below it)
        stack = [(root, indices[1:])]
        while stack:
            node, rest = stack.pop()
            if not rest:
                continue

            distances = [(pairwise_distance(node.index, idx), idx) for idx in rest]
            distances.sort()
            node.radius = distances[len(distances) // 2][0]

            inside = [idx for dist, idx in distances if dist < node.radius]
            outside = [idx for dist, idx in distances if dist >= node.radius]

            if inside:
                node.inside = _Node(inside[0])
                stack.append((node.inside, inside[1:]))
            if outside:
                node.outside = _Node(outside[0])
                stack.append((node.outside, outside[1:]))

        return root

    def search(
        self,
        query_distance: Callable[[int], float],
        k: int,
        limit: float,
    ) -> List[Tuple[float, int]]:
        """
        Find the ``k`` nearest items strictly closer than ``limit``.

        :param query_distance: Distance from the query to the indexed item
        :param k: Maximum number of results
        :param limit: Exclusive distance limit
        :return: ``(distance, index)`` pairs ordered by distance then index
        """
        if self._root is None or k <= 0:
            return []

        # Max-heap of the best results so far, keyed on (distance, index)
        best: List[Tuple[float, int]] = []

        def tau() -> float:
            return -best[0][0] if len(best) >= k else limit

        def offer(dist: float, idx: int) -> None:
            if dist >= limit:
                return
            entry = (-dist, -idx)
            if len(best) < k:
                heapq.heappush(best, entry)
            elif entry > best[0]:
                heapq.heapreplace(best, entry)

        stack = [self._root]
        while stack:
            node = stack.pop()
            dist = query_distance(node.index)
            offer(dist, node.index)

            # Inclusive bounds keep ties on the index order visible
            explore_inside = node.inside is not None and dist - tau() <= node.radius
            explore_outside = node.outside is not None and dist + tau() >= node.radius

            # Push the far side first so the near side is visited first
            if dist < node.radius:
                if explore_outside:
                    stack.append(node.outside)
                if explore_inside:
                    stack.append(node.inside)
            else:
                if explore_inside:
                    stack.append(node.inside)
                if explore_outside:
                    stack.append(node.outside)

        return sorted((-neg_dist, -neg_idx) for neg_dist, neg_idx in best)
