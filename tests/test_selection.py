"""
Tests for candidate selection and merging.
"""
import pytest

from phonetic_matching import Match, MatcherConfig, Target, merge_matches, select_matches


def candidate(value, distance, index=None):
    return Match(Target(value, value, index if index is not None else hash(value)), distance)


@pytest.fixture
def config():
    return MatcherConfig(
        phonetic_weight_percentage=0.0,
        max_returns=4,
        find_threshold=0.35,
        max_distance_margin_returns=0.02,
        best_distance_multiplier=1.1,
    )


class TestSelectMatches:
    """Tests for select_matches."""

    def test_empty_candidates(self, config):
        """Test that no candidate gives no match."""
        assert select_matches([], config) == []

    def test_keeps_candidates_close_to_best(self, config):
        """Test the multiplier cutoff around the best distance."""
        candidates = [candidate("a", 0.1), candidate("b", 0.105), candidate("c", 0.2)]

        assert select_matches(candidates, config) == ["a", "b"]

    def test_margin_is_a_floor(self, config):
        """Test that an exact best match still admits near-exact ones."""
        candidates = [candidate("a", 0.0), candidate("b", 0.01), candidate("c", 0.03)]

        assert select_matches(candidates, config) == ["a", "b"]

    def test_cutoff_is_exclusive(self, config):
        """Test that a candidate exactly at the margin is dropped."""
        candidates = [candidate("a", 0.0), candidate("b", 0.02)]

        assert select_matches(candidates, config) == ["a"]

    def test_deduplicates_by_id(self, config):
        """Test that an entity reached by several variants is returned once."""
        candidates = [
            Match(Target("andrew", "andrew smith", 0), 0.0),
            Match(Target("andrew", "andrew", 0), 0.01),
            Match(Target("andy", "andy", 1), 0.015),
        ]

        assert select_matches(candidates, config) == ["andrew", "andy"]

    def test_same_value_different_ids_are_distinct(self, config):
        """Test that distinct entities with equal values are both kept."""
        candidates = [Match(Target("john", "john", 2), 0.0), Match(Target("john", "john", 3), 0.0)]

        assert select_matches(candidates, config) == ["john", "john"]

    def test_max_returns_caps_output(self, config):
        """Test that at most max_returns entities are returned."""
        config.max_returns = 2
        candidates = [candidate(str(i), 0.0, index=i) for i in range(5)]

        assert select_matches(candidates, config) == ["0", "1"]

    def test_zero_max_returns(self, config):
        """Test that max_returns = 0 returns nothing."""
        config.max_returns = 0

        assert select_matches([candidate("a", 0.0)], config) == []

    def test_monotonic_cutoff(self, config):
        """Test that every returned entity is under the cutoff."""
        candidates = [candidate(str(i), 0.1 + i * 0.004, index=i) for i in range(10)]
        cutoff = max(0.1 * config.best_distance_multiplier, config.max_distance_margin_returns)

        selected = select_matches(candidates, config)

        by_value = {c.element.value: c.distance for c in candidates}
        assert selected
        assert all(by_value[value] < cutoff for value in selected)


class TestMergeMatches:
    """Tests for merge_matches."""

    def test_interleaves_ascending_streams(self):
        """Test that the merge is ascending and keeps every element."""
        first = [candidate("f1", 0.1), candidate("f3", 0.3)]
        second = [candidate("s2", 0.2), candidate("s4", 0.4)]

        merged = merge_matches(first, second)

        assert [m.element.value for m in merged] == ["f1", "s2", "f3", "s4"]

    def test_ties_take_second_first(self):
        """Test that equal distances advance the second stream."""
        first = [candidate("f", 0.3)]
        second = [candidate("s", 0.3)]

        merged = merge_matches(first, second)

        assert [m.element.value for m in merged] == ["s", "f"]

    def test_remainders_are_appended(self):
        """Test that the longer stream's tail follows the merge."""
        first = [candidate("f1", 0.1), candidate("f2", 0.5), candidate("f3", 0.6)]
        second = [candidate("s1", 0.2)]

        merged = merge_matches(first, second)

        assert [m.element.value for m in merged] == ["f1", "s1", "f2", "f3"]

    def test_empty_streams(self):
        """Test merges with empty inputs."""
        only = [candidate("a", 0.1)]

        assert merge_matches([], []) == []
        assert merge_matches(only, []) == only
        assert merge_matches([], only) == only
