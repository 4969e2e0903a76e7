"""Tests for relevance scoring."""

import pytest

from wwdcsearch.search.scoring import calculate_relevance


class TestCalculateRelevance:
    """Test English relevance scores."""

    def test_match_at_start(self):
        """Test base, one occurrence and full position bonus."""
        assert calculate_relevance("swift is fast", "swift") == 25.0

    def test_position_bonus_decreases(self):
        """Test that later matches earn a smaller bonus."""
        # First occurrence at index 20: bonus 10 - 2 = 8
        text = "a" * 20 + "swift"
        assert calculate_relevance(text, "swift") == pytest.approx(23.0)

    def test_position_bonus_floors_at_zero(self):
        """Test that matches past index 100 get no position bonus."""
        assert calculate_relevance("x" * 100 + "swift", "swift") == 15.0
        assert calculate_relevance("x" * 250 + "swift", "swift") == 15.0

    def test_each_occurrence_adds_five(self):
        """Test the occurrence bonus."""
        assert calculate_relevance("swift swift swift", "swift") == 35.0

    def test_occurrences_do_not_overlap(self):
        """Test that overlapping occurrences are counted once."""
        assert calculate_relevance("aaaa", "aa") == 30.0
        assert calculate_relevance("aaa", "aa") == 25.0

    def test_earlier_position_scores_higher(self):
        """Test relevance monotonicity in the match position."""
        early = calculate_relevance("swift is a language", "swift")
        late = calculate_relevance("i like to write swift", "swift")

        assert early >= late

    def test_missing_query_gets_base_score(self):
        """Test that text without the query only gets the base."""
        assert calculate_relevance("objective-c", "swift") == 10.0
