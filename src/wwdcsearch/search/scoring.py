"""Relevance scoring for subtitle matches."""

from __future__ import annotations

ENGLISH_BASE_SCORE = 10.0
OCCURRENCE_BONUS = 5.0
MAX_POSITION_BONUS = 10.0
CHINESE_MATCH_SCORE = 10.0


def calculate_relevance(text: str, query: str) -> float:
    """Score an English match.

    Both arguments are expected lower-cased, with ``query`` occurring in
    ``text``. The score is a base of 10, plus 5 per non-overlapping
    occurrence, plus a bonus of up to 10 that shrinks by one for every ten
    characters before the first occurrence.

    Args:
        text: Lower-cased subtitle text
        query: Normalized query

    Returns:
        Relevance score
    """
    score = ENGLISH_BASE_SCORE
    score += text.count(query) * OCCURRENCE_BONUS
    position = text.find(query)
    if position != -1:
        score += max(0.0, MAX_POSITION_BONUS - position / 10)
    return score
