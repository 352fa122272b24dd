"""
Relevance scoring for directory entries.

A name is scored against a query through an ordered cascade of tiers; the first
tier that applies decides the score. Lower scores are more relevant, and a
score of ``None`` means the name does not match at all.
"""

from typing import Optional

from .edit_distance import levenshtein


EXACT_MATCH = 0
SUBSTRING_MATCH = 1
PREFIX_MATCH = 2
FUZZY_MATCH_BASE = 3


def fuzzy_threshold(query: str) -> int:
    """
    Get the largest edit distance still accepted as a fuzzy match.

    Args:
        query: Search query (case does not matter)

    Returns:
        Half the query length, rounded down, plus two
    """
    return len(query) // 2 + 2


def score_relevance(name: str, query: Optional[str]) -> Optional[int]:
    """
    Score an entry name against a search query.

    The tiers are, in order: exact match (0), substring (1), prefix (2) and
    finally a fuzzy match scored ``3 + distance`` when the edit distance is
    within :func:`fuzzy_threshold`. Comparison is case-insensitive.

    The first three tiers are checked before any distance is computed, so a
    substring match always beats a fuzzy match even when the fuzzy distance
    is smaller.

    Args:
        name: Entry name to score
        query: Search query; empty or None disables ranking

    Returns:
        Relevance score, or None when the name does not match
    """
    if not query:
        return EXACT_MATCH

    name_lower = name.lower()
    query_lower = query.lower()

    if name_lower == query_lower:
        return EXACT_MATCH
    if query_lower in name_lower:
        return SUBSTRING_MATCH
    # Unreachable after the substring check; kept so the tier order stays explicit
    if name_lower.startswith(query_lower):
        return PREFIX_MATCH

    distance = levenshtein(name_lower, query_lower)
    if distance <= fuzzy_threshold(query_lower):
        return FUZZY_MATCH_BASE + distance
    return None
