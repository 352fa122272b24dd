"""
Filtering and ordering of scored directory entries.
"""

from typing import List, Optional, Sequence
import logging

from ..models.entry import Entry


logger = logging.getLogger(__name__)


def assemble_results(
    entries: Sequence[Entry],
    scores: Sequence[Optional[int]],
    query: Optional[str]
) -> List[Entry]:
    """
    Apply the filtering and ordering policy to scored entries.

    Without a query the entries come back untouched, in enumeration order.
    With a query, entries scored None are dropped, the rest take their score
    as relevance and are sorted by it. The sort is stable and has no secondary
    key, so equally relevant entries keep their enumeration order.

    Args:
        entries: Entries in enumeration order
        scores: Score for each entry, None meaning no match
        query: The search query the scores were computed for

    Returns:
        Ordered list of entries

    Raises:
        ValueError: If entries and scores differ in length
    """
    if len(entries) != len(scores):
        raise ValueError(
            f"Got {len(scores)} scores for {len(entries)} entries"
        )

    if not query:
        return list(entries)

    ranked = [
        entry.with_relevance(score)
        for entry, score in zip(entries, scores)
        if score is not None
    ]
    ranked.sort(key=lambda entry: entry.relevance)

    logger.debug(f"Kept {len(ranked)} of {len(entries)} entries for query '{query}'")
    return ranked
