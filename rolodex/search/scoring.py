"""Weighted substring relevance scoring.

Each record type lists the text fields a query is matched against, with a
fixed weight per field. A field containing the query adds its weight to the
score; a record scoring 0 is not a match.
"""

from typing import List, Optional, Protocol, Tuple

__all__ = ["Searchable", "score_record"]


class Searchable(Protocol):
    """Anything that exposes weighted text fields for search."""

    def searchable_fields(self) -> List[Tuple[Optional[str], int]]: ...


def score_record(record: Searchable, query: str) -> int:
    """Sum the weights of the fields that contain ``query``.

    Args:
        record: Record to score
        query: Lowercased, trimmed search text

    Returns:
        Relevance score, 0 when nothing matches
    """
    score = 0
    for value, weight in record.searchable_fields():
        if value and query in value.lower():
            score += weight
    return score
