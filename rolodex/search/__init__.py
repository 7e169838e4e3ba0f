"""Global search over in-memory record collections."""

from .aggregator import MAX_RESULTS, MIN_QUERY_LENGTH, format_long_date, search
from .scoring import Searchable, score_record

__all__ = [
    "MAX_RESULTS",
    "MIN_QUERY_LENGTH",
    "Searchable",
    "format_long_date",
    "score_record",
    "search",
]
