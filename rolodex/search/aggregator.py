"""Global search across contacts, events and pipeline entries."""

import logging
from datetime import date
from typing import Iterable, List, Optional

from rolodex.contacts import professional_title
from rolodex.core.models import Contact, Event, PipelineItem, SearchResult
from rolodex.core.types import ResultType

from .scoring import score_record

logger = logging.getLogger(__name__)

MAX_RESULTS = 10
MIN_QUERY_LENGTH = 2


def format_long_date(value: Optional[date]) -> str:
    """``Monday, March 3, 2025`` style date, or ``No date``."""
    if value is None:
        return "No date"
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def _contact_result(contact: Contact, relevance: int) -> SearchResult:
    return SearchResult(
        id=contact.id,
        type=ResultType.CONTACT,
        title=contact.display_name,
        subtitle=contact.email or "",
        description=professional_title(contact),
        url=f"/contacts?id={contact.id}",
        relevance=relevance,
    )


def _event_result(event: Event, relevance: int) -> SearchResult:
    description = event.event_type
    if event.location:
        description += f" at {event.location}"
    return SearchResult(
        id=event.id,
        type=ResultType.EVENT,
        title=event.name,
        subtitle=format_long_date(event.event_date),
        description=description,
        url=f"/events/{event.id}",
        relevance=relevance,
    )


def _pipeline_result(item: PipelineItem, relevance: int) -> SearchResult:
    title = item.contact.display_name if item.contact else "Unknown Contact"
    return SearchResult(
        id=item.id,
        type=ResultType.PIPELINE,
        title=title,
        subtitle=f"Pipeline: {item.pipeline_stage}",
        description=item.next_action_description or "No next action set",
        url=f"/pipeline?id={item.id}",
        relevance=relevance,
    )


def search(
    query: str,
    contacts: Iterable[Contact],
    events: Iterable[Event],
    pipeline_items: Iterable[PipelineItem],
    *,
    max_results: int = MAX_RESULTS,
    min_query_length: int = MIN_QUERY_LENGTH,
) -> List[SearchResult]:
    """Rank every record against ``query`` and keep the best hits.

    Queries shorter than ``min_query_length`` after trimming return nothing
    without scoring anything. Otherwise all records are scanned, non-matches
    dropped, and the rest sorted by relevance (highest first, ties kept in
    contacts, events, pipeline order) and cut to ``max_results``.

    Args:
        query: Raw search text
        contacts: Contacts to search
        events: Events to search
        pipeline_items: Relationship pipeline entries, joined to contacts
        max_results: Maximum number of results
        min_query_length: Shortest query that triggers a search

    Returns:
        Ranked search results
    """
    term = query.strip()
    if len(term) < min_query_length:
        return []
    term = term.lower()

    results: List[SearchResult] = []
    for contact in contacts:
        relevance = score_record(contact, term)
        if relevance > 0:
            results.append(_contact_result(contact, relevance))
    for event in events:
        relevance = score_record(event, term)
        if relevance > 0:
            results.append(_event_result(event, relevance))
    for item in pipeline_items:
        relevance = score_record(item, term)
        if relevance > 0:
            results.append(_pipeline_result(item, relevance))

    results.sort(key=lambda r: r.relevance, reverse=True)
    ranked = results[:max_results]
    logger.debug(
        f"Search {term!r}: {len(results)} matches, returning {len(ranked)}"
    )
    return ranked
