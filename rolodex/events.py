"""Event timing, status, invitation metrics and validation rules."""

import math
from datetime import date, timedelta
from typing import Iterable, List, Optional

from rolodex.core.models import Event, EventInvitation, EventMetrics
from rolodex.core.types import EventStatus, InvitationStatus

UPCOMING_WINDOW_DAYS = 7

_RESPONDED = frozenset({InvitationStatus.RSVP_YES, InvitationStatus.RSVP_NO})


def is_upcoming(event: Event, today: Optional[date] = None) -> bool:
    """Event falls between today and a week from today, inclusive."""
    if event.event_date is None:
        return False
    today = today or date.today()
    return today <= event.event_date <= today + timedelta(days=UPCOMING_WINDOW_DAYS)


def is_past(event: Event, today: Optional[date] = None) -> bool:
    if event.event_date is None:
        return False
    today = today or date.today()
    return event.event_date < today


def event_status(event: Event, today: Optional[date] = None) -> str:
    """Stored status, or one derived from the event date when none is set.

    Past events are Completed, events within the upcoming window are Ready,
    everything else (including undated events) is Planning.
    """
    if event.status:
        return event.status
    if is_past(event, today):
        return EventStatus.COMPLETED.value
    if is_upcoming(event, today):
        return EventStatus.READY.value
    return EventStatus.PLANNING.value


def _percent(part: int, total: int) -> int:
    if total == 0:
        return 0
    return math.floor(part * 100 / total + 0.5)


def event_metrics(invitations: Iterable[EventInvitation]) -> EventMetrics:
    """Count responses to an event's invitations."""
    statuses = [inv.status for inv in invitations]
    total = len(statuses)
    responded = sum(1 for s in statuses if s in _RESPONDED)
    attending = sum(1 for s in statuses if s == InvitationStatus.RSVP_YES)
    declined = sum(1 for s in statuses if s == InvitationStatus.RSVP_NO)

    return EventMetrics(
        total=total,
        responded=responded,
        attending=attending,
        declined=declined,
        pending=total - responded,
        response_rate=_percent(responded, total),
        attendance_rate=_percent(attending, total),
    )


def validate_event(event: Event, today: Optional[date] = None) -> List[str]:
    """Check an event against the rules the event forms enforce.

    Returns:
        List of error messages, empty when the event is valid
    """
    errors = []

    if not (event.name or "").strip():
        errors.append("Event name is required")
    if event.event_date is None:
        errors.append("Event date is required")
    if not event.event_type:
        errors.append("Event type is required")

    if event.event_date is not None and is_past(event, today):
        errors.append("Event date cannot be in the past")

    if event.max_attendees is not None and event.max_attendees < 1:
        errors.append("Maximum attendees must be at least 1")

    return errors
