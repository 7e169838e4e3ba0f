"""Next-action timing and pipeline health."""

import math
from datetime import date
from typing import Iterable, List, Optional, Sequence, Union

from rolodex.core.models import CtoPipelineItem, PipelineHealth, PipelineItem
from rolodex.core.types import Urgency

Entry = Union[PipelineItem, CtoPipelineItem]


def days_until_next_action(
    next_action_date: Optional[date], today: Optional[date] = None
) -> Optional[int]:
    """Whole days from ``today`` to the action date, negative when past."""
    if next_action_date is None:
        return None
    today = today or date.today()
    return (next_action_date - today).days


def is_overdue(next_action_date: Optional[date], today: Optional[date] = None) -> bool:
    days = days_until_next_action(next_action_date, today)
    return days is not None and days < 0


def urgency_level(
    next_action_date: Optional[date], today: Optional[date] = None
) -> Urgency:
    days = days_until_next_action(next_action_date, today)
    if days is None:
        return Urgency.LOW
    if days < 0:
        return Urgency.OVERDUE
    if days <= 1:
        return Urgency.HIGH
    if days <= 3:
        return Urgency.MEDIUM
    return Urgency.LOW


def describe_days_until(
    next_action_date: Optional[date], today: Optional[date] = None
) -> str:
    """Human wording for the time left until an action, as used in exports."""
    days = days_until_next_action(next_action_date, today)
    if days is None:
        return "No date set"
    if days < 0:
        return f"{abs(days)} days overdue"
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    return f"{days} days"


def pipeline_health(
    entries: Iterable[Entry], today: Optional[date] = None
) -> PipelineHealth:
    """Score how well the pipeline's next actions are being kept.

    Starts at 100, loses up to 40 points for the share of overdue entries and
    up to 30 points for the share of entries with no action date.
    """
    items: Sequence[Entry] = list(entries)
    total = len(items)
    if total == 0:
        return PipelineHealth(score=100)

    days = [days_until_next_action(i.next_action_date, today) for i in items]
    overdue = sum(1 for d in days if d is not None and d < 0)
    actionable_today = sum(1 for d in days if d == 0)
    no_next_action = sum(1 for d in days if d is None)

    score = 100.0
    score -= (overdue / total) * 40
    score -= (no_next_action / total) * 30
    score = max(0.0, min(100.0, score))

    return PipelineHealth(
        score=math.floor(score + 0.5),
        overdue=overdue,
        actionable_today=actionable_today,
        no_next_action=no_next_action,
    )


def validate_pipeline_item(entry: Entry, today: Optional[date] = None) -> List[str]:
    """Check a pipeline entry before it is saved.

    Returns:
        List of error messages, empty when the entry is valid
    """
    errors = []

    if not entry.contact_id:
        errors.append("Contact is required")
    if not entry.stage:
        errors.append("Pipeline stage is required")

    if is_overdue(entry.next_action_date, today):
        errors.append("Next action date should be today or in the future")

    return errors
