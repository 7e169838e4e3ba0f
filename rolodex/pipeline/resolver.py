"""Resolve the stage a pipeline entry moves to when a next action is picked."""

import logging
from datetime import date
from typing import Any, Optional, Union

from rolodex.core.models import CtoPipelineItem, PipelineItem, StageUpdate
from rolodex.core.types import PipelineKind

from .stages import transition_map

logger = logging.getLogger(__name__)

# Default for omitted arguments; an explicit None clears the field
_UNSET: Any = object()


def resolve_stage(kind: PipelineKind, current_stage: str, action: str) -> str:
    """Return the stage an entry should be in after ``action`` is selected.

    The stage tracks the category of the most recent action, not monotonic
    progress, so a known action can move an entry backward. Unknown actions
    and actions mapped to no stage leave ``current_stage`` as it is.

    Args:
        kind: Pipeline the entry belongs to
        current_stage: Stage the entry is in now
        action: Selected next action label

    Returns:
        Resolved stage value
    """
    kind = PipelineKind(kind)
    target = transition_map(kind).get(action)
    if not target:
        logger.debug(f"No stage change for {kind.value} action {action!r}")
        return current_stage

    if target != current_stage:
        logger.debug(
            f"{kind.value} stage {current_stage!r} -> {target!r} (action {action!r})"
        )
    return target


def resolve_relationship_stage(current_stage: str, action: str) -> str:
    return resolve_stage(PipelineKind.RELATIONSHIP, current_stage, action)


def resolve_cto_status(current_status: str, action: str) -> str:
    return resolve_stage(PipelineKind.CTO, current_status, action)


def apply_next_action(
    entry: Union[PipelineItem, CtoPipelineItem],
    action: str,
    next_action_date: Optional[date] = _UNSET,
    notes: Optional[str] = _UNSET,
) -> StageUpdate:
    """Build the update for an entry whose next action was just changed.

    The entry itself is left untouched; the returned update carries the
    resolved stage together with the other changed fields so the caller can
    persist them in a single write.

    Args:
        entry: Relationship or CTO pipeline entry
        action: Newly selected next action
        next_action_date: New due date. Omit to keep the entry's date, pass
            None to clear it
        notes: New notes, CTO entries only. Omit to keep the entry's notes,
            pass None to clear them

    Returns:
        StageUpdate describing the change
    """
    stage = resolve_stage(entry.kind, entry.stage, action)

    if next_action_date is _UNSET:
        next_action_date = entry.next_action_date
    if notes is _UNSET:
        notes = entry.notes if isinstance(entry, CtoPipelineItem) else None

    return StageUpdate(
        entry_id=entry.id,
        kind=entry.kind,
        previous_stage=entry.stage,
        stage=stage,
        next_action=action,
        next_action_date=next_action_date,
        notes=notes,
    )
