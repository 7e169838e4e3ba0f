"""Stage taxonomy, action catalogs and action-to-stage transition maps.

Each pipeline kind has its own ordered stages and its own table mapping a
known next action to the stage that action implies. The tables are never
mixed: relationship actions only move relationship entries and CTO actions
only move CTO entries.

An action mapped to ``None`` is known but leaves the stage where it is.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from rolodex.core.types import CtoStatus, PipelineKind, RelationshipStage

RELATIONSHIP_STAGES: Tuple[str, ...] = tuple(s.value for s in RelationshipStage)
CTO_STATUSES: Tuple[str, ...] = tuple(s.value for s in CtoStatus)

# Follow-up actions offered for relationship entries, grouped by category.
# "Schedule dinner" is listed under two categories.
FOLLOW_UP_ACTIONS: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {
        "initial-outreach": MappingProxyType(
            {
                "label": RelationshipStage.INITIAL_OUTREACH.value,
                "actions": (
                    "Connect on LinkedIn",
                    "Send thank you note",
                    "Send first catch-up email",
                ),
            }
        ),
        "forming-relationship": MappingProxyType(
            {
                "label": RelationshipStage.FORMING.value,
                "actions": (
                    "Second catch-up email",
                    "Schedule small 1:1 call",
                    "Schedule coffee meetup",
                    "Share something via email",
                    "Schedule dinner",
                ),
            }
        ),
        "maintaining-relationship": MappingProxyType(
            {
                "label": RelationshipStage.MAINTAINING.value,
                "actions": (
                    "Follow up call",
                    "Send valuable insight",
                    "Ask if they need any help/introduction",
                    "Schedule dinner",
                ),
            }
        ),
    }
)

CTO_OTHER_ACTION = "Other (specify in notes)"

CTO_NEXT_ACTIONS: Tuple[str, ...] = (
    "Initial outreach email",
    "Follow-up email",
    "Schedule intro call",
    "Send CTO Club information",
    "Schedule CTO Club visit",
    "Present membership proposal",
    "Follow up on proposal",
    "Complete onboarding",
    CTO_OTHER_ACTION,
)

RELATIONSHIP_ACTION_TO_STAGE: Mapping[str, Optional[str]] = MappingProxyType(
    {
        # Initial Outreach
        "Connect on LinkedIn": RelationshipStage.INITIAL_OUTREACH.value,
        "Send thank you note": RelationshipStage.INITIAL_OUTREACH.value,
        "Send first catch-up email": RelationshipStage.INITIAL_OUTREACH.value,
        # Forming the Relationship
        "Second catch-up email": RelationshipStage.FORMING.value,
        "Schedule small 1:1 call": RelationshipStage.FORMING.value,
        "Schedule coffee meetup": RelationshipStage.FORMING.value,
        "Share something via email": RelationshipStage.FORMING.value,
        # Maintaining the Relationship
        "Schedule dinner": RelationshipStage.MAINTAINING.value,
        "Follow up call": RelationshipStage.MAINTAINING.value,
        "Send valuable insight": RelationshipStage.MAINTAINING.value,
        "Ask if they need any help/introduction": RelationshipStage.MAINTAINING.value,
    }
)

CTO_ACTION_TO_STATUS: Mapping[str, Optional[str]] = MappingProxyType(
    {
        "Initial outreach email": CtoStatus.IN_PROGRESS.value,
        "Follow-up email": CtoStatus.IN_PROGRESS.value,
        "Schedule intro call": CtoStatus.AWAITING_RESPONSE.value,
        "Send CTO Club information": CtoStatus.AWAITING_RESPONSE.value,
        "Schedule CTO Club visit": CtoStatus.READY_FOR_NEXT_STEP.value,
        "Present membership proposal": CtoStatus.READY_FOR_NEXT_STEP.value,
        "Follow up on proposal": CtoStatus.READY_FOR_NEXT_STEP.value,
        "Complete onboarding": CtoStatus.READY_FOR_NEXT_STEP.value,
        CTO_OTHER_ACTION: None,
    }
)

_STAGES = MappingProxyType(
    {
        PipelineKind.RELATIONSHIP: RELATIONSHIP_STAGES,
        PipelineKind.CTO: CTO_STATUSES,
    }
)

_TRANSITIONS = MappingProxyType(
    {
        PipelineKind.RELATIONSHIP: RELATIONSHIP_ACTION_TO_STAGE,
        PipelineKind.CTO: CTO_ACTION_TO_STATUS,
    }
)


def stages_for(kind: PipelineKind) -> Tuple[str, ...]:
    """Ordered stage values for a pipeline kind."""
    return _STAGES[PipelineKind(kind)]


def transition_map(kind: PipelineKind) -> Mapping[str, Optional[str]]:
    """Action-to-stage table for a pipeline kind."""
    return _TRANSITIONS[PipelineKind(kind)]


def is_valid_stage(kind: PipelineKind, value: str) -> bool:
    return value in stages_for(kind)


def stage_level(kind: PipelineKind, value: str) -> int:
    """1-based position of a stage in its progression.

    Unknown values sit at level 1.
    """
    stages = stages_for(kind)
    if value in stages:
        return stages.index(value) + 1
    return 1


def actions_for(kind: PipelineKind) -> Tuple[str, ...]:
    """Known next actions for a pipeline kind, in catalog order, de-duplicated."""
    if PipelineKind(kind) is PipelineKind.CTO:
        return CTO_NEXT_ACTIONS
    seen = []
    for category in FOLLOW_UP_ACTIONS.values():
        for action in category["actions"]:
            if action not in seen:
                seen.append(action)
    return tuple(seen)
