"""Pipeline stage rules: taxonomy, transitions and next-action tracking."""

from .resolver import (
    apply_next_action,
    resolve_cto_status,
    resolve_relationship_stage,
    resolve_stage,
)
from .stages import (
    CTO_ACTION_TO_STATUS,
    CTO_NEXT_ACTIONS,
    CTO_STATUSES,
    FOLLOW_UP_ACTIONS,
    RELATIONSHIP_ACTION_TO_STAGE,
    RELATIONSHIP_STAGES,
    actions_for,
    is_valid_stage,
    stage_level,
    stages_for,
    transition_map,
)
from .tracking import (
    days_until_next_action,
    describe_days_until,
    is_overdue,
    pipeline_health,
    urgency_level,
    validate_pipeline_item,
)

__all__ = [
    "RELATIONSHIP_STAGES",
    "CTO_STATUSES",
    "FOLLOW_UP_ACTIONS",
    "CTO_NEXT_ACTIONS",
    "RELATIONSHIP_ACTION_TO_STAGE",
    "CTO_ACTION_TO_STATUS",
    "stages_for",
    "transition_map",
    "is_valid_stage",
    "stage_level",
    "actions_for",
    "resolve_stage",
    "resolve_relationship_stage",
    "resolve_cto_status",
    "apply_next_action",
    "days_until_next_action",
    "describe_days_until",
    "is_overdue",
    "urgency_level",
    "pipeline_health",
    "validate_pipeline_item",
]
