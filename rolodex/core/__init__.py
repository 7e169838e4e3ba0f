"""Core infrastructure for the Rolodex."""

from .config import GlobalConfig, config, get_config, reload_config, setup_logging
from .exceptions import (
    ConfigurationError,
    ContactImportError,
    ExtractError,
    LoadError,
    RolodexError,
    ValidationError,
    WorkspaceError,
)
from .models import (
    Contact,
    CtoPipelineItem,
    DatasetConfig,
    Event,
    EventInvitation,
    EventMetrics,
    ExportConfig,
    ImportReport,
    ImportRowError,
    PipelineHealth,
    PipelineItem,
    SearchResult,
    StageUpdate,
    Workspace,
    WorkspaceConfig,
)
from .types import (
    ContactArea,
    CtoStatus,
    DatasetKind,
    EventStatus,
    InvitationStatus,
    PipelineKind,
    RelationshipStage,
    ResultType,
    SourceType,
    Urgency,
)

__all__ = [
    # Types
    "PipelineKind",
    "RelationshipStage",
    "CtoStatus",
    "ContactArea",
    "EventStatus",
    "InvitationStatus",
    "ResultType",
    "Urgency",
    "DatasetKind",
    "SourceType",
    # Exceptions
    "RolodexError",
    "ConfigurationError",
    "ValidationError",
    "ExtractError",
    "LoadError",
    "ContactImportError",
    "WorkspaceError",
    # Models
    "Contact",
    "Event",
    "EventInvitation",
    "EventMetrics",
    "PipelineItem",
    "CtoPipelineItem",
    "StageUpdate",
    "SearchResult",
    "PipelineHealth",
    "ImportRowError",
    "ImportReport",
    "DatasetConfig",
    "ExportConfig",
    "Workspace",
    "WorkspaceConfig",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
    "setup_logging",
]
