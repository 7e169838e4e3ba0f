"""The Rolodex - relationship pipelines, CTO club recruitment and global search."""

from .core import (
    ConfigurationError,
    Contact,
    ContactArea,
    ContactImportError,
    CtoPipelineItem,
    CtoStatus,
    DatasetConfig,
    DatasetKind,
    Event,
    EventInvitation,
    EventMetrics,
    EventStatus,
    ExportConfig,
    ExtractError,
    GlobalConfig,
    ImportReport,
    ImportRowError,
    InvitationStatus,
    LoadError,
    PipelineHealth,
    PipelineItem,
    PipelineKind,
    RelationshipStage,
    ResultType,
    RolodexError,
    SearchResult,
    SourceType,
    StageUpdate,
    Urgency,
    ValidationError,
    Workspace,
    WorkspaceConfig,
    WorkspaceError,
    config,
    get_config,
    reload_config,
)
from .pipeline import apply_next_action, resolve_stage

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    # Stage resolution
    "resolve_stage",
    "apply_next_action",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
]
