"""Core type definitions and enums for the Rolodex."""

from enum import Enum


class PipelineKind(str, Enum):
    """Pipelines that track a contact's progress."""

    RELATIONSHIP = "relationship"
    CTO = "cto"


class RelationshipStage(str, Enum):
    """Relationship-building stages, in progression order."""

    INITIAL_OUTREACH = "Initial Outreach"
    FORMING = "Forming the Relationship"
    MAINTAINING = "Maintaining the Relationship"


class CtoStatus(str, Enum):
    """CTO club recruitment statuses, in progression order."""

    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    AWAITING_RESPONSE = "awaiting response"
    READY_FOR_NEXT_STEP = "ready for next step"


class ContactArea(str, Enum):
    """Business domain a contact works in."""

    ENGINEERING = "engineering"
    FOUNDERS = "founders"
    PRODUCT = "product"


class EventStatus(str, Enum):
    """Event lifecycle statuses."""

    DRAFT = "Draft"
    PLANNING = "Planning"
    READY = "Ready"
    INVITATIONS_SENT = "Invitations Sent"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class InvitationStatus(str, Enum):
    """Where a contact stands with an event invitation."""

    SOURCED = "Sourced"
    INVITED = "Invited"
    RSVP_YES = "RSVP_Yes"
    RSVP_NO = "RSVP_No"
    ATTENDED = "Attended"
    NO_SHOW = "No Show"


class ResultType(str, Enum):
    """Kinds of record a search result can point at."""

    CONTACT = "contact"
    EVENT = "event"
    PIPELINE = "pipeline"


class Urgency(str, Enum):
    """How pressing a pipeline entry's next action is."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    OVERDUE = "overdue"


class DatasetKind(str, Enum):
    """Record collections a workspace can hold."""

    CONTACTS = "contacts"
    EVENTS = "events"
    PIPELINE = "pipeline"
    CTO_PIPELINE = "cto_pipeline"


class SourceType(str, Enum):
    """Data file formats that can be read or written."""

    CSV = "csv"
    JSON = "json"
    JSONL = "jsonl"
    PARQUET = "parquet"
