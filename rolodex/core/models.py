"""Core Pydantic data models for the Rolodex."""

from datetime import date, datetime
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import (
    ContactArea,
    DatasetKind,
    InvitationStatus,
    PipelineKind,
    ResultType,
    SourceType,
)

SearchableField = Tuple[Optional[str], int]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _date_part(value: Any) -> Any:
    """Accept ISO timestamps where a calendar date is expected."""
    value = _blank_to_none(value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.split("T")[0]
    return value


class Contact(BaseModel):
    """A person in the rolodex."""

    model_config = ConfigDict(frozen=False, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique contact identifier")
    name: Optional[str] = Field(default=None, description="Full name as entered")
    first_name: Optional[str] = Field(default=None, description="Given name")
    last_name: Optional[str] = Field(default=None, description="Family name")
    email: Optional[str] = Field(default=None, description="Primary email")
    additional_emails: List[str] = Field(
        default_factory=list, description="Other email addresses"
    )
    company: Optional[str] = Field(default=None, description="Employer")
    job_title: Optional[str] = Field(default=None, description="Job title")
    contact_type: Optional[str] = Field(
        default=None, description="Contact type (guest, host, vip, ...)"
    )
    area: Optional[ContactArea] = Field(default=None, description="Business domain")
    linkedin_url: Optional[str] = Field(default=None, description="LinkedIn profile")
    is_in_cto_club: bool = Field(default=False, description="Current CTO club member")
    general_notes: Optional[str] = Field(default=None, description="Free-form notes")
    created_at: Optional[datetime] = Field(default=None, description="Creation time")

    @field_validator(
        "name",
        "first_name",
        "last_name",
        "email",
        "company",
        "job_title",
        "contact_type",
        "area",
        "linkedin_url",
        "general_notes",
        "created_at",
        mode="before",
    )
    @classmethod
    def _blank_strings(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("additional_emails", mode="before")
    @classmethod
    def _split_emails(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [e.strip() for e in value.split(",") if e.strip()]
        return value

    @field_validator("is_in_cto_club", mode="before")
    @classmethod
    def _null_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def display_name(self) -> str:
        """Name shown for the contact everywhere in the tool."""
        if self.first_name:
            return f"{self.first_name} {self.last_name or ''}".strip()
        if self.name:
            return self.name.strip()
        if self.email:
            return self.email
        return "Unknown Contact"

    def searchable_fields(self) -> List[SearchableField]:
        return [
            (self.display_name, 100),
            (self.email, 80),
            (self.company, 60),
            (self.job_title, 40),
            (self.contact_type, 30),
            (self.general_notes, 20),
        ]


class Event(BaseModel):
    """An event contacts are invited to."""

    model_config = ConfigDict(frozen=False, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique event identifier")
    name: str = Field(..., description="Event name")
    event_type: str = Field(..., description="Event type (product, engineering, ...)")
    event_date: Optional[date] = Field(default=None, description="Date of the event")
    location: Optional[str] = Field(default=None, description="Venue")
    description: Optional[str] = Field(default=None, description="Event description")
    max_attendees: Optional[int] = Field(
        default=None, ge=1, description="Attendance cap"
    )
    status: Optional[str] = Field(default=None, description="Event status")

    @field_validator("location", "description", "status", "max_attendees", mode="before")
    @classmethod
    def _blank_strings(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("event_date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        return _date_part(value)

    def searchable_fields(self) -> List[SearchableField]:
        return [
            (self.name, 100),
            (self.event_type, 80),
            (self.location, 60),
            (self.description, 40),
            (self.status, 30),
        ]


class EventInvitation(BaseModel):
    """A contact's invitation to an event."""

    model_config = ConfigDict(frozen=False, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique invitation identifier")
    event_id: str = Field(..., description="Event the invitation is for")
    contact_id: str = Field(..., description="Invited contact")
    status: InvitationStatus = Field(
        default=InvitationStatus.SOURCED, description="Invitation status"
    )
    follow_up_notes: Optional[str] = Field(default=None, description="Follow-up notes")


class _PipelineEntry(BaseModel):
    """Fields shared by both pipeline kinds."""

    model_config = ConfigDict(frozen=False, coerce_numbers_to_str=True)

    id: str = Field(..., description="Unique entry identifier")
    contact_id: str = Field(..., description="Contact this entry tracks")
    next_action_date: Optional[date] = Field(
        default=None, description="When the next action is due"
    )
    last_action_date: Optional[date] = Field(
        default=None, description="When the last action happened"
    )
    contact: Optional[Contact] = Field(
        default=None, exclude=True, description="Joined contact record"
    )

    @field_validator("next_action_date", "last_action_date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        return _date_part(value)


class PipelineItem(_PipelineEntry):
    """Relationship pipeline entry."""

    pipeline_stage: str = Field(..., description="Current relationship stage")
    next_action_description: Optional[str] = Field(
        default=None, description="Planned next outreach step"
    )

    @field_validator("next_action_description", mode="before")
    @classmethod
    def _blank_strings(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def kind(self) -> PipelineKind:
        return PipelineKind.RELATIONSHIP

    @property
    def stage(self) -> str:
        return self.pipeline_stage

    @property
    def next_action(self) -> Optional[str]:
        return self.next_action_description

    def searchable_fields(self) -> List[SearchableField]:
        contact = self.contact
        return [
            (contact.display_name if contact else None, 80),
            (self.pipeline_stage, 60),
            (self.next_action_description, 50),
            (contact.company if contact else None, 40),
        ]


class CtoPipelineItem(_PipelineEntry):
    """CTO club recruitment pipeline entry."""

    status: str = Field(default="not started", description="Recruitment status")
    next_action: Optional[str] = Field(default=None, description="Planned next step")
    notes: Optional[str] = Field(default=None, description="Recruitment notes")

    @field_validator("next_action", "notes", mode="before")
    @classmethod
    def _blank_strings(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def kind(self) -> PipelineKind:
        return PipelineKind.CTO

    @property
    def stage(self) -> str:
        return self.status


class StageUpdate(BaseModel):
    """Changes to hand to the pipeline update operation in one call."""

    model_config = ConfigDict(frozen=True)

    entry_id: str = Field(..., description="Pipeline entry being updated")
    kind: PipelineKind = Field(..., description="Pipeline the entry belongs to")
    previous_stage: str = Field(..., description="Stage before the action")
    stage: str = Field(..., description="Resolved stage after the action")
    next_action: str = Field(..., description="Selected next action")
    next_action_date: Optional[date] = Field(
        default=None, description="Due date of the next action"
    )
    notes: Optional[str] = Field(default=None, description="Updated notes")

    @property
    def stage_changed(self) -> bool:
        return self.stage != self.previous_stage


class SearchResult(BaseModel):
    """One ranked hit from a global search."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier of the matched record")
    type: ResultType = Field(..., description="Kind of matched record")
    title: str = Field(..., description="Primary display line")
    subtitle: str = Field(default="", description="Secondary display line")
    description: str = Field(default="", description="Detail line")
    url: str = Field(..., description="Where selecting the result navigates")
    relevance: int = Field(..., ge=0, description="Relevance score")


class PipelineHealth(BaseModel):
    """Summary of how well-kept a pipeline is."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Health score 0-100")
    overdue: int = Field(default=0, description="Entries past their action date")
    actionable_today: int = Field(default=0, description="Entries due today")
    no_next_action: int = Field(default=0, description="Entries without a date")


class EventMetrics(BaseModel):
    """Invitation response counts for one event."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, description="Invitations sent")
    responded: int = Field(default=0, description="RSVP yes or no")
    attending: int = Field(default=0, description="RSVP yes")
    declined: int = Field(default=0, description="RSVP no")
    pending: int = Field(default=0, description="No response yet")
    response_rate: int = Field(default=0, ge=0, le=100, description="Percent responded")
    attendance_rate: int = Field(default=0, ge=0, le=100, description="Percent attending")


class ImportRowError(BaseModel):
    """Problems found on one row of an import file."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., description="1-based row number, header is row 1")
    errors: List[str] = Field(..., description="Error messages")


class ImportReport(BaseModel):
    """Outcome of a contact import."""

    valid: List[Contact] = Field(default_factory=list, description="Parsed contacts")
    errors: List[ImportRowError] = Field(
        default_factory=list, description="Rejected rows"
    )
    total: int = Field(default=0, description="Data rows read, header excluded")


class DatasetConfig(BaseModel):
    """Location of one record collection."""

    model_config = ConfigDict(frozen=True)

    kind: DatasetKind = Field(..., description="Which collection the file holds")
    source: str = Field(..., description="Path to the data file")
    source_type: Optional[SourceType] = Field(
        default=None, description="File format (auto-detected from path if None)"
    )


class ExportConfig(BaseModel):
    """Destination of one export."""

    model_config = ConfigDict(frozen=True)

    kind: DatasetKind = Field(..., description="Which collection to export")
    destination: str = Field(..., description="Path to write")
    destination_type: Optional[SourceType] = Field(
        default=None, description="File format (auto-detected from path if None)"
    )


class WorkspaceConfig(BaseModel):
    """Data files making up one rolodex workspace."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Workspace name")
    contacts: Optional[str] = Field(default=None, description="Contacts file")
    events: Optional[str] = Field(default=None, description="Events file")
    pipeline: Optional[str] = Field(
        default=None, description="Relationship pipeline file"
    )
    cto_pipeline: Optional[str] = Field(
        default=None, description="CTO club pipeline file"
    )

    def datasets(self) -> List[DatasetConfig]:
        """Configured datasets, contacts first so pipelines can join them."""
        out = []
        for kind in DatasetKind:
            source = getattr(self, kind.value)
            if source:
                out.append(DatasetConfig(kind=kind, source=source))
        return out


class Workspace(BaseModel):
    """Record collections loaded from a workspace."""

    model_config = ConfigDict(frozen=False)

    name: Optional[str] = Field(default=None, description="Workspace name")
    contacts: List[Contact] = Field(default_factory=list, description="Contacts")
    events: List[Event] = Field(default_factory=list, description="Events")
    pipeline: List[PipelineItem] = Field(
        default_factory=list, description="Relationship pipeline entries"
    )
    cto_pipeline: List[CtoPipelineItem] = Field(
        default_factory=list, description="CTO club pipeline entries"
    )
