"""Unit tests for ExtractEngine."""

import pytest
from datetime import date
from pathlib import Path

from rolodex.core.exceptions import ConfigurationError, ExtractError
from rolodex.core.models import (
    Contact,
    CtoPipelineItem,
    DatasetConfig,
    Event,
    PipelineItem,
)
from rolodex.core.types import ContactArea, DatasetKind, SourceType
from rolodex.engines.extract import ExtractEngine, attach_contacts, detect_source_type

DATA = Path(__file__).parent.parent / "fixtures" / "data"


class TestDetectSourceType:
    """Test file format detection."""

    @pytest.mark.parametrize(
        "path,source_type",
        [
            ("contacts.csv", SourceType.CSV),
            ("events.JSON", SourceType.JSON),
            ("cto.jsonl", SourceType.JSONL),
            ("pipeline.parquet", SourceType.PARQUET),
        ],
    )
    def test_known_extensions(self, path, source_type):
        """Test supported extensions."""
        assert detect_source_type(path) == source_type

    def test_unsupported_extension(self):
        """Test unsupported extensions raise."""
        with pytest.raises(ConfigurationError) as exc_info:
            detect_source_type("contacts.txt")

        assert "Cannot determine source type" in str(exc_info.value)


class TestExtractEngine:
    """Test ExtractEngine functionality."""

    def test_init_with_explicit_source_type(self):
        """Test engine initialization with explicit source type."""
        config = DatasetConfig(
            kind=DatasetKind.CONTACTS,
            source=str(DATA / "contacts.csv"),
            source_type=SourceType.CSV,
        )
        engine = ExtractEngine(config)

        assert engine.config == config
        assert engine.source_type == SourceType.CSV
        assert engine.model is Contact

    def test_init_with_unsupported_extension(self):
        """Test engine initialization with unsupported file extension."""
        config = DatasetConfig(kind=DatasetKind.EVENTS, source="events.txt")

        with pytest.raises(ConfigurationError):
            ExtractEngine(config)

    @pytest.mark.asyncio
    async def test_extract_contacts_csv(self):
        """Test extracting contacts from CSV."""
        config = DatasetConfig(kind=DatasetKind.CONTACTS, source=str(DATA / "contacts.csv"))

        contacts = await ExtractEngine(config).extract()

        assert len(contacts) == 3
        jane, bob, sam = contacts
        assert isinstance(jane, Contact)
        assert jane.display_name == "Jane Doe"
        assert jane.additional_emails == ["jd@gmail.com", "jane.d@acme.com"]
        assert jane.area == ContactArea.ENGINEERING
        assert jane.is_in_cto_club is True
        assert bob.display_name == "Bob Smith"
        assert bob.is_in_cto_club is False
        assert bob.area is None
        assert sam.display_name == "sam@example.org"
        assert sam.is_in_cto_club is False

    @pytest.mark.asyncio
    async def test_extract_events_json(self):
        """Test extracting events from JSON."""
        config = DatasetConfig(kind=DatasetKind.EVENTS, source=str(DATA / "events.json"))

        events = await ExtractEngine(config).extract()

        assert [type(e) for e in events] == [Event, Event]
        assert events[0].event_date == date(2025, 3, 3)
        assert events[0].max_attendees == 12
        assert events[1].event_date == date(2025, 4, 10)
        assert events[1].location is None

    @pytest.mark.asyncio
    async def test_extract_pipeline_csv(self):
        """Test extracting relationship pipeline entries from CSV."""
        config = DatasetConfig(kind=DatasetKind.PIPELINE, source=str(DATA / "pipeline.csv"))

        items = await ExtractEngine(config).extract()

        assert len(items) == 3
        assert all(isinstance(i, PipelineItem) for i in items)
        assert items[0].next_action_date == date(2025, 3, 5)
        assert items[1].next_action_description is None
        assert items[1].next_action_date is None
        assert items[2].next_action_date == date(2025, 2, 20)
        assert items[2].last_action_date == date(2025, 2, 1)

    @pytest.mark.asyncio
    async def test_extract_cto_pipeline_jsonl(self):
        """Test extracting CTO entries from JSONL with numeric ids."""
        config = DatasetConfig(
            kind=DatasetKind.CTO_PIPELINE, source=str(DATA / "cto_pipeline.jsonl")
        )

        items = await ExtractEngine(config).extract()

        assert all(isinstance(i, CtoPipelineItem) for i in items)
        assert [i.id for i in items] == ["1", "2"]
        assert items[0].status == "in progress"
        assert items[1].next_action is None

    @pytest.mark.asyncio
    async def test_extract_missing_file(self):
        """Test extraction from a file that does not exist."""
        config = DatasetConfig(kind=DatasetKind.CONTACTS, source=str(DATA / "nope.csv"))

        with pytest.raises(ExtractError) as exc_info:
            await ExtractEngine(config).extract()

        assert "Source file not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_extract_invalid_row(self):
        """Test a row failing validation raises ExtractError."""
        config = DatasetConfig(
            kind=DatasetKind.EVENTS, source=str(DATA / "invalid_events.json")
        )

        with pytest.raises(ExtractError) as exc_info:
            await ExtractEngine(config).extract()

        assert "Invalid events row 0" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_extract_unreadable_file(self, tmp_path):
        """Test a malformed file is wrapped in ExtractError."""
        bad = tmp_path / "events.json"
        bad.write_text("{not json")
        config = DatasetConfig(kind=DatasetKind.EVENTS, source=str(bad))

        with pytest.raises(ExtractError) as exc_info:
            await ExtractEngine(config).extract()

        assert "Failed to extract" in str(exc_info.value)


class TestAttachContacts:
    """Test joining pipeline entries to contacts."""

    def test_join(self):
        """Test entries receive their contact and unknown ids stay None."""
        contacts = [Contact(id="c1", name="Jane"), Contact(id="c2", name="Bob")]
        items = [
            PipelineItem(id="1", contact_id="c2", pipeline_stage="Initial Outreach"),
            PipelineItem(id="2", contact_id="c9", pipeline_stage="Initial Outreach"),
        ]

        joined = attach_contacts(items, contacts)

        assert joined == 1
        assert items[0].contact.name == "Bob"
        assert items[1].contact is None
