"""Load engine for exporting record collections to data files."""

import asyncio
import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import polars as pl

from rolodex.contacts import is_high_value
from rolodex.core.exceptions import LoadError
from rolodex.core.models import Contact, CtoPipelineItem, Event, ExportConfig, PipelineItem
from rolodex.core.types import DatasetKind, SourceType
from rolodex.events import event_status
from rolodex.pipeline.tracking import describe_days_until
from rolodex.search.aggregator import format_long_date

from .extract import detect_source_type

logger = logging.getLogger(__name__)

EXPORT_HEADERS: Dict[DatasetKind, List[str]] = {
    DatasetKind.CONTACTS: [
        "Name",
        "Email",
        "Additional Emails",
        "Company",
        "Job Title",
        "Contact Type",
        "Area",
        "LinkedIn URL",
        "In CTO Club",
        "General Notes",
    ],
    DatasetKind.EVENTS: [
        "Event Name",
        "Event Type",
        "Event Date",
        "Location",
        "Description",
        "Max Attendees",
        "Status",
    ],
    DatasetKind.PIPELINE: [
        "Contact Name",
        "Contact Email",
        "Company",
        "Job Title",
        "Pipeline Stage",
        "Next Action",
        "Next Action Date",
        "Days Until Action",
        "Is High Value",
    ],
    DatasetKind.CTO_PIPELINE: [
        "Contact Name",
        "Contact Email",
        "Company",
        "Status",
        "Next Action",
        "Next Action Date",
        "Notes",
    ],
}


def format_short_date(value: Optional[date]) -> str:
    """``Mar 3, 2025`` style date, or ``No date``."""
    if value is None:
        return "No date"
    return f"{value:%b} {value.day}, {value.year}"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def contact_row(contact: Contact) -> List[str]:
    return [
        contact.display_name,
        contact.email or "",
        ", ".join(contact.additional_emails),
        contact.company or "",
        contact.job_title or "",
        contact.contact_type or "",
        contact.area.value if contact.area else "",
        contact.linkedin_url or "",
        _yes_no(contact.is_in_cto_club),
        contact.general_notes or "",
    ]


def event_row(event: Event, today: Optional[date] = None) -> List[str]:
    return [
        event.name,
        event.event_type,
        format_long_date(event.event_date),
        event.location or "",
        event.description or "",
        str(event.max_attendees) if event.max_attendees is not None else "",
        event_status(event, today),
    ]


def pipeline_row(item: PipelineItem, today: Optional[date] = None) -> List[str]:
    contact = item.contact or Contact(id=item.contact_id)
    return [
        contact.display_name,
        contact.email or "",
        contact.company or "",
        contact.job_title or "",
        item.pipeline_stage,
        item.next_action_description or "",
        format_short_date(item.next_action_date),
        describe_days_until(item.next_action_date, today),
        _yes_no(is_high_value(contact)),
    ]


def cto_pipeline_row(item: CtoPipelineItem) -> List[str]:
    contact = item.contact or Contact(id=item.contact_id)
    return [
        contact.display_name,
        contact.email or "",
        contact.company or "",
        item.status,
        item.next_action or "",
        format_short_date(item.next_action_date),
        item.notes or "",
    ]


class LoadEngine:
    """Export records of one kind to a configured destination."""

    def __init__(self, config: ExportConfig, today: Optional[date] = None):
        """Initialize load engine.

        Args:
            config: Export destination and kind
            today: Reference date for "days until action" wording
        """
        self.config = config
        self.today = today
        self.destination_type = self._determine_destination_type()
        logger.info(
            f"Load engine initialized: kind={config.kind.value}, "
            f"destination={config.destination}, type={self.destination_type.value}"
        )

    def _determine_destination_type(self) -> SourceType:
        if self.config.destination_type:
            return self.config.destination_type
        return detect_source_type(self.config.destination, label="destination")

    def rows(self, records: Sequence) -> List[List[str]]:
        kind = self.config.kind
        if kind == DatasetKind.CONTACTS:
            return [contact_row(r) for r in records]
        if kind == DatasetKind.EVENTS:
            return [event_row(r, self.today) for r in records]
        if kind == DatasetKind.PIPELINE:
            return [pipeline_row(r, self.today) for r in records]
        return [cto_pipeline_row(r) for r in records]

    async def load(self, records: Sequence) -> int:
        """Write all records to the destination, replacing any existing file.

        Args:
            records: Records of the configured kind

        Returns:
            Number of rows written

        Raises:
            LoadError: If writing fails
        """
        logger.info(
            f"Starting export to {self.config.destination}: {len(records)} records"
        )
        try:
            written = await asyncio.to_thread(self._load_sync, records)
        except Exception as e:
            logger.error(
                f"Export failed to {self.config.destination}: {type(e).__name__}: {e}"
            )
            raise LoadError(f"Failed to export to {self.config.destination}: {e}")

        logger.info(f"Exported {written} records to {self.config.destination}")
        return written

    def _load_sync(self, records: Sequence) -> int:
        path = Path(self.config.destination)
        path.parent.mkdir(parents=True, exist_ok=True)

        headers = EXPORT_HEADERS[self.config.kind]
        rows = self.rows(records)
        if rows:
            df = pl.DataFrame(rows, schema=headers, orient="row")
        else:
            df = pl.DataFrame(schema={h: pl.Utf8 for h in headers})
        logger.debug(f"Created DataFrame: {len(df)} rows, {len(df.columns)} columns")

        self._write(df, path)
        return len(df)

    def _write(self, df: pl.DataFrame, path: Path) -> None:
        if self.destination_type == SourceType.CSV:
            df.write_csv(path)
        elif self.destination_type == SourceType.JSON:
            df.write_json(path)
        elif self.destination_type == SourceType.JSONL:
            df.write_ndjson(path)
        elif self.destination_type == SourceType.PARQUET:
            df.write_parquet(path)
        else:
            raise LoadError(f"Unsupported destination type: {self.destination_type}")
