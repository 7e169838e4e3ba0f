"""Contact import from loosely formatted CSV files.

Spreadsheets exported from other tools name their columns in many ways
("Full Name", "E-mail Address", "Organization", ...). Headers are reduced to
lowercase alphanumerics and matched against known spellings; columns that
match nothing are ignored.
"""

import asyncio
import logging
import re
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Union

import polars as pl

from rolodex.contacts import is_valid_email, is_valid_url
from rolodex.core.exceptions import ContactImportError
from rolodex.core.models import Contact, ImportReport, ImportRowError
from rolodex.core.types import ContactArea

logger = logging.getLogger(__name__)

DEFAULT_CONTACT_TYPE = "prospect"
TRUTHY = frozenset({"yes", "true", "1"})

_NON_ALNUM = re.compile(r"[^a-z0-9]")

_EXACT_HEADERS: Dict[str, str] = {
    "name": "name",
    "fullname": "name",
    "contactname": "name",
    "email": "email",
    "emailaddress": "email",
    "primaryemail": "email",
    "company": "company",
    "organization": "company",
    "employer": "company",
    "jobtitle": "job_title",
    "title": "job_title",
    "position": "job_title",
    "role": "job_title",
    "contacttype": "contact_type",
    "type": "contact_type",
    "category": "contact_type",
    "area": "area",
    "contactarea": "area",
    "specialization": "area",
    "linkedinurl": "linkedin_url",
    "linkedin": "linkedin_url",
    "linkedinprofile": "linkedin_url",
    "generalnotes": "general_notes",
    "comments": "general_notes",
}


def normalize_header(header: str) -> str:
    return _NON_ALNUM.sub("", header.lower())


def match_header(header: str) -> Optional[str]:
    """Contact field a CSV header maps to, or None."""
    key = normalize_header(header)
    if key in _EXACT_HEADERS:
        return _EXACT_HEADERS[key]
    if "additional" in key and "email" in key:
        return "additional_emails"
    if "cto" in key or "club" in key:
        return "is_in_cto_club"
    if "note" in key:
        return "general_notes"
    return None


def map_headers(headers: List[str]) -> Dict[str, str]:
    """Map contact field -> first CSV column that supplies it."""
    mapping: Dict[str, str] = {}
    for header in headers:
        field = match_header(header)
        if field and field not in mapping:
            mapping[field] = header
    return mapping


class ContactImporter:
    """Parse contacts out of a CSV file."""

    def __init__(self, source: Union[str, Path]):
        self.source = Path(source)

    async def run(self) -> ImportReport:
        """Read and validate every row of the source file.

        Returns:
            ImportReport with the accepted contacts and rejected rows

        Raises:
            ContactImportError: If the file cannot be read
        """
        logger.info(f"Importing contacts from {self.source}")
        try:
            df = await asyncio.to_thread(self._read)
        except Exception as e:
            logger.error(f"Could not read {self.source}: {type(e).__name__}: {e}")
            raise ContactImportError(f"Failed to read {self.source}: {e}")

        report = self.process(df)
        logger.info(
            f"Import finished: {len(report.valid)}/{report.total} valid, "
            f"{len(report.errors)} rejected"
        )
        return report

    def _read(self) -> pl.DataFrame:
        if not self.source.exists():
            raise ContactImportError(f"Import file not found: {self.source}")
        return pl.read_csv(self.source, infer_schema_length=0)

    def process(self, df: pl.DataFrame) -> ImportReport:
        mapping = map_headers(df.columns)
        logger.debug(f"Header map: {mapping}")

        valid: List[Contact] = []
        errors: List[ImportRowError] = []

        for idx, row in enumerate(df.iter_rows(named=True)):
            row_number = idx + 2

            def get(field: str) -> str:
                column = mapping.get(field)
                if column is None:
                    return ""
                return (row.get(column) or "").strip()

            row_errors: List[str] = []
            name = get("name")
            email = get("email")

            if email and not is_valid_email(email):
                row_errors.append(f"Invalid email format: {email}")

            if not name and not email:
                row_errors.append("Contact must have either a name or email address")

            additional_emails = [e.strip() for e in get("additional_emails").split(",")]
            additional_emails = [e for e in additional_emails if e]
            for additional in additional_emails:
                if not is_valid_email(additional):
                    row_errors.append(f"Invalid additional email format: {additional}")

            linkedin_url = get("linkedin_url")
            if linkedin_url and not is_valid_url(linkedin_url):
                row_errors.append(f"Invalid LinkedIn URL format: {linkedin_url}")

            if row_errors:
                errors.append(ImportRowError(row=row_number, errors=row_errors))
                continue

            area = get("area").lower()
            valid.append(
                Contact(
                    id=str(uuid.uuid4()),
                    name=name or None,
                    email=email or None,
                    additional_emails=additional_emails,
                    company=get("company") or None,
                    job_title=get("job_title") or None,
                    contact_type=get("contact_type") or DEFAULT_CONTACT_TYPE,
                    area=area if area in {a.value for a in ContactArea} else None,
                    linkedin_url=linkedin_url or None,
                    general_notes=get("general_notes") or None,
                    is_in_cto_club=get("is_in_cto_club").lower() in TRUTHY,
                )
            )

        return ImportReport(valid=valid, errors=errors, total=len(df))
