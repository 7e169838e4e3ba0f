"""Contact naming, validation and classification rules."""

import re
from typing import List

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from rolodex.core.models import Contact

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
LINKEDIN_RE = re.compile(r"^https://(www\.)?linkedin\.com/in/[a-zA-Z0-9-]+/?$")

_URL_ADAPTER = TypeAdapter(AnyUrl)

SENIOR_TITLES = ("ceo", "cto", "cfo", "coo", "vp", "director", "head of", "chief")
KEY_CONTACT_TYPES = frozenset({"Strategic Partner", "Key Executive", "Industry Leader"})


def display_name(contact: Contact) -> str:
    return contact.display_name


def professional_title(contact: Contact) -> str:
    """Job title and company, e.g. ``"CTO at Acme"``."""
    parts = []
    if contact.job_title:
        parts.append(contact.job_title)
    if contact.company:
        parts.append(f"at {contact.company}")
    return " ".join(parts) or "No title specified"


def all_emails(contact: Contact) -> List[str]:
    """Primary email followed by any additional addresses."""
    emails = [contact.email] if contact.email else []
    emails.extend(contact.additional_emails)
    return emails


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def is_valid_linkedin_url(url: str) -> bool:
    return bool(LINKEDIN_RE.match(url))


def is_valid_url(url: str) -> bool:
    """Absolute URL with a scheme and a host."""
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except PydanticValidationError:
        return False
    return bool(parsed.host)


def validate_contact(contact: Contact) -> List[str]:
    """Check a contact against the rules the contact forms enforce.

    Returns:
        List of error messages, empty when the contact is valid
    """
    errors = []

    has_name = (contact.first_name or contact.name or "").strip()
    email = (contact.email or "").strip()

    if not has_name and not email:
        errors.append("Contact must have either a name or email address")

    if email and not is_valid_email(email):
        errors.append("Please enter a valid email address")

    if not contact.contact_type:
        errors.append("Contact type is required")

    if contact.linkedin_url and not is_valid_linkedin_url(contact.linkedin_url):
        errors.append("Please enter a valid LinkedIn URL")

    return errors


def is_high_value(contact: Contact) -> bool:
    """CTO club members, senior titles and key contact types are high value."""
    if contact.is_in_cto_club:
        return True

    job_title = (contact.job_title or "").lower()
    if any(title in job_title for title in SENIOR_TITLES):
        return True

    return contact.contact_type in KEY_CONTACT_TYPES
