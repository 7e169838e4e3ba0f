"""Unit tests for contact rules."""

import pytest

from rolodex.contacts import (
    all_emails,
    is_high_value,
    is_valid_email,
    is_valid_linkedin_url,
    is_valid_url,
    professional_title,
    validate_contact,
)
from rolodex.core.models import Contact


class TestProfessionalTitle:
    """Test professional title formatting."""

    def test_title_and_company(self):
        """Test title with company."""
        contact = Contact(id="1", job_title="CTO", company="Acme")
        assert professional_title(contact) == "CTO at Acme"

    def test_company_only(self):
        """Test company without a title."""
        assert professional_title(Contact(id="1", company="Acme")) == "at Acme"

    def test_nothing_set(self):
        """Test fallback wording."""
        assert professional_title(Contact(id="1")) == "No title specified"


class TestEmails:
    """Test email helpers."""

    def test_all_emails(self):
        """Test the primary address comes first."""
        contact = Contact(id="1", email="a@x.com", additional_emails=["b@x.com"])
        assert all_emails(contact) == ["a@x.com", "b@x.com"]

    def test_all_emails_without_primary(self):
        """Test additional addresses alone."""
        contact = Contact(id="1", additional_emails=["b@x.com"])
        assert all_emails(contact) == ["b@x.com"]

    def test_is_valid_email(self):
        """Test email shape check."""
        assert is_valid_email("jane@acme.com")
        assert not is_valid_email("not-an-email")
        assert not is_valid_email("jane @acme.com")

    def test_is_valid_linkedin_url(self):
        """Test LinkedIn profile URL check."""
        assert is_valid_linkedin_url("https://linkedin.com/in/janedoe")
        assert is_valid_linkedin_url("https://www.linkedin.com/in/jane-doe/")
        assert not is_valid_linkedin_url("http://linkedin.com/in/janedoe")
        assert not is_valid_linkedin_url("https://linkedin.com/company/acme")

    @pytest.mark.parametrize(
        "url,valid",
        [
            ("https://linkedin.com/in/janedoe", True),
            ("http://example.org/profile", True),
            ("not a url", False),
            ("linkedin.com/in/janedoe", False),
            ("", False),
        ],
    )
    def test_is_valid_url(self, url, valid):
        """Test absolute URL check."""
        assert is_valid_url(url) is valid


class TestValidateContact:
    """Test contact validation."""

    def test_valid_contact(self):
        """Test a complete contact has no errors."""
        contact = Contact(
            id="1",
            first_name="Jane",
            email="jane@acme.com",
            contact_type="vip",
            linkedin_url="https://linkedin.com/in/janedoe",
        )
        assert validate_contact(contact) == []

    def test_email_only_is_enough(self):
        """Test an email satisfies the name requirement."""
        contact = Contact(id="1", email="sam@example.org", contact_type="host")
        assert validate_contact(contact) == []

    def test_all_errors(self):
        """Test every rule reports in order."""
        contact = Contact(id="1", linkedin_url="linkedin.com/janedoe")

        assert validate_contact(contact) == [
            "Contact must have either a name or email address",
            "Contact type is required",
            "Please enter a valid LinkedIn URL",
        ]

    def test_bad_email(self):
        """Test a malformed email is reported."""
        contact = Contact(id="1", name="Bad", email="nope", contact_type="guest")
        assert validate_contact(contact) == ["Please enter a valid email address"]


class TestHighValue:
    """Test high-value classification."""

    def test_cto_club_member(self):
        """Test club members are high value."""
        assert is_high_value(Contact(id="1", is_in_cto_club=True))

    def test_senior_title(self):
        """Test senior titles are high value."""
        assert is_high_value(Contact(id="1", job_title="VP Engineering"))
        assert is_high_value(Contact(id="1", job_title="Head of Data"))

    def test_key_contact_type(self):
        """Test key contact types are high value."""
        assert is_high_value(Contact(id="1", contact_type="Strategic Partner"))

    def test_regular_contact(self):
        """Test other contacts are not high value."""
        assert not is_high_value(Contact(id="1", job_title="Engineer", contact_type="guest"))
