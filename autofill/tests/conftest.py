"""
Pytest fixtures for matching engine tests.
Provides a sample profile and factories for field descriptors and scans.
"""
import os

import pytest

# Keep tests independent of any local .env
os.environ.setdefault("AUTOFILL_LOG_LEVEL", "INFO")
os.environ.setdefault("AUTOFILL_MATCH_TRACE_LOGGING", "false")

from autofill.app.schemas.form import FieldDescriptor


@pytest.fixture
def profile():
    """A fully populated profile, except gpa and two links which are empty."""
    return {
        "personal": {
            "firstName": "John",
            "lastName": "Doe",
            "email": "john@example.com",
            "phone": "+1 555 0100",
            "address": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
            "country": "USA",
        },
        "education": {
            "degree": "BSc",
            "major": "Computer Science",
            "university": "State University",
            "graduationYear": "2015",
            "gpa": "",
        },
        "experience": {
            "currentRole": "Engineer",
            "currentCompany": "Acme",
            "yearsOfExperience": "8",
            "skills": ["Python", "SQL"],
        },
        "links": {
            "linkedin": "https://linkedin.com/in/jdoe",
            "github": "https://github.com/jdoe",
            "portfolio": "",
            "website": "",
        },
        "documents": {"resume": "resume.pdf"},
    }


@pytest.fixture
def make_field():
    """Build a FieldDescriptor; id and selector default from the label."""
    counter = {"n": 0}

    def _make(label=None, type="text", **kwargs):
        counter["n"] += 1
        field_id = kwargs.pop("id", f"field-{counter['n']}")
        return FieldDescriptor(
            id=field_id,
            inputType=type,
            label=label,
            selectorHandle=kwargs.pop("selectorHandle", f"#{field_id}"),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_scan():
    """Wrap fields into a single-form scan payload (raw dict, as the scanner sends it)."""

    def _make(*fields, url="https://jobs.example.com/apply", timestamp="2026-01-01T00:00:00Z", **form_kwargs):
        form = {"id": form_kwargs.pop("form_id", "form-1"), "fields": list(fields), **form_kwargs}
        return {"url": url, "timestamp": timestamp, "forms": [form]}

    return _make
