"""Core domain models for job postings and listing filters.

This module defines the data structures used throughout the application:
- JobType: the fixed set of employment types a posting may carry
- JobPosting: a job posting as read from the store
- JobFilter: the optional criteria a visitor may supply to narrow the listing
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class JobType(str, Enum):
    """Supported employment types."""

    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"
    VOLUNTEER = "Volunteer"


JOB_TYPES = [job_type.value for job_type in JobType]


class JobPosting(BaseModel):
    """A job posting as stored and listed.

    Postings are created outside the listing core and are never mutated by it.
    Only postings with ``approved`` set are ever shown to visitors.
    """

    id: str = Field(..., description="Unique posting identifier")
    title: str = Field(..., description="Job title")
    company: str = Field(..., description="Company name")
    type: JobType = Field(..., description="Employment type")
    location: Optional[str] = Field(None, description="Free-text job location")
    remote: bool = Field(False, description="Whether the job can be done remotely")
    approved: bool = Field(False, description="Whether the posting may be listed")
    created_at: datetime = Field(..., description="When the posting was created (UTC)")
    salary: Optional[int] = Field(None, ge=0, description="Yearly salary in whole units")
    description: Optional[str] = Field(None, description="Full job description text")
    application_url: Optional[str] = Field(None, description="Where to apply")

    @field_validator("id", "title", "company")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or whitespace-only")
        return v.strip()

    @field_validator("location")
    @classmethod
    def strip_location(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace from location field."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped if stripped else None

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    model_config = {"use_enum_values": True, "json_schema_extra": {"example": {
        "id": "c0a8012e-4f1b-4c1e-9a57-3e2f0d6b7a11",
        "title": "Senior Python Developer",
        "company": "Example Corp",
        "type": "Full-time",
        "location": "Redmond, Washington, United States",
        "remote": False,
        "approved": True,
        "created_at": "2025-11-01T12:00:00Z",
        "salary": 140000,
    }}}


class JobFilter(BaseModel):
    """Filter criteria submitted from the sidebar form or read from the page URL.

    Every field is optional. Blank strings are treated as absent so that an
    untouched form field never turns into an empty query parameter. Keys the
    schema does not know about (form bookkeeping, CSRF tokens) are ignored.
    """

    query: Optional[str] = Field(None, description="Free-text search")
    type: Optional[JobType] = Field(None, description="Employment type")
    location: Optional[str] = Field(None, description="Exact location")
    remote: bool = Field(False, description="Only remote jobs")

    @field_validator("query", "type", "location", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings as an absent field."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: Optional[str]) -> Optional[str]:
        """Trim the search text."""
        return v.strip() if v is not None else None

    @field_validator("remote", mode="before")
    @classmethod
    def checkbox_to_bool(cls, v: Any) -> Any:
        """An unchecked checkbox is simply missing from the form body."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        return v

    model_config = {"use_enum_values": True, "extra": "ignore"}

    @property
    def is_empty(self) -> bool:
        """True when no criterion narrows the listing."""
        return not (self.query or self.type or self.location or self.remote)
