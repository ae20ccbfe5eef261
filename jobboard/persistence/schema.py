"""Database schema definition and ORM models.

This module defines SQLAlchemy ORM models for the database schema and provides
conversion methods between ORM models and domain models.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Column, Index, Integer, String, Text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from jobboard.domain.models import JobPosting

logger = logging.getLogger(__name__)

# Create base class for ORM models
Base = declarative_base()


class JobPostingModel(Base):
    """ORM model for jobs table.

    Stores job postings together with their approval flag.
    """

    __tablename__ = "jobs"

    id = Column(String(64), primary_key=True, nullable=False)

    # Listing details
    title = Column(Text, nullable=False)
    company = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    location = Column(String(255), nullable=True)
    remote = Column(Boolean, nullable=False, default=False)
    salary = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    application_url = Column(Text, nullable=True)

    # Moderation
    approved = Column(Boolean, nullable=False, default=False)

    # Stored as fixed-width ISO 8601 UTC strings so that text ordering is time ordering
    created_at = Column(String(50), nullable=False)

    __table_args__ = (
        Index("idx_jobs_approved_created", "approved", "created_at"),
        Index("idx_jobs_location", "location"),
    )

    def to_domain(self) -> JobPosting:
        """Convert ORM model to domain model.

        Returns:
            JobPosting: Domain model instance
        """
        return JobPosting(
            id=self.id,
            title=self.title,
            company=self.company,
            type=self.type,
            location=self.location,
            remote=bool(self.remote),
            approved=bool(self.approved),
            created_at=_parse_datetime(self.created_at),
            salary=self.salary,
            description=self.description,
            application_url=self.application_url,
        )

    @classmethod
    def from_domain(cls, posting: JobPosting) -> "JobPostingModel":
        """Create ORM model from domain model.

        Args:
            posting: Domain model instance

        Returns:
            JobPostingModel: ORM model instance
        """
        return cls(
            id=posting.id,
            title=posting.title,
            company=posting.company,
            type=posting.type,
            location=posting.location,
            remote=posting.remote,
            approved=posting.approved,
            created_at=_format_datetime(posting.created_at),
            salary=posting.salary,
            description=posting.description,
            application_url=posting.application_url,
        )


def _format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime as ISO 8601 string for database storage.

    Args:
        dt: Datetime object (naive values are treated as UTC)

    Returns:
        ISO 8601 formatted string or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    # Microseconds are always written so every value has the same width
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _parse_datetime(dt_str: Optional[str]) -> Optional[datetime]:
    """Parse ISO 8601 string to datetime object.

    Args:
        dt_str: ISO 8601 formatted string

    Returns:
        Timezone-aware datetime in UTC or None
    """
    if dt_str is None or dt_str == "":
        return None

    dt_str = dt_str.rstrip("Z")

    try:
        dt = datetime.strptime(dt_str, "%Y-%m-%dT%H:%M:%S.%f")
    except ValueError:
        dt = datetime.strptime(dt_str, "%Y-%m-%dT%H:%M:%S")

    return dt.replace(tzinfo=timezone.utc)


def create_schema(engine: Engine) -> None:
    """Create all tables and indexes if they don't exist (idempotent).

    Args:
        engine: SQLAlchemy engine instance
    """
    logger.info("Creating database schema if not exists")

    try:
        Base.metadata.create_all(engine, checkfirst=True)

        from sqlalchemy import inspect
        inspector = inspect(engine)
        tables = inspector.get_table_names()
        logger.info(f"Database schema ready. Tables: {', '.join(tables)}")

    except Exception as e:
        logger.error(f"Failed to create database schema: {e}", exc_info=True)
        raise
