"""Data access layer (repositories) for persistence operations.

Repositories encapsulate database operations and return domain models rather
than ORM models.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.domain.models import JobFilter, JobPosting

from .exceptions import DataIntegrityError, StoreUnavailableError
from .schema import JobPostingModel

logger = logging.getLogger(__name__)

_SEARCHABLE_COLUMNS = (
    JobPostingModel.title,
    JobPostingModel.company,
    JobPostingModel.type,
    JobPostingModel.location,
)


class JobRepository:
    """Repository for job posting database operations."""

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def find_approved(self, criteria: Optional[JobFilter] = None) -> List[JobPosting]:
        """Fetch approved postings, most recent first.

        Args:
            criteria: Optional filter narrowing the listing

        Returns:
            List of JobPosting domain models ordered by created_at descending

        Raises:
            StoreUnavailableError: If the query cannot complete
        """
        try:
            stmt = select(JobPostingModel).where(JobPostingModel.approved.is_(True))

            clauses = _filter_clauses(criteria) if criteria is not None else []
            if clauses:
                stmt = stmt.where(*clauses)

            stmt = stmt.order_by(JobPostingModel.created_at.desc())
            job_models = self.session.execute(stmt).scalars().all()

            return _to_domain_skipping_invalid(job_models)

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving approved jobs: {e}", exc_info=True)
            raise StoreUnavailableError(f"Failed to retrieve jobs: {e}") from e

    def find_distinct_approved_locations(self) -> List[str]:
        """Fetch each distinct non-empty location among approved postings.

        Returns:
            Trimmed location strings in ascending order, never blank

        Raises:
            StoreUnavailableError: If the query cannot complete
        """
        trimmed = func.trim(JobPostingModel.location)
        try:
            stmt = (
                select(trimmed)
                .where(
                    JobPostingModel.approved.is_(True),
                    JobPostingModel.location.is_not(None),
                    trimmed != "",
                )
                .distinct()
                .order_by(trimmed)
            )
            rows = self.session.execute(stmt).scalars().all()

            # SQL TRIM only strips spaces; blank means blank to the domain model too
            return [location for location in rows if location and location.strip()]

        except SQLAlchemyError as e:
            logger.error(f"Error retrieving distinct locations: {e}", exc_info=True)
            raise StoreUnavailableError(f"Failed to retrieve locations: {e}") from e

    def get_by_id(self, posting_id: str) -> Optional[JobPosting]:
        """Retrieve a posting by primary key, approved or not.

        Raises:
            DataIntegrityError: If the stored row is not a valid posting
            StoreUnavailableError: If the query cannot complete
        """
        try:
            job_model = self.session.get(JobPostingModel, posting_id)
            return job_model.to_domain() if job_model is not None else None

        except ValidationError as e:
            logger.error(f"Stored job {posting_id} is invalid: {e}")
            raise DataIntegrityError(f"Stored job {posting_id} is invalid: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving job {posting_id}: {e}", exc_info=True)
            raise StoreUnavailableError(f"Failed to retrieve job: {e}") from e

    def add(self, posting: JobPosting) -> JobPosting:
        """Insert a new posting.

        Used by the seed script and tests; the listing itself never writes.

        Raises:
            DataIntegrityError: If a posting with the same id already exists
            StoreUnavailableError: If the insert cannot complete
        """
        try:
            job_model = JobPostingModel.from_domain(posting)
            self.session.add(job_model)
            self.session.flush()
            return job_model.to_domain()

        except IntegrityError as e:
            logger.error(f"Integrity error adding job {posting.id}: {e}", exc_info=True)
            raise DataIntegrityError(f"Failed to add job due to constraint violation: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error adding job {posting.id}: {e}", exc_info=True)
            raise StoreUnavailableError(f"Failed to add job: {e}") from e


def _filter_clauses(criteria: JobFilter) -> list:
    """Translate a JobFilter into SQL WHERE clauses."""
    clauses = []

    if criteria.query:
        # Every term must appear in at least one searchable column
        for term in criteria.query.split():
            clauses.append(
                or_(*(column.icontains(term, autoescape=True) for column in _SEARCHABLE_COLUMNS))
            )

    if criteria.type:
        clauses.append(JobPostingModel.type == criteria.type)

    if criteria.location:
        clauses.append(func.trim(JobPostingModel.location) == criteria.location)

    if criteria.remote:
        clauses.append(JobPostingModel.remote.is_(True))

    return clauses


def _to_domain_skipping_invalid(job_models) -> List[JobPosting]:
    """Convert rows to domain models, dropping rows that fail validation.

    Postings are written by an external process; a bad row is logged and
    left out of the listing.
    """
    postings = []
    for job_model in job_models:
        try:
            postings.append(job_model.to_domain())
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid stored job {job_model.id}: {e.error_count()} validation error(s)",
                extra={"event": "jobs.invalid_row_skipped", "job_id": job_model.id},
            )
    return postings
