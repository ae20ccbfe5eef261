"""Read-side store interface consumed by the web layer.

The web app receives a JobStore instance explicitly instead of reaching for the
module-level session factory, so tests can hand it any implementation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from jobboard.domain.models import JobFilter, JobPosting
from jobboard.logging import get_logger

from .database import get_session
from .exceptions import StoreUnavailableError
from .repositories import JobRepository

logger = get_logger(__name__, component="store")


class JobStore(ABC):
    """The two read capabilities the job listing needs."""

    @abstractmethod
    def find_approved(self, criteria: Optional[JobFilter] = None) -> List[JobPosting]:
        """Return approved postings ordered by created_at descending.

        Raises:
            StoreUnavailableError: If the backing store cannot be queried
        """

    @abstractmethod
    def find_distinct_approved_locations(self) -> List[str]:
        """Return distinct non-empty locations among approved postings.

        Raises:
            StoreUnavailableError: If the backing store cannot be queried
        """

    def ping(self) -> bool:
        """Return True when the store answers a trivial query."""
        try:
            self.find_distinct_approved_locations()
            return True
        except StoreUnavailableError:
            return False


class SqlJobStore(JobStore):
    """JobStore backed by the SQLAlchemy session factory.

    Each call opens its own short-lived session.
    """

    def find_approved(self, criteria: Optional[JobFilter] = None) -> List[JobPosting]:
        try:
            with get_session() as session:
                postings = JobRepository(session).find_approved(criteria)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to retrieve jobs: {e}") from e

        logger.debug(
            f"Loaded {len(postings)} approved jobs",
            extra={"event": "store.approved_loaded", "job_count": len(postings)},
        )
        return postings

    def find_distinct_approved_locations(self) -> List[str]:
        try:
            with get_session() as session:
                return JobRepository(session).find_distinct_approved_locations()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to retrieve locations: {e}") from e
