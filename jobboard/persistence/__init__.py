"""Persistence layer for database operations.

Public API:
    # Database initialization and session management
    - init_database(database_url: str) -> None
    - get_session() -> ContextManager[Session]
    - close_database() -> None

    # Data access
    - JobRepository: queries and inserts on job postings
    - JobStore / SqlJobStore: read interface injected into the web app

    # Exceptions
    - PersistenceError: Base exception for all persistence errors
    - StoreUnavailableError: A store query could not complete
    - DatabaseConnectionError: Database connection/initialization failures
    - DataIntegrityError: Constraint violations

Example usage:
    >>> from jobboard.persistence import init_database, SqlJobStore
    >>>
    >>> init_database("sqlite:///./data/job_board.db")
    >>> store = SqlJobStore()
    >>> jobs = store.find_approved()
"""

from .database import close_database, get_session, init_database
from .exceptions import (
    DatabaseConnectionError,
    DataIntegrityError,
    PersistenceError,
    StoreUnavailableError,
)
from .repositories import JobRepository
from .store import JobStore, SqlJobStore

__all__ = [
    # Database functions
    "init_database",
    "get_session",
    "close_database",
    # Data access
    "JobRepository",
    "JobStore",
    "SqlJobStore",
    # Exceptions
    "PersistenceError",
    "StoreUnavailableError",
    "DatabaseConnectionError",
    "DataIntegrityError",
]
