"""Persistence layer exceptions.

This module defines custom exceptions for database and persistence operations.
All persistence exceptions inherit from PersistenceError for easy catching.
"""


class PersistenceError(Exception):
    """Base exception for all persistence layer errors.

    All database-related exceptions should inherit from this class.
    This allows callers to catch all persistence errors with a single except clause.
    """

    pass


class StoreUnavailableError(PersistenceError):
    """Raised when a store query cannot complete.

    The page-render boundary treats this as a request-level failure.
    No retry is attempted.
    """

    pass


class DatabaseConnectionError(StoreUnavailableError):
    """Raised when database connection or initialization fails.

    Examples:
    - Invalid database URL format
    - Database file not accessible
    - Store used before init_database() was called
    """

    pass


class DataIntegrityError(PersistenceError):
    """Raised when database constraint violation occurs.

    Examples:
    - Primary key violation when seeding a posting twice
    - NOT NULL constraint violation
    """

    pass
