"""Test helpers for the job board test suite."""

from .factories import make_posting
from .fake_store import InMemoryJobStore, UnavailableJobStore

__all__ = ["make_posting", "InMemoryJobStore", "UnavailableJobStore"]
