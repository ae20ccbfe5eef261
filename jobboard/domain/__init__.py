"""Domain models for the Job Board."""

from .models import JOB_TYPES, JobFilter, JobPosting, JobType

__all__ = ["JobPosting", "JobType", "JobFilter", "JOB_TYPES"]
