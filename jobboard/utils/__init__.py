"""Utility functions for time handling and display formatting."""

from .formatting import format_money, relative_date
from .timestamps import ensure_utc, parse_iso_datetime, utc_now

__all__ = [
    # Timestamps
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    # Formatting
    "format_money",
    "relative_date",
]
