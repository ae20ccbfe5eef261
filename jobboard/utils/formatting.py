"""Display helpers used by the listing templates."""

from datetime import datetime
from typing import Optional

from .timestamps import ensure_utc, utc_now


def format_money(amount: Optional[int], currency_symbol: str = "$") -> str:
    """Format a whole-unit amount with thousands separators.

    Example:
        >>> format_money(140000)
        '$140,000'
    """
    if amount is None:
        return ""
    return f"{currency_symbol}{amount:,}"


def relative_date(dt: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``dt`` was, in the largest whole unit.

    Example:
        >>> from datetime import timedelta
        >>> now = utc_now()
        >>> relative_date(now - timedelta(days=3), now=now)
        '3d ago'
    """
    now = ensure_utc(now) if now is not None else utc_now()
    seconds = int((now - ensure_utc(dt)).total_seconds())

    if seconds < 60:
        return "just now"

    for unit_seconds, suffix in ((31536000, "y"), (2592000, "mo"), (86400, "d"), (3600, "h"), (60, "m")):
        if seconds >= unit_seconds:
            return f"{seconds // unit_seconds}{suffix} ago"

    return "just now"
