"""
Date normalization utilities for feed publication dates.
"""

import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional, Union

from dateutil import parser

logger = logging.getLogger(__name__)


def normalize_date(date_input: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Normalize a date input to a UTC datetime.

    Args:
        date_input: String as scraped from a page, datetime, or None

    Returns:
        UTC datetime object or None if parsing or conversion fails
    """
    if date_input is None:
        return None

    try:
        if isinstance(date_input, datetime):
            return ensure_utc_datetime(date_input)

        date_str = str(date_input).strip()
        if not date_str:
            return None

        # Out-of-range values can parse but still overflow when shifted to UTC
        return ensure_utc_datetime(parser.parse(date_str))
    except (ValueError, OverflowError) as e:
        logger.warning(f"Failed to normalize date '{date_input}': {e}")
        return None


def ensure_utc_datetime(dt: datetime) -> datetime:
    """
    Ensure a datetime object is in UTC timezone.

    Naive datetimes are assumed to already be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_rfc2822(dt: datetime) -> str:
    """Format a datetime the way RSS 2.0 expects in pubDate, e.g. 'Tue, 30 Sep 2025 19:50:52 GMT'."""
    return format_datetime(ensure_utc_datetime(dt), usegmt=True)
