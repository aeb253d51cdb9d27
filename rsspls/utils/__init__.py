"""
Shared helpers.
"""

from .date_normalizer import normalize_date, ensure_utc_datetime, format_rfc2822

__all__ = [
    "normalize_date",
    "ensure_utc_datetime",
    "format_rfc2822",
]
