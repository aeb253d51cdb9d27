"""
Data models for source rules, extracted items, feeds and run results.
"""

from .source import SourceRule
from .item import ExtractedItem
from .feed import Feed, FeedEntry
from .scan_result import SourceResult, SourceState

__all__ = [
    "SourceRule",
    "ExtractedItem",
    "Feed",
    "FeedEntry",
    "SourceResult",
    "SourceState",
]
