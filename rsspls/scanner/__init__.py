"""
Page fetching, item extraction and feed generation orchestration.
"""

from .selector import SelectorMatcher, SelectorRole, compile_selector
from .extractor import ItemExtractor, extract_items
from .fetcher import AiohttpFetcher, FetchResponse
from .scanner import FeedScanner, run_sources

__all__ = [
    "SelectorMatcher",
    "SelectorRole",
    "compile_selector",
    "ItemExtractor",
    "extract_items",
    "AiohttpFetcher",
    "FetchResponse",
    "FeedScanner",
    "run_sources",
]
