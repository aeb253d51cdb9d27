"""
rsspls

Generate RSS feeds from web pages that don't have one.

Each configured source names a page and a set of CSS selectors. The page is
fetched, the repeated item elements are picked out with the selectors, and the
items become the entries of an RSS 2.0 feed.

Example
-------
import asyncio
from rsspls.config import Settings
from rsspls.models import SourceRule
from rsspls.scanner import run_sources

rule = SourceRule(
    title="Example Blog",
    url="https://example.com/blog/",
    item_selector="li.post",
    heading_selector="a.title",
)
ok = asyncio.run(run_sources([rule], Settings()))
"""

__version__ = "0.1.0"
