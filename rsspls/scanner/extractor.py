"""
Item extraction from HTML pages using per-source selector rules.
"""

import logging
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import Tag
from soupsieve import SoupSieve

from ..exceptions import ExtractionError, MissingHeading, MissingLink
from ..models.item import ExtractedItem
from ..models.source import SourceRule
from .selector import SelectorMatcher, SelectorRole, compile_selector

logger = logging.getLogger(__name__)


class ItemExtractor:
    """Turns the repeated elements of a page into ExtractedItems."""

    def __init__(self, fail_fast: bool = True, logger: Optional[logging.Logger] = None):
        """
        Initialize the extractor.

        Args:
            fail_fast: Abort the whole source when an item has no heading or
                link. When False the offending item is skipped with a warning.
            logger: Logger for skipped items and match counts, defaults to the module logger
        """
        self.fail_fast = fail_fast
        self.logger = logger or logging.getLogger(__name__)

    def extract(self, matcher: SelectorMatcher, rule: SourceRule) -> List[ExtractedItem]:
        """
        Extract items from a parsed page.

        Args:
            matcher: Parsed page
            rule: Selectors describing where items, headings, summaries and dates are

        Returns:
            Items in document order

        Raises:
            SelectorError: If any configured selector is malformed
            MissingHeading: If an item has no heading (fail-fast only)
            MissingLink: If a heading has no href (fail-fast only)
        """
        item_selector = compile_selector(rule.item_selector, SelectorRole.ITEM)
        heading_selector = compile_selector(rule.heading_selector, SelectorRole.HEADING)
        summary_selector = self._compile_optional(rule.summary_selector, SelectorRole.SUMMARY)
        date_selector = self._compile_optional(rule.date_selector, SelectorRole.DATE)

        scopes = matcher.match_all(item_selector, SelectorRole.ITEM)
        self.logger.debug(f"Matched {len(scopes)} item elements on {rule.url}")

        items = []
        for index, scope in enumerate(scopes):
            try:
                item = self._extract_item(
                    matcher, scope, index, rule, heading_selector, summary_selector, date_selector
                )
            except ExtractionError as e:
                if self.fail_fast:
                    raise
                self.logger.warning(f"Skipping item: {e}")
                continue
            items.append(item)

        return items

    def _extract_item(
        self,
        matcher: SelectorMatcher,
        scope: Tag,
        index: int,
        rule: SourceRule,
        heading_selector: SoupSieve,
        summary_selector: Optional[SoupSieve],
        date_selector: Optional[SoupSieve],
    ) -> ExtractedItem:
        heading = matcher.find_first(scope, heading_selector, SelectorRole.HEADING)
        if heading is None:
            raise MissingHeading(rule.heading_selector, index, rule.url)

        href = heading.get("href")
        if href is None or not href.strip():
            raise MissingLink(rule.heading_selector, index, rule.url)

        summary = None
        if summary_selector is not None:
            summary = matcher.find_first(scope, summary_selector, SelectorRole.SUMMARY)

        date = None
        if date_selector is not None:
            date = matcher.find_first(scope, date_selector, SelectorRole.DATE)

        return ExtractedItem(
            title_text=heading.get_text(),
            link=urljoin(rule.url, href.strip()),
            summary_text=summary.get_text() if summary is not None else None,
            date_text=date.get_text() if date is not None else None,
        )

    @staticmethod
    def _compile_optional(selector: Optional[str], role: SelectorRole) -> Optional[SoupSieve]:
        if selector is None:
            return None
        return compile_selector(selector, role)


def extract_items(matcher: SelectorMatcher, rule: SourceRule, fail_fast: bool = True) -> List[ExtractedItem]:
    """Convenience function for extracting items from a parsed page."""
    return ItemExtractor(fail_fast=fail_fast).extract(matcher, rule)
