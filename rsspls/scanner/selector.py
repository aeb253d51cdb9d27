"""
CSS selector matching over parsed HTML documents.
"""

import logging
from enum import Enum
from typing import List, Optional

import soupsieve
from bs4 import BeautifulSoup, Tag
from soupsieve import SoupSieve

from ..exceptions import ElementNotFound, SelectorError

logger = logging.getLogger(__name__)


class SelectorRole(str, Enum):
    """What a selector is used for within a source rule."""

    ITEM = "item"
    HEADING = "heading"
    SUMMARY = "summary"
    DATE = "date"


def compile_selector(selector: str, role: SelectorRole) -> SoupSieve:
    """
    Compile a CSS selector string.

    Raises:
        SelectorError: If the selector cannot be parsed
    """
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorError(selector, role.value, cause=str(e).splitlines()[0]) from e


class SelectorMatcher:
    """Answers first-match and all-matches queries against one HTML document."""

    def __init__(self, document: BeautifulSoup):
        self.document = document

    @classmethod
    def from_html(cls, html: str) -> "SelectorMatcher":
        """Parse HTML text with lxml, which closes implied end tags such as </li> and </p>."""
        return cls(BeautifulSoup(html, "lxml"))

    def match_all(self, selector, role: SelectorRole) -> List[Tag]:
        """
        Return every element in the document matching the selector, in document order.

        Args:
            selector: Selector string or an already compiled selector
            role: What the selector is used for, reported on errors
        """
        compiled = self._compiled(selector, role)
        return compiled.select(self.document)

    def match_first(self, scope: Tag, selector, role: SelectorRole) -> Tag:
        """
        Return the first element matching the selector within the scope.

        The scope element itself takes part in matching and comes first in
        document order.

        Raises:
            SelectorError: If the selector cannot be parsed
            ElementNotFound: If nothing matches
        """
        element = self.find_first(scope, selector, role)
        if element is None:
            raise ElementNotFound(self._pattern(selector), role.value)
        return element

    def find_first(self, scope: Tag, selector, role: SelectorRole) -> Optional[Tag]:
        """Like match_first, but returns None when nothing matches."""
        compiled = self._compiled(selector, role)
        if compiled.match(scope):
            return scope
        return compiled.select_one(scope)

    @staticmethod
    def _compiled(selector, role: SelectorRole) -> SoupSieve:
        if isinstance(selector, SoupSieve):
            return selector
        return compile_selector(selector, role)

    @staticmethod
    def _pattern(selector) -> str:
        if isinstance(selector, SoupSieve):
            return selector.pattern
        return selector
