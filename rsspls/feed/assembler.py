"""
Feed assembly from extracted items.
"""

import logging
from typing import Iterable, Optional

from ..models.feed import Feed, FeedEntry
from ..models.item import ExtractedItem
from ..utils.date_normalizer import normalize_date

logger = logging.getLogger(__name__)

GENERATOR = "RSS Please"


def build_entry(item: ExtractedItem) -> FeedEntry:
    """Map one extracted item to a feed entry, parsing its date if present."""
    pub_date = None
    if item.date_text is not None:
        pub_date = normalize_date(item.date_text)
        if pub_date is None:
            logger.warning(f"Dropping unparseable date {item.date_text!r} for {item.link}")

    return FeedEntry(
        title=item.title_text,
        link=item.link,
        description=item.summary_text,
        pub_date=pub_date,
    )


def assemble(
    title: str,
    items: Iterable[ExtractedItem],
    link: Optional[str] = None,
    description: Optional[str] = None,
) -> Feed:
    """
    Build a feed from extracted items.

    Any sequence of items, including an empty one, yields a valid feed.
    Entries keep the order of the items.

    Args:
        title: Channel title
        items: Extracted items in page order
        link: Page the items were scraped from
        description: Channel description, defaults to empty

    Returns:
        Immutable Feed value
    """
    entries = tuple(build_entry(item) for item in items)
    return Feed(
        title=title,
        link=link,
        description=description or "",
        generator=GENERATOR,
        entries=entries,
    )
