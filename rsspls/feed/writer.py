"""
RSS 2.0 serialization and output sinks.
"""

import logging
import re
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from lxml import etree

from ..exceptions import SerializationError
from ..models.feed import Feed
from ..models.source import SourceRule
from ..utils.date_normalizer import format_rfc2822

logger = logging.getLogger(__name__)

# Characters XML 1.0 does not allow in text content
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def _clean(text: str) -> str:
    return _INVALID_XML_CHARS.sub("", text)


def _text_element(parent: etree._Element, tag: str, text: str) -> etree._Element:
    element = etree.SubElement(parent, tag)
    element.text = _clean(text)
    return element


def render_feed(feed: Feed) -> bytes:
    """
    Serialize a feed as an RSS 2.0 document.

    Equal feeds always render to identical bytes.

    Raises:
        SerializationError: If the feed cannot be encoded as XML
    """
    try:
        rss = etree.Element("rss", version="2.0")
        channel = etree.SubElement(rss, "channel")
        _text_element(channel, "title", feed.title)
        _text_element(channel, "link", feed.link or "")
        _text_element(channel, "description", feed.description)
        _text_element(channel, "generator", feed.generator)

        for entry in feed.entries:
            item = etree.SubElement(channel, "item")
            _text_element(item, "title", entry.title)
            _text_element(item, "link", entry.link)
            if entry.description is not None:
                _text_element(item, "description", entry.description)
            if entry.pub_date is not None:
                _text_element(item, "pubDate", format_rfc2822(entry.pub_date))

        return etree.tostring(rss, xml_declaration=True, encoding="UTF-8", pretty_print=True)
    except (ValueError, etree.LxmlError) as e:
        raise SerializationError(f"unable to render feed {feed.title!r}: {e}") from e


def feed_filename(rule: SourceRule) -> str:
    """File name for a rule's feed: the configured one, else a slug of the title."""
    if rule.filename:
        return rule.filename
    slug = _SLUG_CHARS.sub("-", rule.title.lower()).strip("-")
    return f"{slug or 'feed'}.rss"


class StdoutSink:
    """Writes every feed to standard output, one document after another."""

    def __init__(self, stream: Optional[BinaryIO] = None):
        self.stream = stream

    def write(self, rule: SourceRule, document: bytes) -> str:
        stream = self.stream if self.stream is not None else sys.stdout.buffer
        try:
            stream.write(document)
            stream.flush()
        except (OSError, ValueError) as e:
            raise SerializationError(f"unable to write feed for {rule.url}: {e}") from e
        return "<stdout>"


class DirectorySink:
    """Writes each feed to its own file inside an output directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def write(self, rule: SourceRule, document: bytes) -> str:
        path = self.output_dir / feed_filename(rule)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(document)
        except OSError as e:
            raise SerializationError(f"unable to write feed for {rule.url} to {path}: {e}") from e
        logger.debug(f"Wrote {len(document)} bytes to {path}")
        return str(path)
