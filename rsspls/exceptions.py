"""
Exception hierarchy shared by the rsspls pipeline.
"""

from typing import Any, Dict, Optional


class RssplsError(Exception):
    """Base class for errors that fail a single source or the whole run."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(RssplsError):
    """Raised when the configuration file is missing, unreadable or invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, details={"path": path})
        self.path = path


class TransportError(RssplsError):
    """Raised when a page cannot be fetched or the server answered with a non-2xx status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message, details={"url": url, "status_code": status_code, "reason": reason})
        self.url = url
        self.status_code = status_code
        self.reason = reason


class SelectorError(RssplsError):
    """Raised when a CSS selector string cannot be parsed."""

    def __init__(self, selector: str, role: str, cause: Optional[str] = None):
        message = f"invalid selector for {role}: {selector}"
        if cause:
            message += f" ({cause})"
        super().__init__(message, details={"selector": selector, "role": role})
        self.selector = selector
        self.role = role


class ElementNotFound(RssplsError):
    """Raised when a first-match query finds nothing inside its scope."""

    def __init__(self, selector: str, role: str):
        super().__init__(
            f"no element matched {role} selector: {selector}",
            details={"selector": selector, "role": role},
        )
        self.selector = selector
        self.role = role


class ExtractionError(RssplsError):
    """Raised when the page structure does not match the configured rule."""


class MissingHeading(ExtractionError):
    """An item scope contained no element matching the heading selector."""

    def __init__(self, selector: str, item_index: int, url: str):
        super().__init__(
            f"item {item_index} on {url} has no element matching heading selector: {selector}",
            details={"selector": selector, "item_index": item_index, "url": url},
        )
        self.selector = selector
        self.item_index = item_index


class MissingLink(ExtractionError):
    """The element selected as heading has no usable 'href' attribute."""

    def __init__(self, selector: str, item_index: int, url: str):
        super().__init__(
            f"element selected as heading ({selector}) for item {item_index} on {url} "
            f"has no 'href' attribute",
            details={"selector": selector, "item_index": item_index, "url": url},
        )
        self.selector = selector
        self.item_index = item_index


class SerializationError(RssplsError):
    """Raised when a rendered feed cannot be written to its sink."""
