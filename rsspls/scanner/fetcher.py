"""
Page fetching over HTTP.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
from aiohttp import ClientError, ClientTimeout
from pydantic import BaseModel, Field

from ..config import Settings
from ..exceptions import TransportError

logger = logging.getLogger(__name__)


class FetchResponse(BaseModel):
    """Status and body of a fetched page."""

    url: str = Field(..., description="URL that was requested")
    status: int = Field(..., description="HTTP status code")
    reason: Optional[str] = Field(None, description="HTTP status text")
    text: str = Field("", description="Decoded response body")

    @property
    def ok(self) -> bool:
        """Whether the status is 2xx."""
        return 200 <= self.status < 300


class AiohttpFetcher:
    """
    Fetches pages with one shared aiohttp session.

    Use as an async context manager; the session is closed on exit. A single
    instance is safe to share between concurrent source tasks.
    """

    def __init__(self, settings: Settings):
        self.timeout = ClientTimeout(
            total=settings.request_timeout_seconds,
            connect=settings.connect_timeout_seconds,
        )
        self.headers = {
            "User-Agent": settings.user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "AiohttpFetcher":
        self.session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def fetch(self, url: str) -> FetchResponse:
        """
        Fetch a URL and read its body as text.

        The status is not checked here; callers decide what counts as success.

        Raises:
            TransportError: On connection errors, timeouts or an undecodable body
        """
        if self.session is None:
            raise RuntimeError("AiohttpFetcher must be used as an async context manager")

        try:
            async with self.session.get(url) as response:
                logger.debug(f"Response {response.status} for {url}")
                try:
                    text = await response.text(errors="replace")
                except (ClientError, LookupError) as e:
                    raise TransportError(
                        f"unable to read response body from {url}: {e}",
                        url=url,
                        status_code=response.status,
                        reason=response.reason,
                    ) from e
                return FetchResponse(url=url, status=response.status, reason=response.reason, text=text)
        except asyncio.TimeoutError as e:
            raise TransportError(f"request timeout for {url}", url=url) from e
        except ClientError as e:
            raise TransportError(f"unable to fetch {url}: {e}", url=url) from e
