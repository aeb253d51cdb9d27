"""
Main feed generation orchestrator.
"""

import asyncio
import logging
from typing import List, Optional, Protocol, Sequence

from ..config import Settings
from ..exceptions import RssplsError, TransportError
from ..feed.assembler import assemble
from ..feed.writer import StdoutSink, render_feed
from ..models.scan_result import SourceResult, SourceState
from ..models.source import SourceRule
from .extractor import ItemExtractor
from .fetcher import AiohttpFetcher, FetchResponse
from .selector import SelectorMatcher

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, url: str) -> FetchResponse: ...


class FeedSink(Protocol):
    def write(self, rule: SourceRule, document: bytes) -> str: ...


class FeedScanner:
    """Runs every configured source through fetch, extract, assemble and write."""

    def __init__(
        self,
        fetcher: Fetcher,
        sink: FeedSink,
        settings: Settings,
        logger: Optional[logging.Logger] = None,
    ):
        self.fetcher = fetcher
        self.sink = sink
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.extractor = ItemExtractor(fail_fast=settings.fail_fast, logger=self.logger)

    async def run(self, sources: Sequence[SourceRule]) -> bool:
        """
        Process all sources concurrently.

        Args:
            sources: Source rules to turn into feeds

        Returns:
            True if every source produced and wrote its feed

        Raises:
            Exception: The first unexpected error raised inside a source task,
                once all tasks have finished
        """
        results = await self.scan_sources(sources)
        return all(result.success for result in results)

    async def scan_sources(self, sources: Sequence[SourceRule]) -> List[SourceResult]:
        """Process all sources concurrently and return one result per source, in input order."""
        tasks = [self.scan_source(rule) for rule in sources]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)

        results = []
        faults = []
        for rule, outcome in zip(sources, outcomes):
            if isinstance(outcome, BaseException):
                self.logger.error(f"Task for {rule.url} crashed: {outcome!r}")
                faults.append(outcome)
            else:
                results.append(outcome)

        if faults:
            raise faults[0]

        succeeded = sum(1 for result in results if result.success)
        self.logger.info(f"Finished: {succeeded}/{len(results)} feeds generated")
        for result in results:
            if not result.success:
                self.logger.error(
                    f"Failed source {result.title} ({result.source_url}) "
                    f"at {result.failed_stage.value}: {result.error}"
                )
        return results

    async def scan_source(self, rule: SourceRule) -> SourceResult:
        """
        Fetch one page, extract its items and write the resulting feed.

        Domain errors are logged and recorded on the result; they never
        propagate to the caller.
        """
        result = SourceResult(source_url=rule.url, title=rule.title)

        try:
            self.logger.info(f"Processing {rule.url}")

            result.advance(SourceState.FETCHING)
            response = await self.fetcher.fetch(rule.url)
            result.status_code = response.status
            if not response.ok:
                raise TransportError(
                    f"failed to fetch {rule.url}: {response.status} {response.reason or 'Unknown Status'}",
                    url=rule.url,
                    status_code=response.status,
                    reason=response.reason,
                )

            result.advance(SourceState.PARSING)
            matcher = SelectorMatcher.from_html(response.text)

            result.advance(SourceState.EXTRACTING)
            items = self.extractor.extract(matcher, rule)

            result.advance(SourceState.ASSEMBLING)
            feed = assemble(rule.title, items, link=rule.url)
            document = render_feed(feed)

            destination = self.sink.write(rule, document)
            result.entry_count = len(feed.entries)
            result.advance(SourceState.SERIALIZED)
            self.logger.info(f"Wrote {result.entry_count} entries for {rule.title} to {destination}")

        except RssplsError as e:
            self.logger.error(f"Error processing {rule.url}: {e}", extra={"details": e.details})
            result.fail(str(e))

        result.finalize()
        return result


async def run_sources(
    sources: Sequence[SourceRule],
    settings: Settings,
    sink: Optional[FeedSink] = None,
) -> bool:
    """Convenience function: fetch over HTTP and write feeds to the sink (stdout by default)."""
    async with AiohttpFetcher(settings) as fetcher:
        scanner = FeedScanner(fetcher, sink or StdoutSink(), settings)
        return await scanner.run(sources)
