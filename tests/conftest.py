"""Shared fixtures: sample pages, an in-memory fetcher and sink."""

from typing import Dict, Union

import pytest

from rsspls.config import Settings
from rsspls.models import SourceRule
from rsspls.scanner.fetcher import FetchResponse

BLOG_URL = "https://example.com/blog/"

BLOG_HTML = """
<html>
  <body>
    <ul>
      <li class="post">
        <a class="title" href="/p/1">Text</a>
        <p class="excerpt">First <em>post</em></p>
        <time>2024-01-05</time>
      </li>
      <li class="post">
        <a class="title" href="/p/2">Text</a>
        <time>Tue, 30 Sep 2025 16:22:49 -0400</time>
      </li>
      <li class="post">
        <a class="title" href="https://other.example.org/p/3">Text</a>
        <p class="excerpt">Third</p>
      </li>
    </ul>
  </body>
</html>
"""

MISSING_HEADING_HTML = """
<ul>
  <li class="post"><a class="title" href="/p/1">Text</a></li>
  <li class="post"><span>No heading here</span></li>
  <li class="post"><a class="title" href="/p/3">Text</a></li>
</ul>
"""


@pytest.fixture
def settings():
    return Settings(_env_file=None, log="debug", fail_fast=True)


@pytest.fixture
def blog_rule():
    return SourceRule(
        title="Example Blog",
        url=BLOG_URL,
        item_selector="li.post",
        heading_selector="a.title",
        summary_selector="p.excerpt",
        date_selector="time",
    )


class FakeFetcher:
    """Serves canned responses; an Exception value is raised instead of returned."""

    def __init__(self, responses: Dict[str, Union[FetchResponse, Exception]]):
        self.responses = responses
        self.requested = []

    async def fetch(self, url: str) -> FetchResponse:
        self.requested.append(url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


class MemorySink:
    """Collects rendered feeds keyed by feed title."""

    def __init__(self):
        self.documents = {}

    def write(self, rule: SourceRule, document: bytes) -> str:
        self.documents[rule.title] = document
        return f"memory:{rule.title}"


def page(url: str, html: str, status: int = 200, reason: str = "OK") -> FetchResponse:
    return FetchResponse(url=url, status=status, reason=reason, text=html)
