"""
Feed data models.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class FeedEntry(BaseModel):
    """A single RSS item."""

    title: str
    link: str
    description: Optional[str] = None
    pub_date: Optional[datetime] = Field(None, description="Publication date in UTC")

    class Config:
        frozen = True


class Feed(BaseModel):
    """A complete RSS channel ready for serialization."""

    title: str = Field(..., description="Channel title")
    link: Optional[str] = Field(None, description="Page the channel was generated from")
    description: str = Field("", description="Channel description")
    generator: str = Field(..., description="Tool that generated the channel")
    entries: Tuple[FeedEntry, ...] = Field(default_factory=tuple, description="Entries in page order")

    class Config:
        frozen = True
