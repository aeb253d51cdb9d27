"""
Extracted item data model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ExtractedItem(BaseModel):
    """One item scraped from a page, before it becomes a feed entry."""

    title_text: str = Field(..., description="Text content of the heading element")
    link: str = Field(..., min_length=1, description="Absolute URL of the item")
    summary_text: Optional[str] = Field(None, description="Text content of the summary element")
    date_text: Optional[str] = Field(None, description="Raw text content of the date element")

    class Config:
        frozen = True
