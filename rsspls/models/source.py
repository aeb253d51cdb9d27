"""
Source rule data models.
"""

from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class SourceRule(BaseModel):
    """One configured page-to-feed mapping: where to fetch and how to pick items out."""

    title: str = Field(..., description="Feed title")
    url: str = Field(..., description="Page to scrape, also the base for relative links")
    item_selector: str = Field(..., description="CSS selector matching one element per item")
    heading_selector: str = Field(..., description="CSS selector for the linked heading inside an item")
    summary_selector: Optional[str] = Field(None, description="CSS selector for the item summary")
    date_selector: Optional[str] = Field(None, description="CSS selector for the item date")
    filename: Optional[str] = Field(None, description="Output file name when writing to a directory")

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid URL format: {value}")
        return value

    @field_validator("item_selector", "heading_selector")
    @classmethod
    def validate_required_selector(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("selector must not be empty")
        return value

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Example Blog",
                "url": "https://example.com/blog/",
                "item_selector": "li.post",
                "heading_selector": "a.title",
                "summary_selector": "p.excerpt",
                "date_selector": "time",
                "filename": "example-blog.rss",
            }
        }
