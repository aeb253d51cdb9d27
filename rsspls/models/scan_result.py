"""
Per-source run result models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SourceState(str, Enum):
    """Pipeline stage a source has reached."""

    PENDING = "pending"
    FETCHING = "fetching"
    PARSING = "parsing"
    EXTRACTING = "extracting"
    ASSEMBLING = "assembling"
    SERIALIZED = "serialized"
    FAILED = "failed"


class SourceResult(BaseModel):
    """Outcome of processing one configured source."""

    source_url: str = Field(..., description="URL of the page that was scraped")
    title: str = Field(..., description="Feed title")
    state: SourceState = Field(SourceState.PENDING, description="Last stage reached")
    start_time: datetime = Field(default_factory=datetime.now, description="When processing started")
    end_time: Optional[datetime] = Field(None, description="When processing finished")
    duration_seconds: Optional[float] = Field(None, description="Processing time in seconds")

    entry_count: int = Field(0, description="Number of entries written to the feed")
    status_code: Optional[int] = Field(None, description="HTTP status of the page fetch")
    error: Optional[str] = Field(None, description="Error message if the source failed")
    failed_stage: Optional[SourceState] = Field(None, description="Stage at which the source failed")

    @property
    def success(self) -> bool:
        """Whether the feed was produced and written."""
        return self.state == SourceState.SERIALIZED

    def advance(self, state: SourceState):
        """Move to the next pipeline stage."""
        self.state = state

    def fail(self, error: str):
        """Mark the source as failed at its current stage."""
        self.failed_stage = self.state
        self.state = SourceState.FAILED
        self.error = error

    def finalize(self, end_time: Optional[datetime] = None):
        """Record end time and duration."""
        if end_time is None:
            end_time = datetime.now()

        self.end_time = end_time
        self.duration_seconds = (end_time - self.start_time).total_seconds()
