"""
Configuration management for rsspls.

Runtime settings come from the environment (RSSPLS_* variables or a .env
file). The list of feeds comes from a TOML configuration file.
"""

import logging
import tomllib
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from . import __version__
from .exceptions import ConfigError
from .models.source import SourceRule

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Runtime settings."""

    # Logging level name, RSSPLS_LOG
    log: str = "info"

    # HTTP client
    connect_timeout_seconds: float = 10.0
    request_timeout_seconds: float = 30.0
    user_agent: str = f"rsspls/{__version__}"

    # Abort a source when an item has no heading or link, instead of skipping the item
    fail_fast: bool = True

    class Config:
        env_prefix = "RSSPLS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


class FeedConfig(BaseModel):
    """The [feed.config] table: where to fetch and which selectors to apply."""

    url: str
    item: str
    heading: str
    summary: Optional[str] = None
    date: Optional[str] = None

    class Config:
        extra = "forbid"


class ChannelConfig(BaseModel):
    """One [[feed]] entry."""

    title: str
    filename: Optional[str] = None
    config: FeedConfig

    class Config:
        extra = "forbid"

    def to_rule(self) -> SourceRule:
        return SourceRule(
            title=self.title,
            url=self.config.url,
            item_selector=self.config.item,
            heading_selector=self.config.heading,
            summary_selector=self.config.summary,
            date_selector=self.config.date,
            filename=self.filename,
        )


class GlobalConfig(BaseModel):
    """The optional [rsspls] table."""

    output: Optional[str] = Field(None, description="Directory to write feeds into instead of stdout")

    class Config:
        extra = "forbid"


class AppConfig(BaseModel):
    """Parsed configuration file."""

    rsspls: GlobalConfig = Field(default_factory=GlobalConfig)
    feed: List[ChannelConfig] = Field(default_factory=list)

    class Config:
        extra = "forbid"

    def sources(self) -> List[SourceRule]:
        """Source rules in file order."""
        return [channel.to_rule() for channel in self.feed]


def load_config(path: Union[str, Path]) -> AppConfig:
    """
    Read and validate a TOML configuration file.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, does not
            match the expected structure or defines no feeds
    """
    path = Path(path)
    try:
        raw_config = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"unable to read configuration file: {path} ({e})", path=str(path)) from e

    try:
        data = tomllib.loads(raw_config.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"unable to parse configuration file: {path} ({e})", path=str(path)) from e

    try:
        config = AppConfig.model_validate(data)
        # Build the rules once here so that URL and selector validation errors surface as config errors
        config.sources()
    except ValidationError as e:
        raise ConfigError(f"invalid configuration file: {path}\n{e}", path=str(path)) from e

    if not config.feed:
        raise ConfigError(f"no feeds defined in configuration file: {path}", path=str(path))

    logger.debug(f"Loaded {len(config.feed)} feeds from {path}")
    return config


def load_settings() -> Settings:
    """
    Read runtime settings from the environment.

    Raises:
        ConfigError: If an RSSPLS_* variable has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(f"invalid RSSPLS_* environment settings\n{e}") from e
