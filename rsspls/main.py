"""
Command line entry point for rsspls.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import Settings, load_config, load_settings
from .exceptions import ConfigError
from .feed.writer import DirectorySink, StdoutSink
from .scanner.scanner import run_sources

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the level named by the settings."""
    level = logging.getLevelName(settings.log.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsspls",
        description="Generate an RSS feed from websites",
    )
    parser.add_argument(
        "-c",
        "--config",
        required=True,
        help="Path to configuration file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Directory to write feeds into. Overrides the configuration file; defaults to stdout",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """
    Run rsspls.

    Returns:
        Process exit code: 0 when every feed was generated, 1 otherwise
    """
    args = build_parser().parse_args(argv)
    try:
        settings = settings or load_settings()
    except ConfigError as e:
        # Settings are unusable, log with the defaults
        configure_logging(Settings.model_construct())
        logger.error(str(e))
        return 1
    configure_logging(settings)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    output = args.output or config.rsspls.output
    sink = DirectorySink(output) if output else StdoutSink()
    sources = config.sources()

    logger.info(f"🚀 Generating {len(sources)} feeds")
    try:
        ok = asyncio.run(run_sources(sources, settings, sink))
    except Exception:
        logger.exception("Feed generation aborted")
        return 1

    return 0 if ok else 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
