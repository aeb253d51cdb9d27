"""
Feed assembly and RSS output.
"""

from .assembler import GENERATOR, assemble, build_entry
from .writer import DirectorySink, StdoutSink, feed_filename, render_feed

__all__ = [
    "GENERATOR",
    "assemble",
    "build_entry",
    "render_feed",
    "feed_filename",
    "StdoutSink",
    "DirectorySink",
]
