"""TelePrompter — segment a script and scroll it at reading speed."""

from teleprompter.scroll import ScrollController, SegmentExtent, build_geometry
from teleprompter.segmenter import SPACER, Segment, segment

__version__ = "1.0.0"

__all__ = [
    "SPACER",
    "ScrollController",
    "Segment",
    "SegmentExtent",
    "build_geometry",
    "segment",
]
