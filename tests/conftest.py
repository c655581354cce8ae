"""Shared fixtures for teleprompter tests."""

import pytest

from teleprompter.scroll import ScrollController, build_geometry
from teleprompter.segmenter import SPACER, Segment


@pytest.fixture
def uniform_controller():
    """Build a laid-out controller: every block the same height, stacked from 0."""
    def _make(segments, block_h=40.0, viewport_h=100.0, speed=5):
        ctl = ScrollController(segments, speed=speed)
        extents, bottom = build_geometry([block_h] * len(segments))
        ctl.recompute_geometry(bottom, viewport_h, extents)
        return ctl
    return _make


@pytest.fixture
def script_segments():
    """Three paragraphs of two lines each, spacers between paragraphs."""
    return [
        Segment("Good evening."), Segment("Welcome to the show."),
        SPACER,
        Segment("Tonight's headline."), Segment("Markets rallied."),
        SPACER,
        Segment("And finally."), Segment("Good night."),
    ]
