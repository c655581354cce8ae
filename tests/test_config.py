"""Tests for session configuration and window placement."""

import pytest

from teleprompter.config import (
    ALIGNMENTS, PROMPTER_WIDTH, Rect, SessionConfig, bounds_for_alignment,
)

AREA = Rect(0, 25, 1920, 1055)


def test_from_payload_defaults():
    """Missing fields fall back to middle / medium / speed 5."""
    cfg = SessionConfig.from_payload({"text": "Hello"})
    assert cfg.alignment == "middle"
    assert cfg.window_height == "medium"
    assert cfg.speed == 5
    assert cfg.always_on_top is False
    assert cfg.height_px == 350


def test_from_payload_clamps_speed():
    """Speed outside 1..10 is pulled into range."""
    assert SessionConfig.from_payload({"text": "x", "speed": 99}).speed == 10
    assert SessionConfig.from_payload({"text": "x", "speed": 0}).speed == 1


def test_from_payload_rejects_unknown_alignment():
    """Alignment must be one of the nine named positions."""
    with pytest.raises(ValueError, match="alignment"):
        SessionConfig.from_payload({"text": "x", "alignment": "centre-ish"})


def test_from_payload_rejects_unknown_height():
    """Height class must be small, medium or large."""
    with pytest.raises(ValueError, match="height"):
        SessionConfig.from_payload({"text": "x", "window_height": "huge"})


def test_nine_alignments():
    """The grid names exactly nine distinct positions."""
    assert len(set(ALIGNMENTS)) == 9


@pytest.mark.parametrize("alignment, expected", [
    ("top-left",     "left"),
    ("left",         "left"),
    ("bottom",       "center"),
    ("middle",       "center"),
    ("top-right",    "right"),
    ("bottom-right", "right"),
])
def test_horizontal_alignment(alignment, expected):
    """Alignment name maps to a text alignment."""
    assert SessionConfig("x", alignment=alignment).horizontal == expected


@pytest.mark.parametrize("alignment, x, y", [
    ("top-left",     0,    25),
    ("top",          600,  25),
    ("top-right",    1200, 25),
    ("left",         0,    378),
    ("middle",       600,  378),
    ("right",        1200, 378),
    ("bottom-left",  0,    730),
    ("bottom",       600,  730),
    ("bottom-right", 1200, 730),
])
def test_bounds_for_alignment(alignment, x, y):
    """Windows are pinned to the work-area edges or centred."""
    assert bounds_for_alignment(alignment, 350, AREA) == Rect(x, y, PROMPTER_WIDTH, 350)
