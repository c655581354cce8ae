"""Session configuration and teleprompter window placement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from teleprompter.scroll import DEFAULT_SPEED, SPEED_MAX, SPEED_MIN

# ── Window sizes ──────────────────────────────────────────────────────────────
PROMPTER_WIDTH = 720
HEIGHT_CLASSES: dict[str, int] = {
    "small":  275,
    "medium": 350,
    "large":  475,
}
DEFAULT_HEIGHT = "medium"

# 3×3 grid, row-major; the panel lays its alignment buttons out in this order
ALIGNMENT_GRID: list[list[str]] = [
    ["top-left",    "top",    "top-right"],
    ["left",        "middle", "right"],
    ["bottom-left", "bottom", "bottom-right"],
]
ALIGNMENTS: tuple[str, ...] = tuple(a for row in ALIGNMENT_GRID for a in row)
DEFAULT_ALIGNMENT = "middle"


class Rect(NamedTuple):
    x      : int
    y      : int
    width  : int
    height : int


@dataclass(frozen=True)
class SessionConfig:
    text          : str
    speed         : int  = DEFAULT_SPEED
    alignment     : str  = DEFAULT_ALIGNMENT
    window_height : str  = DEFAULT_HEIGHT
    always_on_top : bool = False

    @classmethod
    def from_payload(cls, payload: dict) -> SessionConfig:
        """
        Build a config from a loose dict (panel state, CLI, tests).

        Missing keys take defaults; speed is clamped into range.  Unknown
        alignment or height names raise ValueError.
        """
        alignment = payload.get("alignment") or DEFAULT_ALIGNMENT
        height    = payload.get("window_height") or DEFAULT_HEIGHT
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Unknown alignment: {alignment!r}")
        if height not in HEIGHT_CLASSES:
            raise ValueError(f"Unknown window height: {height!r}")
        speed = int(payload.get("speed", DEFAULT_SPEED))
        return cls(
            text          = payload.get("text") or "",
            speed         = max(SPEED_MIN, min(speed, SPEED_MAX)),
            alignment     = alignment,
            window_height = height,
            always_on_top = bool(payload.get("always_on_top", False)),
        )

    @property
    def height_px(self) -> int:
        return HEIGHT_CLASSES[self.window_height]

    @property
    def horizontal(self) -> str:
        """'left', 'center' or 'right' — drives text alignment in the window."""
        if self.alignment in ("left", "top-left", "bottom-left"):
            return "left"
        if self.alignment in ("right", "top-right", "bottom-right"):
            return "right"
        return "center"


def bounds_for_alignment(alignment: str, height: int, work_area: Rect,
                         width: int = PROMPTER_WIDTH) -> Rect:
    """Place a width×height window inside *work_area* at the named position."""
    wx, wy, sw, sh = work_area
    left   = wx
    centre = wx + (sw - width + 1) // 2
    right  = wx + sw - width
    top    = wy
    middle = wy + (sh - height + 1) // 2
    bottom = wy + sh - height

    x = {"left": left, "right": right}.get(_column(alignment), centre)
    y = {"top": top, "bottom": bottom}.get(_row(alignment), middle)
    return Rect(x, y, width, height)


def _row(alignment: str) -> str:
    if alignment.startswith("top"):    return "top"
    if alignment.startswith("bottom"): return "bottom"
    return "middle"


def _column(alignment: str) -> str:
    if alignment.endswith("left"):  return "left"
    if alignment.endswith("right"): return "right"
    return "centre"
