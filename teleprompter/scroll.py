"""
Scroll controller — owns the scroll offset, play state and segment geometry.

The host feeds it layout (segment extents, content and viewport height) and a
frame clock; the painter only ever reads ``offset``.  Nothing here raises for
out-of-range input: indices and offsets are clamped to the nearest valid value.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Sequence

from teleprompter.intents import Intent
from teleprompter.segmenter import Segment

log = logging.getLogger(__name__)

# ── Reading-speed model ───────────────────────────────────────────────────────
SPEED_MIN        = 1
SPEED_MAX        = 10
DEFAULT_SPEED    = 5
PX_PER_SEC_BASE  = 5      # px/s at speed 0
PX_PER_SEC_UNIT  = 3      # extra px/s per speed step
LINE_STEP_PX     = 28     # manual nudge (one text line)

NEXT = "next"
PREV = "prev"


def px_per_second(speed: int) -> float:
    return PX_PER_SEC_BASE + speed * PX_PER_SEC_UNIT


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(v, hi))


class SegmentExtent(NamedTuple):
    top    : float
    height : float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def build_geometry(heights: Sequence[float],
                   top_padding: float = 0.0) -> tuple[list[SegmentExtent], float]:
    """Stack block heights top-down; returns (extents, bottom of last block)."""
    extents: list[SegmentExtent] = []
    y = float(top_padding)
    for h in heights:
        extents.append(SegmentExtent(y, float(h)))
        y += h
    return extents, y


# ═════════════════════════════════════════════════════════════════════════════
#  Controller
# ═════════════════════════════════════════════════════════════════════════════
class ScrollController:

    def __init__(self, segments: Sequence[Segment] | None = None,
                 speed: int = DEFAULT_SPEED):
        # ── Scroll state ──────────────────────────────────────────────────────
        self.offset          : float = 0.0
        self.max_offset      : float = 0.0
        self.playing         : bool  = False
        self.speed           : int   = DEFAULT_SPEED

        # ── Geometry ──────────────────────────────────────────────────────────
        self.segments        : list[Segment]       = []
        self.extents         : list[SegmentExtent] = []
        self.content_height  : float = 0.0
        self.viewport_height : float = 0.0

        # ── Frame clock ───────────────────────────────────────────────────────
        self.armed           : bool         = False
        self._last_tick      : float | None = None

        # Host callbacks
        self.on_play_state : Callable[[bool], None] | None = None
        self.on_change     : Callable[[], None] | None     = None

        if segments is not None:
            self.load(segments, speed)
        else:
            self.set_speed(speed)

    # ── Configuration ─────────────────────────────────────────────────────────
    @property
    def ready(self) -> bool:
        return bool(self.segments)

    def load(self, segments: Sequence[Segment], speed: int = DEFAULT_SPEED) -> None:
        """Install a new script.  Scroll state starts over: top, paused."""
        self.segments   = list(segments)
        self.extents    = []
        self.offset     = 0.0
        self.max_offset = 0.0
        self.set_speed(speed)
        self._set_playing(False)
        log.debug("Loaded %d segments at speed %d", len(self.segments), self.speed)
        self._changed()

    def recompute_geometry(self, content_height: float, viewport_height: float,
                           extents: Sequence[SegmentExtent] | None = None) -> None:
        """Apply a new layout measurement.  Same inputs → same state."""
        if extents is not None:
            self.extents = list(extents)
        self.content_height  = max(0.0, float(content_height))
        self.viewport_height = max(0.0, float(viewport_height))
        self.max_offset      = max(0.0, self.content_height - self.viewport_height)
        self.offset          = _clamp(self.offset, 0.0, self.max_offset)
        self._changed()

    # ── Play state ────────────────────────────────────────────────────────────
    def toggle_play(self) -> None:
        if not self.ready:
            return
        self._set_playing(not self.playing)

    def play(self) -> None:
        if self.ready:
            self._set_playing(True)

    def pause(self) -> None:
        self._set_playing(False)

    def _set_playing(self, value: bool) -> None:
        if value == self.playing:
            return
        self.playing    = value
        self.armed      = value
        self._last_tick = None      # first frame after (re)start is a zero step
        log.debug("Playback %s at offset %.1f", "started" if value else "paused",
                  self.offset)
        if self.on_play_state:
            self.on_play_state(value)

    def reset(self) -> None:
        if not self.ready:
            return
        self.offset = 0.0
        self._changed()

    # ── Frame-driven advance ──────────────────────────────────────────────────
    @property
    def px_per_second(self) -> float:
        return px_per_second(self.speed)

    def advance(self, delta_seconds: float) -> None:
        if not self.playing:
            return
        nxt = self.offset + self.px_per_second * max(0.0, delta_seconds)
        self.offset = min(nxt, self.max_offset)
        if self.max_offset > 0 and self.offset >= self.max_offset:
            self._set_playing(False)     # end of script
        self._changed()

    def tick(self, now: float) -> bool:
        """
        One animation frame at clock time *now* (seconds, monotonic).

        Returns True while the host should keep scheduling frames.
        """
        if not self.playing:
            self.armed = False
            return False
        dt = 0.0 if self._last_tick is None else max(0.0, now - self._last_tick)
        self._last_tick = now
        self.advance(dt)
        return self.armed

    # ── Manual movement ───────────────────────────────────────────────────────
    def step_line(self, direction: int) -> None:
        if not self.ready:
            return
        step = LINE_STEP_PX if direction > 0 else -LINE_STEP_PX
        self.offset = _clamp(self.offset + step, 0.0, self.max_offset)
        self._changed()

    def current_segment_index(self) -> int:
        """Index of the segment under the vertical centre of the viewport."""
        if not self.ready:
            return 0
        centre = self.offset + self.viewport_height / 2
        for i, ext in enumerate(self.extents):
            if ext.bottom > centre:
                return i
        return len(self.segments) - 1

    def _skip(self, i: int) -> bool:
        return self.segments[i].is_skip_target

    def _resolve_target(self, index: int, direction: str | None) -> int:
        n = len(self.segments)
        i = int(_clamp(index, 0, n - 1))
        if not self._skip(i):
            return i
        if direction == PREV:
            while i >= 0 and self._skip(i):
                i -= 1
            return max(i, 0)
        while i < n and self._skip(i):
            i += 1
        if i < n:
            return i
        if direction == NEXT:
            return n - 1
        # No direction and nothing ahead: search back from the requested index
        i = int(_clamp(index, 0, n - 1))
        while i >= 0 and self._skip(i):
            i -= 1
        return max(i, 0)

    def go_to_segment(self, index: int, direction: str | None = None) -> None:
        """Centre segment *index* (or the nearest non-blank one) in the viewport."""
        if not self.ready:
            return
        i = self._resolve_target(index, direction)
        if i >= len(self.extents):
            return                  # not laid out yet
        ext    = self.extents[i]
        target = ext.top - self.viewport_height / 2 + ext.height / 2
        self.offset = _clamp(target, 0.0, self.max_offset)
        log.debug("Seek to segment %d (asked %d, %s) → %.1f",
                  i, index, direction or "any", self.offset)
        self._changed()

    def navigate(self, direction: int) -> None:
        """Arrow-key movement: hop between segments, nudge at the ends."""
        if not self.ready:
            return
        n = len(self.segments)
        if n > 1:
            cur = self.current_segment_index()
            if direction > 0 and cur < n - 1:
                self.go_to_segment(cur + 1, NEXT); return
            if direction < 0 and cur > 0:
                self.go_to_segment(cur - 1, PREV); return
        self.step_line(direction)

    # ── Speed ─────────────────────────────────────────────────────────────────
    def set_speed(self, n: int) -> None:
        self.speed = int(_clamp(int(n), SPEED_MIN, SPEED_MAX))
        self._changed()

    def speed_up(self) -> None:
        self.set_speed(self.speed + 1)

    def speed_down(self) -> None:
        self.set_speed(self.speed - 1)

    # ── Intents ───────────────────────────────────────────────────────────────
    def dispatch(self, intent: Intent) -> bool:
        """Apply a controller intent.  Host-side intents return False."""
        if   intent is Intent.PLAY_PAUSE: self.toggle_play()
        elif intent is Intent.STEP_NEXT:  self.navigate(+1)
        elif intent is Intent.STEP_PREV:  self.navigate(-1)
        elif intent is Intent.SPEED_UP:   self.speed_up()
        elif intent is Intent.SPEED_DOWN: self.speed_down()
        elif intent is Intent.RESET:      self.reset()
        else:
            return False
        return True

    # ── Read-outs ─────────────────────────────────────────────────────────────
    @property
    def progress(self) -> int:
        if self.max_offset <= 0:
            return 0
        return int(self.offset / self.max_offset * 100 + 0.5)     # half-up

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
