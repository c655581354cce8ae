"""
Session manager — the command channel between the config panel and the display.

At most one teleprompter display exists at a time.  Opening a session while a
display is up re-targets it with the new configuration instead of creating a
second one; closing it brings the panel back.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from teleprompter.config import Rect, SessionConfig, bounds_for_alignment

log = logging.getLogger(__name__)

PANEL   = "config"
DISPLAY = "teleprompter"


class Surface(Protocol):
    def show(self) -> None: ...
    def hide(self) -> None: ...
    def close(self) -> bool: ...
    def set_always_on_top(self, value: bool) -> None: ...


class Display(Surface, Protocol):
    def apply_config(self, config: SessionConfig) -> None: ...
    def set_bounds(self, bounds: Rect) -> None: ...
    def focus(self) -> None: ...


class SessionManager:

    def __init__(self, panel: Surface,
                 display_factory: Callable[[SessionManager], Display],
                 work_area: Callable[[], Rect]):
        self.panel            = panel
        self._display_factory = display_factory
        self._work_area       = work_area
        self.display : Display | None = None

    @property
    def is_open(self) -> bool:
        return self.display is not None

    def open_session(self, config: SessionConfig) -> bool:
        """Show *config* on the display.  Blank scripts are refused."""
        if not config.text.strip():
            log.warning("Refusing to open a session with an empty script")
            return False

        if self.display is not None:
            self.display.focus()
            self.display.set_always_on_top(config.always_on_top)
            self.display.apply_config(config)
            log.info("Session re-configured (%d chars)", len(config.text))
            return True

        bounds  = bounds_for_alignment(config.alignment, config.height_px,
                                       self._work_area())
        display = self._display_factory(self)
        display.set_bounds(bounds)
        display.set_always_on_top(config.always_on_top)
        display.apply_config(config)
        display.show()
        self.display = display
        self.panel.hide()
        log.info("Session opened at %s (%s, %s)", tuple(bounds),
                 config.alignment, config.window_height)
        return True

    def close_session(self) -> None:
        display, self.display = self.display, None
        if display is not None:
            display.close()
            log.info("Session closed")
        self.panel.show()

    def display_closed(self) -> None:
        """The display went away on its own (window manager close)."""
        if self.display is not None:
            self.display = None
            log.info("Display closed by user")
        self.panel.show()

    def set_always_on_top(self, target: str, value: bool) -> None:
        surface = self.panel if target == PANEL else self.display
        if surface is None:
            return
        surface.set_always_on_top(value)
        log.debug("%s always-on-top → %s", target, value)
