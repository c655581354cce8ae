"""Closed set of user intents the prompter reacts to, free of any key vocabulary."""

from enum import Enum


class Intent(Enum):
    PLAY_PAUSE           = "play_pause"
    STEP_NEXT            = "step_next"
    STEP_PREV            = "step_prev"
    SPEED_UP             = "speed_up"
    SPEED_DOWN           = "speed_down"
    RESET                = "reset"
    TOGGLE_ALWAYS_ON_TOP = "toggle_always_on_top"
    CLOSE                = "close"


CONTROLS_HELP = (
    "•  Space — Play / Pause\n"
    "•  Esc — Close teleprompter window\n"
    "•  0 — Reset to top\n"
    "•  T — Toggle teleprompter always on top\n"
    "•  ↑ / ↓ — Previous / next segment\n"
    "•  ← / →  or  - / + — Decrease / increase speed"
)
