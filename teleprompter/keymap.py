"""Qt key → intent table used by the prompter window."""

from __future__ import annotations

from PyQt5.QtCore import Qt

from teleprompter.intents import Intent

KEY_INTENTS: dict[int, Intent] = {
    Qt.Key_Space:  Intent.PLAY_PAUSE,
    Qt.Key_Down:   Intent.STEP_NEXT,
    Qt.Key_Up:     Intent.STEP_PREV,
    Qt.Key_Right:  Intent.SPEED_UP,
    Qt.Key_Plus:   Intent.SPEED_UP,
    Qt.Key_Equal:  Intent.SPEED_UP,      # unshifted '+' on most layouts
    Qt.Key_Left:   Intent.SPEED_DOWN,
    Qt.Key_Minus:  Intent.SPEED_DOWN,
    Qt.Key_0:      Intent.RESET,
    Qt.Key_T:      Intent.TOGGLE_ALWAYS_ON_TOP,
    Qt.Key_Escape: Intent.CLOSE,
}


def intent_for_key(key: int) -> Intent | None:
    return KEY_INTENTS.get(key)
