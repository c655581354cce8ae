"""Tests for the key → intent table."""

from PyQt5.QtCore import Qt

from teleprompter.intents import Intent
from teleprompter.keymap import KEY_INTENTS, intent_for_key


def test_core_bindings():
    """The documented keys map to their intents."""
    assert intent_for_key(Qt.Key_Space) is Intent.PLAY_PAUSE
    assert intent_for_key(Qt.Key_Down) is Intent.STEP_NEXT
    assert intent_for_key(Qt.Key_Up) is Intent.STEP_PREV
    assert intent_for_key(Qt.Key_Right) is Intent.SPEED_UP
    assert intent_for_key(Qt.Key_Plus) is Intent.SPEED_UP
    assert intent_for_key(Qt.Key_Left) is Intent.SPEED_DOWN
    assert intent_for_key(Qt.Key_Minus) is Intent.SPEED_DOWN
    assert intent_for_key(Qt.Key_0) is Intent.RESET
    assert intent_for_key(Qt.Key_T) is Intent.TOGGLE_ALWAYS_ON_TOP
    assert intent_for_key(Qt.Key_Escape) is Intent.CLOSE


def test_unbound_key():
    """Keys outside the table produce no intent."""
    assert intent_for_key(Qt.Key_Q) is None


def test_every_intent_is_reachable():
    """Each intent has at least one key."""
    assert set(KEY_INTENTS.values()) == set(Intent)
