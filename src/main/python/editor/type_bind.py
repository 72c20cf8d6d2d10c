# SPDX-License-Identifier: GPL-2.0-or-later
"""
Type-to-bind: select a key, then press a key on the physical keyboard to bind it.

Taps (press and release of the same key) bind that key. Holding one key while
pressing another is not a tap, nothing gets bound and the next press starts over.
"""
import logging
from enum import Enum, auto

from qtpy.QtCore import QObject, QEvent, Qt, Signal

from keycodes.keycodes import Keycode


class BindState(Enum):
    IDLE = auto()
    AWAITING_RELEASE = auto()


KEY_DOWN = "down"
KEY_UP = "up"


def transition(state, last_down, event, key):
    """ Returns (state, last_down, committed key or None) """
    if event == KEY_DOWN:
        # a newer press (or auto repeat) replaces whatever was held
        return BindState.AWAITING_RELEASE, key, None
    if state == BindState.AWAITING_RELEASE and key is not None and key == last_down:
        return BindState.IDLE, None, key
    return BindState.IDLE, None, None


def _qt_key_names():
    names = dict()
    for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789":
        names[int(getattr(Qt, "Key_" + c))] = c.lower()
    for x in range(1, 25):
        names[int(getattr(Qt, "Key_F{}".format(x)))] = "f{}".format(x)
    for key, name in [
        ("Return", "enter"), ("Enter", "enter"), ("Escape", "esc"), ("Backspace", "backspace"),
        ("Tab", "tab"), ("Space", "space"), ("Minus", "-"), ("Equal", "="),
        ("BracketLeft", "["), ("BracketRight", "]"), ("Backslash", "\\"), ("Semicolon", ";"),
        ("Apostrophe", "'"), ("QuoteLeft", "`"), ("Comma", ","), ("Period", "."), ("Slash", "/"),
        ("CapsLock", "caps lock"), ("Print", "print screen"), ("ScrollLock", "scroll lock"),
        ("Pause", "pause"), ("Insert", "insert"), ("Delete", "delete"), ("Home", "home"), ("End", "end"),
        ("PageUp", "page up"), ("PageDown", "page down"), ("Right", "right"), ("Left", "left"),
        ("Down", "down"), ("Up", "up"), ("NumLock", "num lock"), ("Menu", "menu"),
        ("Shift", "shift"), ("Control", "ctrl"), ("Alt", "alt"), ("AltGr", "alt gr"), ("Meta", "meta"),
    ]:
        names[int(getattr(Qt, "Key_" + key))] = name
    return names


QT_KEY_NAMES = _qt_key_names()


class TapBindingSession(QObject):

    bind_committed = Signal(str)

    def __init__(self, is_active=None, parent=None):
        super().__init__(parent)
        # whether a bind target is selected and type-to-bind is on
        self.is_active = is_active or (lambda: True)
        self.state = BindState.IDLE
        self.last_down = None

    @staticmethod
    def normalize(key):
        """ Maps a captured key name ("k", "enter") or keycode name to its canonical qmk_id """
        if key is None:
            return None
        kc = Keycode.find_by_recorder_alias(key) or Keycode.find_by_recorder_alias(key.lower())
        if kc is not None:
            return kc.qmk_id
        code = Keycode.safe_deserialize(key)
        if code is None:
            return None
        return Keycode.serialize(code)

    def reset(self):
        self.state = BindState.IDLE
        self.last_down = None

    def _feed(self, event, key):
        if not self.is_active():
            return False
        self.state, self.last_down, committed = transition(self.state, self.last_down, event, self.normalize(key))
        if committed is not None:
            logging.debug("type-to-bind: tap on %s", committed)
            self.bind_committed.emit(committed)
        return True

    def key_down(self, key):
        """ Returns True when the event was consumed and must not reach other handlers """
        return self._feed(KEY_DOWN, key)

    def key_up(self, key):
        return self._feed(KEY_UP, key)

    def eventFilter(self, obj, event):
        if event.type() == QEvent.KeyPress:
            return self.key_down(QT_KEY_NAMES.get(event.key()))
        if event.type() == QEvent.KeyRelease:
            if event.isAutoRepeat():
                return self.is_active()
            return self.key_up(QT_KEY_NAMES.get(event.key()))
        return False
