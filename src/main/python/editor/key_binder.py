# SPDX-License-Identifier: GPL-2.0-or-later
"""
Turns modifier toggles and key clicks into bound keycodes.

1) The UI selects a key that needs rebinding (select_target).
2) A key is clicked on one of the sample boards (key_clicked), or tapped on the
   physical keyboard when type-to-bind is on.
   - "keymask" keys get the enabled modifiers applied, so KC_K can become LCTL(KC_K)
   - "key-mod" keys are wrappers like LCTL_T(kc) whose kc is the selected key's basic keycode
3) bound is emitted with the resulting keycode string and the target is cleared.

To send SHIFT by itself bind the shift key, to send SHIFT+K enable SHIFT and click K.
"""
import logging

from qtpy.QtCore import QObject, Signal

import storage
from editor.type_bind import TapBindingSession
from keycodes.any_keycode import UnknownKeyIdentifier
from keycodes.keycodes import Keycode
from keycodes.modifiers import ModifierMaskEncoder

BIND_KEY = "key"
BIND_KEYMASK = "keymask"
BIND_KEY_MOD = "key-mod"

TYPEBIND_SETTING = "typebind"


class KeyBinder(QObject):

    bound = Signal(str)
    modifiers_changed = Signal(int, bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.modifiers = ModifierMaskEncoder()
        self.selected_key = None
        self.typebind = storage.get_bool(TYPEBIND_SETTING, False)
        self.session = TapBindingSession(is_active=self.type_bind_active, parent=self)
        self.session.bind_committed.connect(self.commit)

    def type_bind_active(self):
        return self.typebind and self.selected_key is not None

    def set_typebind(self, enabled):
        self.typebind = bool(enabled)
        storage.set(TYPEBIND_SETTING, self.typebind)
        if not self.typebind:
            self.session.reset()

    def select_target(self, key):
        self.selected_key = key

    def clear_target(self):
        self.selected_key = None
        self.session.reset()

    def modifier_clicked(self, name):
        enabled = self.modifiers.toggle(name)
        self.modifiers_changed.emit(self.modifiers.compute_mask(), self.modifiers.validate())
        return enabled

    def resolve(self, key, bind=BIND_KEY):
        """ Keycode string that clicking key would bind, without committing it """
        mask = self.modifiers.compute_mask()
        if bind == BIND_KEYMASK and mask != 0:
            try:
                code = Keycode.compose(Keycode.deserialize(key), mask)
            except ValueError:
                logging.warning("%s with modifiers 0x%04X is not a keycode, binding it unmodified", key, mask)
                return key
            # unknown combinations still bind, only as a literal
            return Keycode.serialize(code)
        if bind == BIND_KEY_MOD:
            try:
                current = Keycode.deserialize(self.selected_key)
            except UnknownKeyIdentifier:
                current = 0
            return Keycode.derive_mod_tap(key, current)
        return key

    def describe(self, key, bind=BIND_KEY):
        """ (keycode, label, tooltip) of what clicking key would bind, for hover previews """
        keystr = self.resolve(key, bind)
        return keystr, Keycode.label(keystr), Keycode.tooltip(keystr)

    def key_clicked(self, key, bind=BIND_KEY):
        if self.selected_key is None:
            return None
        keystr = self.resolve(key, bind)
        self.commit(keystr)
        return keystr

    def commit(self, keystr):
        logging.debug("binding %s to %s", keystr, self.selected_key)
        self.bound.emit(keystr)
        self.selected_key = None
