# SPDX-License-Identifier: GPL-2.0-or-later
"""
Modifier flags applied on top of a basic keycode.

Each flag is one bit of the firmware's composite keycode, e.g. SHIFT + CTRL on KC_A
is 0x0200 | 0x0100 added to 0x04, which is C_S(KC_A). MTAP turns a modifier
wrapper into its mod-tap variant (LCTL(kc) -> LCTL_T(kc)) and RHS selects the
right hand modifiers. Left and right hand modifiers can't be mixed in firmware,
the encoder doesn't prevent it but validate() reports such masks as invalid.
"""
from enum import IntFlag

from keycodes.keycodes import Keycode


class UnknownModifier(ValueError):
    pass


class Modifier(IntFlag):
    CTRL = 0x0100
    SHIFT = 0x0200
    ALT = 0x0400
    GUI = 0x0800
    RHS = 0x1000
    MTAP = 0x2000

    @classmethod
    def from_name(cls, name):
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise UnknownModifier("unknown modifier {!r}".format(name)) from None


class ModifierMaskEncoder:

    def __init__(self):
        self.flags = {mod: False for mod in Modifier}

    def toggle(self, name):
        """ Flips a modifier and returns whether it is now enabled """
        mod = Modifier.from_name(name)
        self.flags[mod] = not self.flags[mod]
        return self.flags[mod]

    def is_enabled(self, name):
        return self.flags[Modifier.from_name(name)]

    def enabled(self):
        return {mod for mod, on in self.flags.items() if on}

    def reset(self):
        for mod in self.flags:
            self.flags[mod] = False

    def compute_mask(self):
        mask = 0
        for mod, on in self.flags.items():
            if on:
                mask |= mod.value
        return mask

    def validate(self, base_code=0):
        """ Whether base_code with the current mask applied is a keycode the firmware knows """
        code = base_code + self.compute_mask()
        return Keycode.is_known(code)
