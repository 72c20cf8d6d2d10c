# SPDX-License-Identifier: GPL-2.0-or-later
import re

HEX_LITERAL = re.compile(r"^0[xX]([0-9a-fA-F]+)$")
LAYER_TAP = re.compile(r"^LT\(\s*(\d+)\s*,\s*(.+)\)$")

MAX_KEYCODE = 0xFFFF
QK_MOD_TAP = 0x2000


class UnknownKeyIdentifier(ValueError):
    """Raised when a string is neither a known keycode name, a compound of known names nor a hex literal."""

    def __init__(self, identifier):
        super().__init__("unknown key identifier: {!r}".format(identifier))
        self.identifier = identifier


class AnyKeycode:
    """
    Decodes keycode expressions:

        KC_A                plain name or alias
        LCTL(KC_A)          masked wrapper applied to an inner expression
        LCTL(LSFT(KC_A))    wrappers nest, inner resolves first
        LT(1, KC_SPACE)     layer-tap shorthand, same as LT1(KC_SPACE)
        0x1234              literal, up to 0xFFFF

    names maps every known name (without the "(kc)" suffix) to its integer code,
    masked is the set of names that take an inner keycode.
    """

    def __init__(self, names, masked):
        self.names = names
        self.masked = masked

    def decode(self, expr):
        if not isinstance(expr, str):
            raise UnknownKeyIdentifier(expr)
        s = expr.strip()

        m = HEX_LITERAL.match(s)
        if m:
            value = int(m.group(1), 16)
            if value > MAX_KEYCODE:
                raise UnknownKeyIdentifier(expr)
            return value

        if s in self.names:
            return self.names[s]

        m = LAYER_TAP.match(s)
        if m:
            return self.decode("LT{}({})".format(int(m.group(1)), m.group(2)))

        if s.endswith(")") and "(" in s:
            outer = s[:s.find("(")]
            if outer in self.masked:
                inner = self.decode(s[s.find("(") + 1:-1])
                return self._wrap(expr, self.names[outer], inner)

        raise UnknownKeyIdentifier(expr)

    @staticmethod
    def _wrap(expr, outer, inner):
        # mod-tap and layer-tap only carry a basic key, modifier wrappers can stack
        if outer >= QK_MOD_TAP:
            if inner > 0xFF:
                raise UnknownKeyIdentifier(expr)
        elif inner >= QK_MOD_TAP:
            raise UnknownKeyIdentifier(expr)
        return outer | inner
