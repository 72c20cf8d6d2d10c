# coding: utf-8

# SPDX-License-Identifier: GPL-2.0-or-later

from keycodes.any_keycode import AnyKeycode, UnknownKeyIdentifier, MAX_KEYCODE
from keycodes.keycodes_v6 import keycodes_v6


class Keycode:

    masked_keycodes = set()
    recorder_alias_to_keycode = dict()
    qmk_id_to_keycode = dict()

    _decoder = None

    def __init__(self, qmk_id, label, tooltip=None, masked=False, recorder_alias=None, alias=None):
        self.qmk_id = qmk_id
        self.label = label
        self.tooltip = tooltip
        # whether this keycode requires another sub-keycode
        self.masked = masked

        self.alias = [self.qmk_id]
        if alias:
            self.alias += alias

        if recorder_alias:
            for alias in recorder_alias:
                if alias in self.recorder_alias_to_keycode:
                    raise RuntimeError("Misconfigured: two keycodes claim the same alias {}".format(alias))
                self.recorder_alias_to_keycode[alias] = self

        if masked:
            assert qmk_id.endswith("(kc)")

    def register(self):
        """ Makes this keycode's names parseable, called for every keycode of the current table """
        self.qmk_id_to_keycode[self.qmk_id] = self
        if self.masked:
            for name in self.alias:
                self.masked_keycodes.add(name.replace("(kc)", ""))

    @property
    def code(self):
        return Keycode.resolve(self.qmk_id)

    @classmethod
    def find(cls, qmk_id):
        # this is to handle cases of qmk_id LCTL(kc) propagated here from find_inner_keycode
        if qmk_id == "kc":
            qmk_id = "KC_NO"
        return KEYCODES_MAP.get(qmk_id)

    @classmethod
    def find_outer_keycode(cls, qmk_id):
        """
        Finds outer keycode, i.e. if it is masked like LCTL(KC_A), just return the LCTL portion
        """
        if cls.is_mask(qmk_id):
            qmk_id = qmk_id[:qmk_id.find("(")]
        return cls.find(qmk_id)

    @classmethod
    def find_inner_keycode(cls, qmk_id):
        """
        Finds inner keycode, i.e. if it is masked like LCTL(KC_A), just return the KC_A portion
        """
        if cls.is_mask(qmk_id):
            qmk_id = qmk_id[qmk_id.find("(")+1:-1]
        return cls.find(qmk_id)

    @classmethod
    def find_by_recorder_alias(cls, alias):
        return cls.recorder_alias_to_keycode.get(alias)

    @classmethod
    def is_mask(cls, qmk_id):
        return "(" in qmk_id and qmk_id[:qmk_id.find("(")] in cls.masked_keycodes

    @classmethod
    def label(cls, qmk_id):
        keycode = cls.find_outer_keycode(qmk_id)
        if keycode is None:
            return qmk_id
        return keycode.label

    @classmethod
    def tooltip(cls, qmk_id):
        keycode = cls.find_outer_keycode(qmk_id)
        if keycode is None:
            return None
        tooltip = keycode.qmk_id
        if keycode.tooltip:
            tooltip = "{}: {}".format(tooltip, keycode.tooltip)
        return tooltip

    @classmethod
    def name_of(cls, code):
        """ Canonical name of an integer keycode, or None when the table doesn't know it """
        if (code & 0xFF00) not in keycodes_v6.masked:
            kc = RAWCODES_MAP.get(code)
            if kc is not None:
                return kc.qmk_id
        else:
            outer = RAWCODES_MAP.get(code & 0xFF00)
            inner = RAWCODES_MAP.get(code & 0x00FF)
            if outer is not None and inner is not None:
                return outer.qmk_id.replace("(kc)", "({})".format(inner.qmk_id))
        return None

    @classmethod
    def is_known(cls, code):
        return 0 <= code <= MAX_KEYCODE and cls.name_of(code) is not None

    @classmethod
    def serialize(cls, code):
        """ Converts integer keycode to string """
        if not 0 <= code <= MAX_KEYCODE:
            raise ValueError("keycode out of range: {}".format(code))
        name = cls.name_of(code)
        if name is not None:
            return name
        return "0x{:04x}".format(code)

    @classmethod
    def safe_serialize(cls, code):
        """ Like serialize, but out of range values come back as a plain hex string """
        try:
            return cls.serialize(code)
        except ValueError:
            return hex(code)

    @classmethod
    def deserialize(cls, val):
        """ Converts string keycode to integer, raises UnknownKeyIdentifier """
        if isinstance(val, int):
            return val
        if val in cls.qmk_id_to_keycode:
            return cls.resolve(cls.qmk_id_to_keycode[val].qmk_id)
        return cls.decoder().decode(val)

    @classmethod
    def safe_deserialize(cls, val, default=None):
        try:
            return cls.deserialize(val)
        except UnknownKeyIdentifier:
            return default

    @classmethod
    def normalize(cls, code):
        """ Changes e.g. KC_PERC to LSFT(KC_5) """

        return Keycode.serialize(Keycode.deserialize(code))

    @classmethod
    def compose(cls, base, mask):
        """ Adds a modifier mask on top of a base keycode, the way firmware composite codes are defined """
        code = base + mask
        if code > MAX_KEYCODE:
            raise ValueError("composite keycode 0x{:x} does not fit in 16 bits".format(code))
        return code

    @classmethod
    def derive_mod_tap(cls, template, code):
        """ Fills the (kc) slot of a wrapper like LCTL_T(kc) with the basic part of another keycode """
        return template.replace("(kc)", "({})".format(cls.serialize(code & 0xFF)))

    @classmethod
    def resolve(cls, qmk_constant):
        """ Translates a qmk_constant into firmware-specific integer keycode """
        kc = keycodes_v6.kc

        if qmk_constant not in kc:
            raise RuntimeError("unable to resolve qmk_id={}".format(qmk_constant))
        return kc[qmk_constant]

    @classmethod
    def decoder(cls):
        if cls._decoder is None:
            names = dict()
            for qmk_id, keycode in cls.qmk_id_to_keycode.items():
                for name in keycode.alias:
                    names[name.replace("(kc)", "")] = cls.resolve(qmk_id)
            cls._decoder = AnyKeycode(names, set(cls.masked_keycodes))
        return cls._decoder


K = Keycode

KEYCODES_SPECIAL = [
    K("KC_NO", ""),
    K("KC_TRNS", "▽", alias=["KC_TRANSPARENT"]),
]

KEYCODES_BASIC_NUMPAD = [
    K("KC_NUMLOCK", "Num\nLock", recorder_alias=["num lock"], alias=["KC_NLCK"]),
    K("KC_KP_SLASH", "/", alias=["KC_PSLS"]),
    K("KC_KP_ASTERISK", "*", alias=["KC_PAST"]),
    K("KC_KP_MINUS", "-", alias=["KC_PMNS"]),
    K("KC_KP_PLUS", "+", alias=["KC_PPLS"]),
    K("KC_KP_ENTER", "Num\nEnter", alias=["KC_PENT"]),
    K("KC_KP_DOT", ".", alias=["KC_PDOT"]),
    K("KC_KP_EQUAL", "=", alias=["KC_PEQL"]),
    K("KC_KP_COMMA", ",", alias=["KC_PCMM"]),
] + [K("KC_KP_{}".format(x), str(x), alias=["KC_P{}".format(x)]) for x in range(10)]

KEYCODES_BASIC_NAV = [
    K("KC_PSCREEN", "Print\nScreen", recorder_alias=["print screen"], alias=["KC_PSCR"]),
    K("KC_SCROLLLOCK", "Scroll\nLock", recorder_alias=["scroll lock"], alias=["KC_SLCK"]),
    K("KC_PAUSE", "Pause", recorder_alias=["pause", "break"], alias=["KC_PAUS", "KC_BRK"]),
    K("KC_INSERT", "Insert", recorder_alias=["insert"], alias=["KC_INS"]),
    K("KC_HOME", "Home", recorder_alias=["home"]),
    K("KC_PGUP", "Page\nUp", recorder_alias=["page up"]),
    K("KC_DELETE", "Del", recorder_alias=["delete"], alias=["KC_DEL"]),
    K("KC_END", "End", recorder_alias=["end"]),
    K("KC_PGDOWN", "Page\nDown", recorder_alias=["page down"], alias=["KC_PGDN"]),
    K("KC_RIGHT", "Right", recorder_alias=["right"], alias=["KC_RGHT"]),
    K("KC_LEFT", "Left", recorder_alias=["left"]),
    K("KC_DOWN", "Down", recorder_alias=["down"]),
    K("KC_UP", "Up", recorder_alias=["up"]),
]

KEYCODES_BASIC = [
    K("KC_{}".format(c), c, recorder_alias=[c.lower()])
    for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
] + [
    K("KC_1", "!\n1", recorder_alias=["1"]),
    K("KC_2", "@\n2", recorder_alias=["2"]),
    K("KC_3", "#\n3", recorder_alias=["3"]),
    K("KC_4", "$\n4", recorder_alias=["4"]),
    K("KC_5", "%\n5", recorder_alias=["5"]),
    K("KC_6", "^\n6", recorder_alias=["6"]),
    K("KC_7", "&\n7", recorder_alias=["7"]),
    K("KC_8", "*\n8", recorder_alias=["8"]),
    K("KC_9", "(\n9", recorder_alias=["9"]),
    K("KC_0", ")\n0", recorder_alias=["0"]),
    K("KC_ENTER", "Enter", recorder_alias=["enter"], alias=["KC_ENT"]),
    K("KC_ESCAPE", "Esc", recorder_alias=["esc"], alias=["KC_ESC"]),
    K("KC_BSPACE", "Bksp", recorder_alias=["backspace"], alias=["KC_BSPC"]),
    K("KC_TAB", "Tab", recorder_alias=["tab"]),
    K("KC_SPACE", "Space", recorder_alias=["space"], alias=["KC_SPC"]),
    K("KC_MINUS", "_\n-", recorder_alias=["-"], alias=["KC_MINS"]),
    K("KC_EQUAL", "+\n=", recorder_alias=["="], alias=["KC_EQL"]),
    K("KC_LBRACKET", "{\n[", recorder_alias=["["], alias=["KC_LBRC"]),
    K("KC_RBRACKET", "}\n]", recorder_alias=["]"], alias=["KC_RBRC"]),
    K("KC_BSLASH", "|\n\\", recorder_alias=["\\"], alias=["KC_BSLS"]),
    K("KC_SCOLON", ":\n;", recorder_alias=[";"], alias=["KC_SCLN"]),
    K("KC_QUOTE", "\"\n'", recorder_alias=["'"], alias=["KC_QUOT"]),
    K("KC_GRAVE", "~\n`", recorder_alias=["`"], alias=["KC_GRV"]),
    K("KC_COMMA", "<\n,", recorder_alias=[","], alias=["KC_COMM"]),
    K("KC_DOT", ">\n.", recorder_alias=["."]),
    K("KC_SLASH", "?\n/", recorder_alias=["/"], alias=["KC_SLSH"]),
    K("KC_CAPSLOCK", "Caps\nLock", recorder_alias=["caps lock"], alias=["KC_CLCK", "KC_CAPS"]),
] + [
    K("KC_F{}".format(x), "F{}".format(x), recorder_alias=["f{}".format(x)]) for x in range(1, 13)
] + [
    K("KC_APPLICATION", "Menu", recorder_alias=["menu"], alias=["KC_APP"]),
    K("KC_LCTRL", "LCtrl", recorder_alias=["left ctrl", "ctrl"], alias=["KC_LCTL"]),
    K("KC_LSHIFT", "LShift", recorder_alias=["left shift", "shift"], alias=["KC_LSFT"]),
    K("KC_LALT", "LAlt", recorder_alias=["left alt", "alt"], alias=["KC_LOPT"]),
    K("KC_LGUI", "LGui", recorder_alias=["left windows", "windows", "meta"], alias=["KC_LCMD", "KC_LWIN"]),
    K("KC_RCTRL", "RCtrl", recorder_alias=["right ctrl"], alias=["KC_RCTL"]),
    K("KC_RSHIFT", "RShift", recorder_alias=["right shift"], alias=["KC_RSFT"]),
    K("KC_RALT", "RAlt", recorder_alias=["right alt", "alt gr"], alias=["KC_ALGR", "KC_ROPT"]),
    K("KC_RGUI", "RGui", recorder_alias=["right windows"], alias=["KC_RCMD", "KC_RWIN"]),
]

KEYCODES_BASIC.extend(KEYCODES_BASIC_NUMPAD)
KEYCODES_BASIC.extend(KEYCODES_BASIC_NAV)

KEYCODES_SHIFTED = [
    K("KC_TILD", "~"),
    K("KC_EXLM", "!"),
    K("KC_AT", "@"),
    K("KC_HASH", "#"),
    K("KC_DLR", "$"),
    K("KC_PERC", "%"),
    K("KC_CIRC", "^"),
    K("KC_AMPR", "&"),
    K("KC_ASTR", "*"),
    K("KC_LPRN", "("),
    K("KC_RPRN", ")"),
    K("KC_UNDS", "_"),
    K("KC_PLUS", "+"),
    K("KC_LCBR", "{"),
    K("KC_RCBR", "}"),
    K("KC_LT", "<"),
    K("KC_GT", ">"),
    K("KC_COLN", ":"),
    K("KC_PIPE", "|"),
    K("KC_QUES", "?"),
    K("KC_DQUO", '"'),
]

KEYCODES_ISO = [
    K("KC_NONUS_HASH", "~\n#", "Non-US # and ~", alias=["KC_NUHS"]),
    K("KC_NONUS_BSLASH", "|\n\\", "Non-US \\ and |", alias=["KC_NUBS"]),
    K("KC_RO", "_\n\\", "JIS \\ and _", alias=["KC_INT1"]),
    K("KC_KANA", "カタカナ\nひらがな", "JIS Katakana/Hiragana", alias=["KC_INT2"]),
    K("KC_JYEN", "|\n¥", alias=["KC_INT3"]),
    K("KC_HENK", "変換", "JIS Henkan", alias=["KC_INT4"]),
    K("KC_MHEN", "無変換", "JIS Muhenkan", alias=["KC_INT5"]),
    K("KC_LANG1", "한영\nかな", "Korean Han/Yeong / JP Mac Kana", alias=["KC_HAEN"]),
    K("KC_LANG2", "漢字\n英数", "Korean Hanja / JP Mac Eisu", alias=["KC_HANJ"]),
]

KEYCODES_LAYERS = []

KEYCODES_BOOT = [
    K("QK_BOOT", "Boot-\nloader", "Put the keyboard into bootloader mode for flashing", alias=["RESET"]),
    K("QK_REBOOT", "Reboot", "Reboots the keyboard. Does not load the bootloader"),
    K("QK_CLEAR_EEPROM", "Clear\nEEPROM", "Reinitializes the keyboard's EEPROM (persistent memory)", alias=["EE_CLR"]),
]

KEYCODES_MODIFIERS = [
    K("OSM(MOD_LSFT)", "OSM\nLSft", "Enable Left Shift for one keypress"),
    K("OSM(MOD_LCTL)", "OSM\nLCtl", "Enable Left Control for one keypress"),
    K("OSM(MOD_LALT)", "OSM\nLAlt", "Enable Left Alt for one keypress"),
    K("OSM(MOD_LGUI)", "OSM\nLGUI", "Enable Left GUI for one keypress"),
    K("OSM(MOD_RSFT)", "OSM\nRSft", "Enable Right Shift for one keypress"),
    K("OSM(MOD_RCTL)", "OSM\nRCtl", "Enable Right Control for one keypress"),
    K("OSM(MOD_RALT)", "OSM\nRAlt", "Enable Right Alt for one keypress"),
    K("OSM(MOD_RGUI)", "OSM\nRGUI", "Enable Right GUI for one keypress"),
    K("OSM(MOD_MEH)", "OSM\nMeh", "Enable Left Control, Shift, and Alt for one keypress"),
    K("OSM(MOD_HYPR)", "OSM\nHyper", "Enable Left Control, Shift, Alt, and GUI for one keypress"),

    K("LSFT(kc)", "LSft\n(kc)", masked=True),
    K("LCTL(kc)", "LCtl\n(kc)", masked=True),
    K("LALT(kc)", "LAlt\n(kc)", masked=True),
    K("LGUI(kc)", "LGui\n(kc)", masked=True),
    K("RSFT(kc)", "RSft\n(kc)", masked=True),
    K("RCTL(kc)", "RCtl\n(kc)", masked=True),
    K("RALT(kc)", "RAlt\n(kc)", masked=True),
    K("RGUI(kc)", "RGui\n(kc)", masked=True),
    K("C_S(kc)", "LCS\n(kc)", "LCTL + LSFT", masked=True, alias=["LCS(kc)"]),
    K("LCA(kc)", "LCA\n(kc)", "LCTL + LALT", masked=True),
    K("LCG(kc)", "LCG\n(kc)", "LCTL + LGUI", masked=True),
    K("LSA(kc)", "LSA\n(kc)", "LSFT + LALT", masked=True),
    K("LAG(kc)", "LAG\n(kc)", "LALT + LGUI", masked=True),
    K("SGUI(kc)", "LSG\n(kc)", "LGUI + LSFT", masked=True, alias=["LSG(kc)"]),
    K("LCAG(kc)", "LCAG\n(kc)", "LCTL + LALT + LGUI", masked=True),
    K("RCG(kc)", "RCG\n(kc)", "RCTL + RGUI", masked=True),
    K("MEH(kc)", "Meh\n(kc)", "LCTL + LSFT + LALT", masked=True),
    K("HYPR(kc)", "Hyper\n(kc)", "LCTL + LSFT + LALT + LGUI", masked=True),

    K("LSFT_T(kc)", "LSft_T\n(kc)", "Left Shift when held, kc when tapped", masked=True),
    K("LCTL_T(kc)", "LCtl_T\n(kc)", "Left Control when held, kc when tapped", masked=True),
    K("LALT_T(kc)", "LAlt_T\n(kc)", "Left Alt when held, kc when tapped", masked=True),
    K("LGUI_T(kc)", "LGui_T\n(kc)", "Left GUI when held, kc when tapped", masked=True),
    K("RSFT_T(kc)", "RSft_T\n(kc)", "Right Shift when held, kc when tapped", masked=True),
    K("RCTL_T(kc)", "RCtl_T\n(kc)", "Right Control when held, kc when tapped", masked=True),
    K("RALT_T(kc)", "RAlt_T\n(kc)", "Right Alt when held, kc when tapped", masked=True),
    K("RGUI_T(kc)", "RGui_T\n(kc)", "Right GUI when held, kc when tapped", masked=True),
    K("C_S_T(kc)", "LCS_T\n(kc)", "Left Control + Left Shift when held, kc when tapped", masked=True,
      alias=["LCS_T(kc)"]),
    K("LCA_T(kc)", "LCA_T\n(kc)", "LCTL + LALT when held, kc when tapped", masked=True),
    K("LCG_T(kc)", "LCG_T\n(kc)", "LCTL + LGUI when held, kc when tapped", masked=True),
    K("LSA_T(kc)", "LSA_T\n(kc)", "LSFT + LALT when held, kc when tapped", masked=True),
    K("LAG_T(kc)", "LAG_T\n(kc)", "LALT + LGUI when held, kc when tapped", masked=True),
    K("SGUI_T(kc)", "LSG_T\n(kc)", "LGUI + LSFT when held, kc when tapped", masked=True, alias=["LSG_T(kc)"]),
    K("LCAG_T(kc)", "LCAG_T\n(kc)", "LCTL + LALT + LGUI when held, kc when tapped", masked=True),
    K("LSCG_T(kc)", "LSCG_T\n(kc)", "LSFT + LCTL + LGUI when held, kc when tapped", masked=True),
    K("LSAG_T(kc)", "LSAG_T\n(kc)", "LSFT + LALT + LGUI when held, kc when tapped", masked=True),
    K("RSC_T(kc)", "RSC_T\n(kc)", "RSFT + RCTL when held, kc when tapped", masked=True),
    K("RCA_T(kc)", "RCA_T\n(kc)", "RCTL + RALT when held, kc when tapped", masked=True),
    K("RSA_T(kc)", "RSA_T\n(kc)", "RSFT + RALT when held, kc when tapped", masked=True),
    K("RCG_T(kc)", "RCG_T\n(kc)", "RCTL + RGUI when held, kc when tapped", masked=True),
    K("RSG_T(kc)", "RSG_T\n(kc)", "RSFT + RGUI when held, kc when tapped", masked=True),
    K("RSCG_T(kc)", "RSCG_T\n(kc)", "RSFT + RCTL + RGUI when held, kc when tapped", masked=True),
    K("RAG_T(kc)", "RAG_T\n(kc)", "RALT + RGUI when held, kc when tapped", masked=True),
    K("RCAG_T(kc)", "RCAG_T\n(kc)", "RCTL + RALT + RGUI when held, kc when tapped", masked=True),
    K("RSAG_T(kc)", "RSAG_T\n(kc)", "RSFT + RALT + RGUI when held, kc when tapped", masked=True),
    K("RSCA_T(kc)", "RSCA_T\n(kc)", "RSFT + RCTL + RALT when held, kc when tapped", masked=True),
    K("RSCAG_T(kc)", "RSCAG_T\n(kc)", "RSFT + RCTL + RALT + RGUI when held, kc when tapped", masked=True),
    K("MEH_T(kc)", "Meh_T\n(kc)", "LCTL + LSFT + LALT when held, kc when tapped", masked=True),
    K("ALL_T(kc)", "ALL_T\n(kc)", "LCTL + LSFT + LALT + LGUI when held, kc when tapped", masked=True),

    K("KC_GESC", "~\nEsc", "Esc normally, but ~ when Shift or GUI is pressed"),
    K("KC_LSPO", "LS\n(", "Left Shift when held, ( when tapped"),
    K("KC_RSPC", "RS\n)", "Right Shift when held, ) when tapped"),
    K("KC_LCPO", "LC\n(", "Left Control when held, ( when tapped"),
    K("KC_RCPC", "RC\n)", "Right Control when held, ) when tapped"),
    K("KC_LAPO", "LA\n(", "Left Alt when held, ( when tapped"),
    K("KC_RAPC", "RA\n)", "Right Alt when held, ) when tapped"),
    K("KC_SFTENT", "RS\nEnter", "Right Shift when held, Enter when tapped"),
]

KEYCODES_MEDIA = [
    K("KC_F{}".format(x), "F{}".format(x), recorder_alias=["f{}".format(x)]) for x in range(13, 25)
] + [
    K("KC_MUTE", "Mute", "Mute Audio", alias=["KC_AUDIO_MUTE"]),
    K("KC_VOLU", "Vol +", "Volume Up", alias=["KC_AUDIO_VOL_UP"]),
    K("KC_VOLD", "Vol -", "Volume Down", alias=["KC_AUDIO_VOL_DOWN"]),
    K("KC_MNXT", "Media\nNext", "Media Next Track", alias=["KC_MEDIA_NEXT_TRACK"]),
    K("KC_MPRV", "Media\nPrev", "Media Previous Track", alias=["KC_MEDIA_PREV_TRACK"]),
    K("KC_MSTP", "Media\nStop", "Media Stop", alias=["KC_MEDIA_STOP"]),
    K("KC_MPLY", "Media\nPlay", "Media Play/Pause", alias=["KC_MEDIA_PLAY_PAUSE"]),
]

KEYCODES_TAP_DANCE = []

KEYCODES_USER = []

KEYCODES_MACRO = []

KEYCODES_HIDDEN = []
for x in range(256):
    KEYCODES_HIDDEN.append(K("TD({})".format(x), "TD({})".format(x)))

KEYCODES = []
KEYCODES_MAP = dict()
RAWCODES_MAP = dict()

K = None


def recreate_keycodes():
    """ Regenerates global KEYCODES array """

    KEYCODES.clear()
    KEYCODES.extend(KEYCODES_SPECIAL + KEYCODES_BASIC + KEYCODES_SHIFTED + KEYCODES_ISO + KEYCODES_LAYERS +
                    KEYCODES_BOOT + KEYCODES_MODIFIERS + KEYCODES_MEDIA + KEYCODES_TAP_DANCE + KEYCODES_MACRO +
                    KEYCODES_USER + KEYCODES_HIDDEN)
    KEYCODES_MAP.clear()
    RAWCODES_MAP.clear()
    # names of keycodes dropped from the table (e.g. layers the keyboard doesn't have) must stop parsing
    Keycode.qmk_id_to_keycode.clear()
    Keycode.masked_keycodes.clear()
    for keycode in KEYCODES:
        keycode.register()
        KEYCODES_MAP[keycode.qmk_id.replace("(kc)", "")] = keycode
        RAWCODES_MAP[Keycode.resolve(keycode.qmk_id)] = keycode
    Keycode._decoder = None


def create_user_keycodes():
    KEYCODES_USER.clear()
    for x in range(64):
        kc = Keycode(
            "USER{:02}".format(x),
            "USER{:02}".format(x),
            "User keycode {}".format(x)
        )
        KEYCODES_USER.append(kc)


def create_macro_keycodes(count=128):
    KEYCODES_MACRO.clear()
    for x in range(count):
        qmk_id = "M{}".format(x)
        KEYCODES_MACRO.append(Keycode(qmk_id, qmk_id))


def recreate_keyboard_keycodes(keyboard):
    """ Generates keycodes based on information the keyboard provides (layers, tap dance count, macros) """

    layers = min(keyboard.layers, 32)

    def generate_keycodes_for_mask(label, description):
        keycodes = []
        for layer in range(layers):
            lbl = "{}({})".format(label, layer)
            keycodes.append(Keycode(lbl, lbl, description))
        return keycodes

    KEYCODES_LAYERS.clear()
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("MO",
                                   "Momentarily turn on layer when pressed (requires KC_TRNS on destination layer)"))
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("DF",
                                   "Set the base (default) layer"))
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("TG",
                                   "Toggle layer on or off"))
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("TT",
                                   "Normally acts like MO unless it's tapped multiple times, which toggles layer on"))
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("OSL",
                                   "Momentarily activates layer until a key is pressed"))
    KEYCODES_LAYERS.extend(
        generate_keycodes_for_mask("TO",
                                   "Turns on layer and turns off all other layers, except the default layer"))

    for x in range(min(layers, 16)):
        KEYCODES_LAYERS.append(Keycode("LT{}(kc)".format(x), "LT {}\n(kc)".format(x),
                                       "kc on tap, switch to layer {} while held".format(x), masked=True))

    create_macro_keycodes(getattr(keyboard, "macro_count", 128))

    KEYCODES_TAP_DANCE.clear()
    for x in range(min(keyboard.tap_dance_count, 256)):
        lbl = "TD({})".format(x)
        KEYCODES_TAP_DANCE.append(Keycode(lbl, lbl, "Tap dance keycode"))

    recreate_keycodes()


class _DefaultKeyboard:
    layers = 4
    macro_count = 128
    tap_dance_count = 0


# Initialize layer, USER and MACRO keycodes at module load so the codec works before a keyboard connects
create_user_keycodes()
recreate_keyboard_keycodes(_DefaultKeyboard())
