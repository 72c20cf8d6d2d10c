# SPDX-License-Identifier: GPL-2.0-or-later
"""
Numeric keycode table for the QMK v6 keycode layout.

    0x0000-0x00FF  basic HID keys
    0x0100-0x1FFF  modifier wrapped keys, bits 8-11 = CTL/SFT/ALT/GUI, bit 12 = right hand
    0x2000-0x3FFF  mod-tap, same modifier bits as above plus 0x2000
    0x4000-0x4FFF  layer-tap, bits 8-11 = layer
    0x52xx         layer keys (TO/MO/DF/TG/OSL/OSM/TT)
    0x5700-0x57FF  tap dance
    0x7700-0x77FF  macros
    0x7C00-0x7CFF  quantum
    0x7E00-0x7E3F  user keycodes
"""


class keycodes_v6:

    kc = {
        "KC_NO": 0x00,
        "KC_TRNS": 0x01,

        "KC_ENTER": 0x28,
        "KC_ESCAPE": 0x29,
        "KC_BSPACE": 0x2A,
        "KC_TAB": 0x2B,
        "KC_SPACE": 0x2C,
        "KC_MINUS": 0x2D,
        "KC_EQUAL": 0x2E,
        "KC_LBRACKET": 0x2F,
        "KC_RBRACKET": 0x30,
        "KC_BSLASH": 0x31,
        "KC_NONUS_HASH": 0x32,
        "KC_SCOLON": 0x33,
        "KC_QUOTE": 0x34,
        "KC_GRAVE": 0x35,
        "KC_COMMA": 0x36,
        "KC_DOT": 0x37,
        "KC_SLASH": 0x38,
        "KC_CAPSLOCK": 0x39,

        "KC_PSCREEN": 0x46,
        "KC_SCROLLLOCK": 0x47,
        "KC_PAUSE": 0x48,
        "KC_INSERT": 0x49,
        "KC_HOME": 0x4A,
        "KC_PGUP": 0x4B,
        "KC_DELETE": 0x4C,
        "KC_END": 0x4D,
        "KC_PGDOWN": 0x4E,
        "KC_RIGHT": 0x4F,
        "KC_LEFT": 0x50,
        "KC_DOWN": 0x51,
        "KC_UP": 0x52,

        "KC_NUMLOCK": 0x53,
        "KC_KP_SLASH": 0x54,
        "KC_KP_ASTERISK": 0x55,
        "KC_KP_MINUS": 0x56,
        "KC_KP_PLUS": 0x57,
        "KC_KP_ENTER": 0x58,
        "KC_KP_0": 0x62,
        "KC_KP_DOT": 0x63,
        "KC_NONUS_BSLASH": 0x64,
        "KC_APPLICATION": 0x65,
        "KC_KP_EQUAL": 0x67,
        "KC_KP_COMMA": 0x85,

        "KC_RO": 0x87,
        "KC_KANA": 0x88,
        "KC_JYEN": 0x89,
        "KC_HENK": 0x8A,
        "KC_MHEN": 0x8B,
        "KC_LANG1": 0x90,
        "KC_LANG2": 0x91,

        "KC_MUTE": 0xA8,
        "KC_VOLU": 0xA9,
        "KC_VOLD": 0xAA,
        "KC_MNXT": 0xAB,
        "KC_MPRV": 0xAC,
        "KC_MSTP": 0xAD,
        "KC_MPLY": 0xAE,

        "KC_LCTRL": 0xE0,
        "KC_LSHIFT": 0xE1,
        "KC_LALT": 0xE2,
        "KC_LGUI": 0xE3,
        "KC_RCTRL": 0xE4,
        "KC_RSHIFT": 0xE5,
        "KC_RALT": 0xE6,
        "KC_RGUI": 0xE7,

        "KC_TILD": 0x0235,
        "KC_EXLM": 0x021E,
        "KC_AT": 0x021F,
        "KC_HASH": 0x0220,
        "KC_DLR": 0x0221,
        "KC_PERC": 0x0222,
        "KC_CIRC": 0x0223,
        "KC_AMPR": 0x0224,
        "KC_ASTR": 0x0225,
        "KC_LPRN": 0x0226,
        "KC_RPRN": 0x0227,
        "KC_UNDS": 0x022D,
        "KC_PLUS": 0x022E,
        "KC_LCBR": 0x022F,
        "KC_RCBR": 0x0230,
        "KC_PIPE": 0x0231,
        "KC_COLN": 0x0233,
        "KC_DQUO": 0x0234,
        "KC_LT": 0x0236,
        "KC_GT": 0x0237,
        "KC_QUES": 0x0238,

        "LCTL(kc)": 0x0100,
        "LSFT(kc)": 0x0200,
        "LALT(kc)": 0x0400,
        "LGUI(kc)": 0x0800,
        "RCTL(kc)": 0x1100,
        "RSFT(kc)": 0x1200,
        "RALT(kc)": 0x1400,
        "RGUI(kc)": 0x1800,
        "C_S(kc)": 0x0300,
        "LCA(kc)": 0x0500,
        "LSA(kc)": 0x0600,
        "MEH(kc)": 0x0700,
        "LCG(kc)": 0x0900,
        "SGUI(kc)": 0x0A00,
        "LAG(kc)": 0x0C00,
        "LCAG(kc)": 0x0D00,
        "HYPR(kc)": 0x0F00,
        "RCG(kc)": 0x1900,

        "LCTL_T(kc)": 0x2100,
        "LSFT_T(kc)": 0x2200,
        "C_S_T(kc)": 0x2300,
        "LALT_T(kc)": 0x2400,
        "LCA_T(kc)": 0x2500,
        "LSA_T(kc)": 0x2600,
        "MEH_T(kc)": 0x2700,
        "LGUI_T(kc)": 0x2800,
        "LCG_T(kc)": 0x2900,
        "SGUI_T(kc)": 0x2A00,
        "LSCG_T(kc)": 0x2B00,
        "LAG_T(kc)": 0x2C00,
        "LCAG_T(kc)": 0x2D00,
        "LSAG_T(kc)": 0x2E00,
        "ALL_T(kc)": 0x2F00,
        "RCTL_T(kc)": 0x3100,
        "RSFT_T(kc)": 0x3200,
        "RSC_T(kc)": 0x3300,
        "RALT_T(kc)": 0x3400,
        "RCA_T(kc)": 0x3500,
        "RSA_T(kc)": 0x3600,
        "RSCA_T(kc)": 0x3700,
        "RGUI_T(kc)": 0x3800,
        "RCG_T(kc)": 0x3900,
        "RSG_T(kc)": 0x3A00,
        "RSCG_T(kc)": 0x3B00,
        "RAG_T(kc)": 0x3C00,
        "RCAG_T(kc)": 0x3D00,
        "RSAG_T(kc)": 0x3E00,
        "RSCAG_T(kc)": 0x3F00,

        "OSM(MOD_LCTL)": 0x52A1,
        "OSM(MOD_LSFT)": 0x52A2,
        "OSM(MOD_LALT)": 0x52A4,
        "OSM(MOD_LGUI)": 0x52A8,
        "OSM(MOD_MEH)": 0x52A7,
        "OSM(MOD_HYPR)": 0x52AF,
        "OSM(MOD_RCTL)": 0x52B1,
        "OSM(MOD_RSFT)": 0x52B2,
        "OSM(MOD_RALT)": 0x52B4,
        "OSM(MOD_RGUI)": 0x52B8,

        "QK_BOOT": 0x7C00,
        "QK_REBOOT": 0x7C01,
        "QK_CLEAR_EEPROM": 0x7C03,
        "KC_GESC": 0x7C16,
        "KC_LCPO": 0x7C18,
        "KC_RCPC": 0x7C19,
        "KC_LSPO": 0x7C1A,
        "KC_RSPC": 0x7C1B,
        "KC_LAPO": 0x7C1C,
        "KC_RAPC": 0x7C1D,
        "KC_SFTENT": 0x7C1E,
    }

    masked = set()


for x in range(26):
    keycodes_v6.kc["KC_{}".format(chr(ord("A") + x))] = 0x04 + x

for x in range(1, 10):
    keycodes_v6.kc["KC_{}".format(x)] = 0x1D + x
    keycodes_v6.kc["KC_KP_{}".format(x)] = 0x58 + x
keycodes_v6.kc["KC_0"] = 0x27

for x in range(1, 13):
    keycodes_v6.kc["KC_F{}".format(x)] = 0x39 + x
for x in range(13, 25):
    keycodes_v6.kc["KC_F{}".format(x)] = 0x5B + x

for x in range(32):
    keycodes_v6.kc["TO({})".format(x)] = 0x5200 + x
    keycodes_v6.kc["MO({})".format(x)] = 0x5220 + x
    keycodes_v6.kc["DF({})".format(x)] = 0x5240 + x
    keycodes_v6.kc["TG({})".format(x)] = 0x5260 + x
    keycodes_v6.kc["OSL({})".format(x)] = 0x5280 + x
    keycodes_v6.kc["TT({})".format(x)] = 0x52C0 + x

for x in range(16):
    keycodes_v6.kc["LT{}(kc)".format(x)] = 0x4000 | (x << 8)

for x in range(256):
    keycodes_v6.kc["TD({})".format(x)] = 0x5700 + x
    keycodes_v6.kc["M{}".format(x)] = 0x7700 + x

for x in range(64):
    keycodes_v6.kc["USER{:02}".format(x)] = 0x7E00 + x

for name, code in keycodes_v6.kc.items():
    if name.endswith("(kc)"):
        keycodes_v6.masked.add(code)
