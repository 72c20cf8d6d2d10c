# SPDX-License-Identifier: GPL-2.0-or-later

CMD_VIA_VIAL_PREFIX = 0xFE

CMD_VIAL_DYNAMIC_ENTRY_OP = 0x0D

DYNAMIC_VIAL_GET_NUMBER_OF_ENTRIES = 0x00
DYNAMIC_VIAL_TAP_DANCE_GET = 0x01
DYNAMIC_VIAL_TAP_DANCE_SET = 0x02

# Tap dance entry on the wire: [marker] [on_tap] [on_hold] [on_double_tap] [on_tap_hold] [tapping_term]
TAP_DANCE_ENTRY_FORMAT = "<BHHHHH"
# Push request: [opcode] [index] [on_tap] [on_hold] [on_double_tap] [on_tap_hold] [tapping_term]
TAP_DANCE_SET_FORMAT = "<BBHHHHH"
