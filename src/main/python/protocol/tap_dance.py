# SPDX-License-Identifier: GPL-2.0-or-later
"""
Tap dance entries over the Vial dynamic entry protocol.

Tap dance entry format (11 bytes, little endian):
    marker: reserved, echoed by the firmware (uint8)
    on_tap: keycode for single tap (uint16)
    on_hold: keycode for hold (uint16)
    on_double_tap: keycode for double tap (uint16)
    on_tap_hold: keycode for tap then hold (uint16)
    tapping_term: tap timeout in milliseconds (uint16)

Entries live in the keyboard's dynamic memory, which can only be queried one
index at a time, so loading the table takes tap_dance_count round trips.
"""
import logging
import struct
import threading

from keycodes.keycodes import Keycode
from protocol.constants import (
    DYNAMIC_VIAL_GET_NUMBER_OF_ENTRIES, DYNAMIC_VIAL_TAP_DANCE_GET, DYNAMIC_VIAL_TAP_DANCE_SET,
    TAP_DANCE_ENTRY_FORMAT, TAP_DANCE_SET_FORMAT
)
from protocol.device_channel import DeviceSyncError

TAP_DANCE_ENTRY_SIZE = struct.calcsize(TAP_DANCE_ENTRY_FORMAT)
DEFAULT_TAPPING_TERM = 200


class TapDanceEntry:
    """One tap dance slot, keycodes are kept in their string form."""

    FIELDS = ("tap", "hold", "doubletap", "taphold")

    def __init__(self, tdid, tap="KC_NO", hold="KC_NO", doubletap="KC_NO", taphold="KC_NO",
                 tapms=DEFAULT_TAPPING_TERM):
        self.tdid = tdid
        self.tap = tap
        self.hold = hold
        self.doubletap = doubletap
        self.taphold = taphold
        self.tapms = tapms

    @classmethod
    def unpack(cls, tdid, data):
        if len(data) < TAP_DANCE_ENTRY_SIZE:
            raise DeviceSyncError("tap dance entry {}: short response ({} bytes)".format(tdid, len(data)))
        _marker, tap, hold, doubletap, taphold, tapms = struct.unpack(
            TAP_DANCE_ENTRY_FORMAT, bytes(data[:TAP_DANCE_ENTRY_SIZE]))
        return cls(
            tdid,
            Keycode.serialize(tap),
            Keycode.serialize(hold),
            Keycode.serialize(doubletap),
            Keycode.serialize(taphold),
            tapms
        )

    def keycodes(self):
        """Integer keycodes of tap, hold, doubletap and taphold, raises UnknownKeyIdentifier"""
        return tuple(Keycode.deserialize(getattr(self, field)) for field in self.FIELDS)

    def pack(self, opcode=DYNAMIC_VIAL_TAP_DANCE_SET):
        if not 0 <= self.tapms <= 0xFFFF:
            raise ValueError("tapping term {} out of range".format(self.tapms))
        return struct.pack(TAP_DANCE_SET_FORMAT, opcode, self.tdid, *self.keycodes(), self.tapms)

    def normalized(self):
        """Copy with every keycode in its canonical spelling, raises UnknownKeyIdentifier"""
        return TapDanceEntry(self.tdid, *(Keycode.normalize(getattr(self, field)) for field in self.FIELDS),
                             tapms=self.tapms)

    def copy(self):
        return TapDanceEntry(self.tdid, self.tap, self.hold, self.doubletap, self.taphold, self.tapms)

    def as_tuple(self):
        return self.tdid, self.tap, self.hold, self.doubletap, self.taphold, self.tapms

    def __eq__(self, other):
        if not isinstance(other, TapDanceEntry):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return "TapDanceEntry(tdid={}, tap={}, hold={}, doubletap={}, taphold={}, tapms={})".format(
            *self.as_tuple())


class TapDanceTable:

    def __init__(self, channel, tap_dance_count=0):
        self.channel = channel
        self.tap_dance_count = tap_dance_count
        # None until a full table has been fetched
        self.tap_dance_entries = None
        self.lock = threading.RLock()

    @property
    def loaded(self):
        return self.tap_dance_entries is not None

    @property
    def entries(self):
        if self.tap_dance_entries is None:
            return ()
        return tuple(entry.copy() for entry in self.tap_dance_entries)

    def reload_entry_counts(self):
        """Asks the keyboard how many tap dance slots it has."""
        with self.lock:
            data = self.channel.send(DYNAMIC_VIAL_GET_NUMBER_OF_ENTRIES)
            if not data:
                raise DeviceSyncError("empty response to entry count query")
            self.tap_dance_count = data[0]
            logging.debug("keyboard reports %d tap dance entries", self.tap_dance_count)
            return self.tap_dance_count

    def iter_tap_dance(self):
        """Yields entries one at a time from index 0, each after its response arrived.

        The table lock is held until the generator is exhausted or closed.
        """
        with self.lock:
            for idx in range(self.tap_dance_count):
                data = self.channel.query(DYNAMIC_VIAL_TAP_DANCE_GET, idx)
                yield TapDanceEntry.unpack(idx, data)

    def reload_tap_dance(self):
        """Load all tap dance entries from keyboard; on failure the previous table stays as it was."""
        with self.lock:
            entries = []
            try:
                for entry in self.iter_tap_dance():
                    entries.append(entry)
            except DeviceSyncError:
                logging.warning("tap dance reload failed after %d of %d entries", len(entries), self.tap_dance_count)
                raise
            self.tap_dance_entries = entries
            return self.entries

    def tap_dance_get(self, idx):
        """Get a copy of the tap dance entry at idx."""
        with self.lock:
            self._check_index(idx)
            return self.tap_dance_entries[idx].copy()

    def tap_dance_set(self, idx, entry):
        """Set a tap dance entry, only talks to the keyboard when something changed."""
        entry = entry.normalized()
        entry.tdid = idx
        with self.lock:
            self._check_index(idx)
            if self.tap_dance_entries[idx] == entry:
                return False
            self.push(entry)
            return True

    def push(self, entry):
        """Send one entry to the keyboard; the response is not inspected."""
        with self.lock:
            self._check_index(entry.tdid)
            data = entry.pack(DYNAMIC_VIAL_TAP_DANCE_SET)
            # opcode goes in the command header, the rest is payload
            self.channel.send(DYNAMIC_VIAL_TAP_DANCE_SET, data[1:])
            self.tap_dance_entries[entry.tdid] = entry.normalized()

    def _check_index(self, idx):
        if self.tap_dance_entries is None:
            raise IndexError("tap dance table has not been loaded from the keyboard")
        if not 0 <= idx < len(self.tap_dance_entries):
            raise IndexError("tap dance index {} out of range".format(idx))
