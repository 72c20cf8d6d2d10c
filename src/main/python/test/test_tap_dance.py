# SPDX-License-Identifier: GPL-2.0-or-later
"""Tests for fetching and pushing tap dance entries."""
import threading

import pytest

from keycodes.any_keycode import UnknownKeyIdentifier
from protocol.constants import DYNAMIC_VIAL_TAP_DANCE_GET, DYNAMIC_VIAL_TAP_DANCE_SET, \
    DYNAMIC_VIAL_GET_NUMBER_OF_ENTRIES
from protocol.device_channel import DeviceSyncError
from protocol.tap_dance import TapDanceEntry, TapDanceTable


@pytest.fixture
def table(fake_channel):
    return TapDanceTable(fake_channel, tap_dance_count=4)


class TestFetch:

    def test_fetches_all_entries_in_order(self, table, fake_channel):
        entries = table.reload_tap_dance()

        assert [e.tdid for e in entries] == [0, 1, 2, 3]
        assert fake_channel.requests == [("query", DYNAMIC_VIAL_TAP_DANCE_GET, x) for x in range(4)]
        assert table.loaded

    def test_fields_go_through_codec(self, table):
        table.reload_tap_dance()

        assert table.tap_dance_get(0) == TapDanceEntry(0, "KC_A", "KC_B", "KC_C", "KC_D", 200)
        assert table.tap_dance_get(1) == TapDanceEntry(1, "LCTL(KC_A)", "KC_NO", "KC_NO", "KC_NO", 150)
        assert table.tap_dance_get(2) == TapDanceEntry(2, "LCTL_T(KC_A)", "TD(1)", "QK_BOOT", "KC_TRNS", 175)
        assert table.tap_dance_get(3) == TapDanceEntry(3, "0x1004", "0x0fff", "KC_ESCAPE", "KC_SPACE", 0xFFFF)

    def test_failure_exposes_no_partial_table(self, make_channel, fake_channel):
        channel = make_channel(fake_channel.entries, fail_at=2)
        table = TapDanceTable(channel, tap_dance_count=4)

        with pytest.raises(DeviceSyncError):
            table.reload_tap_dance()

        assert not table.loaded
        assert table.entries == ()
        # nothing was asked after the failing index
        assert channel.requests[-1] == ("query", DYNAMIC_VIAL_TAP_DANCE_GET, 2)
        with pytest.raises(IndexError):
            table.tap_dance_get(0)

    def test_failed_reload_keeps_previous_table(self, table, fake_channel):
        before = table.reload_tap_dance()
        fake_channel.fail_at = 1

        with pytest.raises(DeviceSyncError):
            table.reload_tap_dance()

        assert table.entries == before

    def test_short_response(self, make_channel):
        class ShortChannel(make_channel):
            def query(self, opcode, index):
                return b"\x00\x04\x00"

        table = TapDanceTable(ShortChannel(), tap_dance_count=1)
        with pytest.raises(DeviceSyncError):
            table.reload_tap_dance()
        assert not table.loaded

    def test_empty_table(self, make_channel):
        table = TapDanceTable(make_channel(), tap_dance_count=0)
        assert table.reload_tap_dance() == ()
        assert table.loaded

    def test_iter_is_lazy(self, table, fake_channel):
        it = table.iter_tap_dance()
        first = next(it)
        assert first.tdid == 0
        assert len(fake_channel.requests) == 1

    def test_entries_are_copies(self, table):
        table.reload_tap_dance()
        entry = table.tap_dance_get(0)
        entry.tap = "KC_Z"
        assert table.tap_dance_get(0).tap == "KC_A"

    def test_reload_entry_counts(self, make_channel):
        channel = make_channel([(0, 0, 0, 0, 0)] * 6)
        table = TapDanceTable(channel)

        assert table.reload_entry_counts() == 6
        assert table.tap_dance_count == 6
        assert channel.requests == [("send", DYNAMIC_VIAL_GET_NUMBER_OF_ENTRIES, b"")]


class TestPush:

    def test_pack(self):
        entry = TapDanceEntry(2, "KC_A", "KC_B", "KC_C", "KC_D", 200)
        assert entry.pack(DYNAMIC_VIAL_TAP_DANCE_SET) == bytes([
            DYNAMIC_VIAL_TAP_DANCE_SET, 2,
            0x04, 0x00,
            0x05, 0x00,
            0x06, 0x00,
            0x07, 0x00,
            0xC8, 0x00,
        ])

    def test_pack_compound_and_literal(self):
        entry = TapDanceEntry(0, "LCTL(KC_A)", "0x1004", "KC_NO", "KC_NO", 0x1234)
        assert entry.pack()[2:] == bytes([0x04, 0x01, 0x04, 0x10, 0, 0, 0, 0, 0x34, 0x12])

    def test_pack_rejects_bad_values(self):
        with pytest.raises(UnknownKeyIdentifier):
            TapDanceEntry(0, tap="KC_NOPE").pack()
        with pytest.raises(ValueError):
            TapDanceEntry(0, tapms=0x10000).pack()

    def test_push_sends_one_write(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.requests.clear()

        table.push(TapDanceEntry(2, "KC_A", "KC_B", "KC_C", "KC_D", 200))

        assert fake_channel.requests == [
            ("send", DYNAMIC_VIAL_TAP_DANCE_SET, bytes([2, 4, 0, 5, 0, 6, 0, 7, 0, 0xC8, 0]))
        ]
        assert table.tap_dance_get(2) == TapDanceEntry(2, "KC_A", "KC_B", "KC_C", "KC_D", 200)

    def test_push_before_fetch(self, table, fake_channel):
        with pytest.raises(IndexError):
            table.push(TapDanceEntry(0))
        assert fake_channel.requests == []

    def test_push_out_of_range(self, table, fake_channel):
        table.reload_tap_dance()
        with pytest.raises(IndexError):
            table.push(TapDanceEntry(4))

    def test_push_failure_propagates(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.fail_send = True

        with pytest.raises(DeviceSyncError):
            table.push(TapDanceEntry(1, "KC_X"))
        # local table only follows successful pushes
        assert table.tap_dance_get(1).tap == "LCTL(KC_A)"

    def test_set_skips_unchanged(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.requests.clear()

        assert table.tap_dance_set(0, table.tap_dance_get(0)) is False
        assert fake_channel.requests == []

        changed = table.tap_dance_get(0)
        changed.tapms = 250
        assert table.tap_dance_set(0, changed) is True
        assert len(fake_channel.requests) == 1
        assert table.tap_dance_get(0).tapms == 250

    def test_set_uses_index(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.requests.clear()

        table.tap_dance_set(3, TapDanceEntry(0, "KC_Q"))

        assert fake_channel.requests[0][2][0] == 3
        assert table.tap_dance_get(3).tap == "KC_Q"


class TestConsistency:

    def test_iteration_holds_lock(self, table):
        it = table.iter_tap_dance()
        next(it)

        acquired = []
        worker = threading.Thread(target=lambda: acquired.append(table.lock.acquire(blocking=False)))
        worker.start()
        worker.join()
        assert acquired == [False]

        list(it)
        worker = threading.Thread(target=lambda: acquired.append(table.lock.acquire(blocking=False)))
        worker.start()
        worker.join()
        assert acquired == [False, True]

    def test_push_stores_canonical_names(self, table, fake_channel):
        table.reload_tap_dance()

        table.push(TapDanceEntry(1, "KC_ENT", "0x0004", "LCS(KC_A)", "KC_TRANSPARENT", 150))

        assert table.tap_dance_get(1) == TapDanceEntry(1, "KC_ENTER", "KC_A", "C_S(KC_A)", "KC_TRNS", 150)

    def test_set_with_aliases_is_unchanged(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.requests.clear()

        assert table.tap_dance_set(0, TapDanceEntry(0, "0x0004", "KC_B", "0X0006", "KC_D", 200)) is False
        assert fake_channel.requests == []

    def test_set_rejects_unknown_key(self, table, fake_channel):
        table.reload_tap_dance()
        fake_channel.requests.clear()

        with pytest.raises(UnknownKeyIdentifier):
            table.tap_dance_set(0, TapDanceEntry(0, "KC_NOPE"))
        assert fake_channel.requests == []
