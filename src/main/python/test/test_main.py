# SPDX-License-Identifier: GPL-2.0-or-later
"""Tests for the command line entry point, against a fake keyboard behind the mocked hid module."""
import struct

import pytest

import main
import util
from util import MSG_LEN, RAWHID_USAGE_PAGE, RAWHID_USAGE, VIAL_SERIAL_NUMBER_MAGIC


class FakeKeyboardDevice:
    """Answers Vial dynamic entry commands from a list of tap dance entries."""

    def __init__(self, entries, broken=False):
        self.entries = list(entries)
        self.broken = broken
        self.writes = []
        self.closed = False
        self.opened = None

    def open_path(self, path):
        self.opened = path

    def close(self):
        self.closed = True

    def write(self, data):
        self.writes.append(bytes(data))
        return len(data)

    def read(self, size, timeout_ms=None):
        if self.broken:
            return []
        # writes carry a leading report id
        opcode, index = self.writes[-1][3], self.writes[-1][4]
        if opcode == 0x00:
            response = bytes([len(self.entries)])
        elif opcode == 0x01:
            response = struct.pack("<BHHHHH", index, *self.entries[index])
        else:
            response = b""
        return response + b"\x00" * (MSG_LEN - len(response))


def descriptor(path=b"/dev/hidraw3", serial="vial:f64c2b3c"):
    return {
        "path": path,
        "vendor_id": 0x4C50,
        "product_id": 0x0001,
        "usage_page": RAWHID_USAGE_PAGE,
        "usage": RAWHID_USAGE,
        "serial_number": serial,
        "product_string": "Test Keyboard",
    }


@pytest.fixture
def keyboard(monkeypatch):
    dev = FakeKeyboardDevice([
        (0x04, 0x05, 0x00, 0x00, 200),
        (0x0104, 0x00, 0x00, 0x29, 150),
    ])
    monkeypatch.setattr(util.hid, "_enumerate_result", [descriptor()])
    monkeypatch.setattr(util.hid, "device", lambda: dev)
    monkeypatch.setattr(util.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(main, "init_logger", lambda: None)
    return dev


def test_list(keyboard, capsys):
    assert main.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "4C50:0001\tTest Keyboard" in out
    # listing doesn't talk to the keyboard
    assert keyboard.writes == []


def test_list_skips_non_vial(keyboard, monkeypatch, capsys):
    monkeypatch.setattr(util.hid, "_enumerate_result", [descriptor(serial="1234")])
    assert main.main(["list"]) == 0
    assert capsys.readouterr().out == ""


def test_list_by_vid_pid(keyboard, monkeypatch, capsys):
    monkeypatch.setattr(util.hid, "_enumerate_result", [descriptor(serial="1234")])
    assert main.main(["--vid", "0x4C50", "--pid", "0x0001", "list"]) == 0
    assert "Test Keyboard" in capsys.readouterr().out


def test_no_keyboard(keyboard, monkeypatch):
    monkeypatch.setattr(util.hid, "_enumerate_result", [])
    assert main.main(["dump"]) == 1


def test_dump(keyboard, capsys):
    assert main.main(["dump"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "TD(0)\ttap=KC_A\thold=KC_B\tdoubletap=KC_NO\ttaphold=KC_NO\ttapms=200",
        "TD(1)\ttap=LCTL(KC_A)\thold=KC_NO\tdoubletap=KC_NO\ttaphold=KC_ESCAPE\ttapms=150",
    ]
    assert keyboard.opened == b"/dev/hidraw3"
    assert keyboard.closed
    assert [w[3] for w in keyboard.writes] == [0x00, 0x01, 0x01]


def test_set(keyboard, capsys):
    assert main.main(["set", "1", "KC_ENT", "LCTL(KC_A)", "KC_NO", "0x0029", "180"]) == 0

    assert keyboard.writes[-1][:15] == bytes([0x00, 0xFE, 0x0D, 0x02, 0x01,
                                              0x28, 0x00, 0x04, 0x01, 0x00, 0x00, 0x29, 0x00, 0xB4, 0x00])
    out = capsys.readouterr().out
    assert "TD(1)\ttap=KC_ENTER\thold=LCTL(KC_A)\tdoubletap=KC_NO\ttaphold=KC_ESCAPE\ttapms=180" in out
    assert keyboard.closed


def test_set_unchanged_sends_nothing(keyboard):
    assert main.main(["set", "0", "KC_A", "KC_B", "KC_NO", "KC_NO", "200"]) == 0
    assert [w[3] for w in keyboard.writes] == [0x00, 0x01, 0x01]


def test_set_unknown_key(keyboard):
    with pytest.raises(SystemExit) as e:
        main.main(["set", "0", "KC_NOPE", "KC_B", "KC_NO", "KC_NO", "200"])
    assert e.value.code == 2
    assert keyboard.writes == []


def test_set_out_of_range(keyboard):
    assert main.main(["set", "5", "KC_A", "KC_B", "KC_NO", "KC_NO", "200"]) == 1
    assert keyboard.closed
    assert 0x02 not in [w[3] for w in keyboard.writes]


def test_keyboard_not_answering(keyboard):
    keyboard.broken = True
    assert main.main(["dump"]) == 1
    assert keyboard.closed
