# SPDX-License-Identifier: GPL-2.0-or-later
"""Pytest configuration - runs before any tests."""

import os
import struct
import sys
from types import ModuleType

import pytest

# Run Qt headless so the suite works without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class MockHidDevice:
    """Mock HID device that does nothing."""

    def open_path(self, path):
        pass

    def close(self):
        pass

    def write(self, data):
        return len(data)

    def read(self, size, timeout_ms=None):
        return []


class MockHidModule(ModuleType):
    """Mock hid module that doesn't touch real hardware.

    This is a real module object so that tests can override
    attributes like `enumerate` and `device`.
    """

    def __init__(self, name='hid'):
        super().__init__(name)
        self._enumerate_result = []

    def enumerate(self):
        """Return empty list by default - no real hardware."""
        return self._enumerate_result

    def device(self):
        """Return a mock device."""
        return MockHidDevice()


# Mock hid and hidraw modules BEFORE any imports can use them
# util.py imports hidraw on Linux, hid on other platforms
# This prevents tests from connecting to real keyboards
_mock_hid = MockHidModule('hid')

for module_name in ('hid', 'hidraw'):
    if module_name not in sys.modules:
        sys.modules[module_name] = _mock_hid


class FakeSettings:
    """Stands in for QSettings so tests never write the user's settings."""

    def __init__(self):
        self.values = {}

    def value(self, key, default=None):
        return self.values.get(key, default)

    def setValue(self, key, value):
        self.values[key] = value


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    import storage

    fake = FakeSettings()
    monkeypatch.setattr(storage, "_settings", fake)
    return fake


class FakeChannel:
    """Device channel serving tap dance entries from memory.

    entries: list of (tap, hold, doubletap, taphold, tapms) integer tuples
    fail_at: index whose query raises DeviceSyncError
    """

    def __init__(self, entries=(), fail_at=None):
        self.entries = list(entries)
        self.fail_at = fail_at
        self.fail_send = False
        # every request in the order it was issued: ("query", opcode, index) / ("send", opcode, payload)
        self.requests = []

    def query(self, opcode, index):
        from protocol.device_channel import DeviceSyncError

        self.requests.append(("query", opcode, index))
        if index == self.fail_at:
            raise DeviceSyncError("device went away")
        return struct.pack("<BHHHHH", index, *self.entries[index]) + b"\x00" * 21

    def send(self, opcode, payload=b""):
        from protocol.device_channel import DeviceSyncError

        self.requests.append(("send", opcode, bytes(payload)))
        if self.fail_send:
            raise DeviceSyncError("device went away")
        return bytes([len(self.entries), 0, 0]) + b"\x00" * 29


@pytest.fixture
def fake_channel():
    return FakeChannel([
        (0x04, 0x05, 0x06, 0x07, 200),
        (0x0104, 0x00, 0x00, 0x00, 150),
        (0x2104, 0x5701, 0x7C00, 0x01, 175),
        (0x1004, 0x0FFF, 0x29, 0x2C, 0xFFFF),
    ])


@pytest.fixture
def make_channel():
    return FakeChannel
