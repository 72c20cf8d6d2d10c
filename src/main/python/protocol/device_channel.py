# SPDX-License-Identifier: GPL-2.0-or-later
"""
Request/response channel to a keyboard for Vial dynamic entry commands.

Every exchange is one 32-byte raw HID report out and one report back:

    request:  [0xFE] [0x0D] [opcode] [payload...]
    response: opcode specific, e.g. a tap dance entry for DYNAMIC_VIAL_TAP_DANCE_GET

The channel is a single shared resource, callers issue one request at a time
and wait for its response before sending the next one.
"""
import logging
import struct

from protocol.constants import CMD_VIA_VIAL_PREFIX, CMD_VIAL_DYNAMIC_ENTRY_OP
from util import hid_send


class DeviceSyncError(Exception):
    """Raised when the device could not be reached or returned an unusable response."""
    pass


class DeviceChannel:

    def send(self, opcode, payload=b""):
        """Sends a dynamic entry command and returns the response payload."""
        raise NotImplementedError

    def query(self, opcode, index):
        """Requests the dynamic entry at index and returns the response payload."""
        raise NotImplementedError


class VialDeviceChannel(DeviceChannel):

    def __init__(self, dev, retries=20):
        self.dev = dev
        self.retries = retries

    def _exchange(self, msg):
        try:
            return hid_send(self.dev, msg, retries=self.retries)
        except (OSError, RuntimeError) as e:
            logging.warning("dynamic entry command 0x%02X failed: %s", msg[2], e)
            raise DeviceSyncError(str(e)) from e

    def send(self, opcode, payload=b""):
        msg = struct.pack("BBB", CMD_VIA_VIAL_PREFIX, CMD_VIAL_DYNAMIC_ENTRY_OP, opcode) + bytes(payload)
        return self._exchange(msg)

    def query(self, opcode, index):
        msg = struct.pack("BBBB", CMD_VIA_VIAL_PREFIX, CMD_VIAL_DYNAMIC_ENTRY_OP, opcode, index)
        return self._exchange(msg)
