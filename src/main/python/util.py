# SPDX-License-Identifier: GPL-2.0-or-later
import logging
import os
import pathlib
import sys
import time
from logging.handlers import RotatingFileHandler

from qtpy.QtCore import QStandardPaths

if sys.platform.startswith("linux"):
    # hidraw reports usage_page/serial_number properly on Linux
    try:
        import hidraw as hid
    except ImportError:
        import hid
else:
    import hid

MSG_LEN = 32

# Raw HID interface exposed by VIA/Vial firmware
RAWHID_USAGE_PAGE = 0xFF60
RAWHID_USAGE = 0x61

VIAL_SERIAL_NUMBER_MAGIC = "vial:f64c2b3c"


def hid_send(dev, msg, retries=1):
    if len(msg) > MSG_LEN:
        raise RuntimeError("message must be less than 32 bytes")
    msg += b"\x00" * (MSG_LEN - len(msg))

    data = b""
    first = True
    attempt = 0

    while retries > 0:
        attempt += 1
        retries -= 1
        if not first:
            time.sleep(0.5)
        first = False
        try:
            # add 00 at start for hidapi report id
            logging.debug("hid_send attempt %d: writing %s", attempt, msg[:8].hex())
            written = dev.write(b"\x00" + msg)
            if written != MSG_LEN + 1:
                logging.warning("hid_send: write returned %d, expected %d", written, MSG_LEN + 1)
                continue

            data = bytes(dev.read(MSG_LEN, timeout_ms=500))
            if not data:
                logging.warning("hid_send: read returned empty data")
                continue
            logging.debug("hid_send: received %s", data[:8].hex())
        except OSError as e:
            logging.warning("hid_send: OSError: %s", e)
            continue
        break

    if not data:
        logging.error("hid_send: failed to communicate after %d attempts", attempt)
        raise RuntimeError("failed to communicate with the device")
    return data


def is_rawhid(desc):
    return desc["usage_page"] == RAWHID_USAGE_PAGE and desc["usage"] == RAWHID_USAGE


def find_vial_devices(vid=None, pid=None, quiet=False):
    """ Lists raw HID descriptors of Vial keyboards, or of any raw HID board matching vid/pid """
    filtered = []
    seen_paths = set()
    for desc in hid.enumerate():
        if desc["path"] in seen_paths or not is_rawhid(desc):
            continue

        if vid is not None and pid is not None:
            matched = desc["vendor_id"] == vid and desc["product_id"] == pid
        else:
            matched = VIAL_SERIAL_NUMBER_MAGIC in (desc.get("serial_number") or "")

        if matched:
            if not quiet:
                logging.info("Matching VID={:04X}, PID={:04X}, serial={}, path={}".format(
                    desc["vendor_id"], desc["product_id"], desc.get("serial_number"), desc["path"]
                ))
            filtered.append(desc)
            seen_paths.add(desc["path"])
    return filtered


def open_device(desc):
    dev = hid.device()
    dev.open_path(desc["path"])
    return dev


def init_logger():
    logging.basicConfig(level=logging.INFO)
    directory = QStandardPaths.writableLocation(QStandardPaths.AppLocalDataLocation)
    pathlib.Path(directory).mkdir(parents=True, exist_ok=True)
    path = os.path.join(directory, "tapbind.log")
    handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"))
    logging.getLogger().addHandler(handler)
