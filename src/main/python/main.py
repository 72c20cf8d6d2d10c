# SPDX-License-Identifier: GPL-2.0-or-later
import argparse
import logging
import sys

from keycodes.any_keycode import UnknownKeyIdentifier
from keycodes.keycodes import Keycode
from protocol.device_channel import VialDeviceChannel, DeviceSyncError
from protocol.tap_dance import TapDanceTable, TapDanceEntry
from util import init_logger, find_vial_devices, open_device


def print_table(table):
    for entry in table.entries:
        print("TD({})\ttap={}\thold={}\tdoubletap={}\ttaphold={}\ttapms={}".format(*entry.as_tuple()))


def build_parser():
    parser = argparse.ArgumentParser(description="Read and edit tap dance entries of a Vial keyboard")
    parser.add_argument("--vid", type=lambda s: int(s, 0), help="vendor id of a sideloaded keyboard")
    parser.add_argument("--pid", type=lambda s: int(s, 0), help="product id of a sideloaded keyboard")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="list connected keyboards")
    sub.add_parser("dump", help="print all tap dance entries")
    set_cmd = sub.add_parser("set", help="change one tap dance entry")
    set_cmd.add_argument("index", type=int)
    set_cmd.add_argument("tap")
    set_cmd.add_argument("hold")
    set_cmd.add_argument("doubletap")
    set_cmd.add_argument("taphold")
    set_cmd.add_argument("tapms", type=int)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    init_logger()

    entry = None
    if args.command == "set":
        try:
            keys = [Keycode.normalize(k) for k in (args.tap, args.hold, args.doubletap, args.taphold)]
        except UnknownKeyIdentifier as e:
            parser.error(str(e))
        entry = TapDanceEntry(args.index, *keys, tapms=args.tapms)

    devices = find_vial_devices(args.vid, args.pid)
    if args.command == "list":
        for desc in devices:
            print("{:04X}:{:04X}\t{}\t{}".format(desc["vendor_id"], desc["product_id"],
                                                 desc.get("product_string"), desc["path"]))
        return 0
    if not devices:
        logging.error("no Vial keyboard found")
        return 1

    dev = open_device(devices[0])
    try:
        table = TapDanceTable(VialDeviceChannel(dev))
        table.reload_entry_counts()
        table.reload_tap_dance()
        if entry is not None:
            table.tap_dance_set(entry.tdid, entry)
        print_table(table)
    except DeviceSyncError as e:
        logging.error("keyboard communication failed: %s", e)
        return 1
    except IndexError as e:
        logging.error("%s", e)
        return 1
    finally:
        dev.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
