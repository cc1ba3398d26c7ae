"""Interactive tool for checking SDO requests against an EDS."""
import argparse
import binascii
import logging
import sys
from typing import Callable, List, Optional

from sdotool.objectdictionary import ObjectDictionary, ObjectDictionaryError
from sdotool.objectdictionary.eds import import_eds
from sdotool.sdo import (
    SdoRequestType,
    SdoValidationError,
    build_request,
    validate_sdo_message,
)
from sdotool.utils import parse_user_number

logger = logging.getLogger(__name__)

SEPARATOR = "─" * 50


class _Restart(Exception):
    """Start over with a new object ID."""


class _Quit(Exception):
    """Leave the interactive loop."""


def cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Command line interface."""
    parser = argparse.ArgumentParser(
        prog="sdotool", description="CANopen SDO utility tool")
    parser.add_argument("-c", "--can-device", default="can0",
                        help="CAN interface the requests are meant for")
    parser.add_argument("-e", "--eds-file", required=True,
                        help="EDS file describing the node")
    parser.add_argument("-n", "--node-id", required=True,
                        help="Node ID, decimal or 0x prefixed hexadecimal")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log output")
    return parser.parse_args(argv)


class Session:
    """Prompt for requests and validate them against an object dictionary.

    :param od: Object dictionary of the node.
    :param node_id: Node ID the requests are addressed to.
    :param prompt: Function reading a line of user input given a prompt.
    :param output: Function printing a line.
    """

    def __init__(self, od: ObjectDictionary, node_id: int,
                 prompt: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None):
        self.od = od
        self.node_id = node_id
        self.prompt = prompt or input
        self.output = output or print

    def run(self) -> None:
        """Run until the user quits or input ends."""
        while True:
            try:
                self.step()
            except _Restart:
                continue
            except (_Quit, EOFError):
                self.output("Goodbye!")
                return
            self.output(SEPARATOR)

    def step(self) -> None:
        """Handle one request from object selection to validation."""
        text = self.prompt(
            "Enter Object ID (decimal, 0xHEX, or 'quit' to exit): ")
        if text.strip().lower() == "quit":
            raise _Quit()
        index = self._number(text, 0xFFFF,
                             "Invalid Object ID. Use 0x0000-0xFFFF or decimal.")

        entry = self.od.lookup_object(index)
        if entry is None:
            self.output("Object 0x%04X not found" % index)
            raise _Restart()
        self.output("Object 0x%04X: Name='%s', Access='%s', DataType='%s'" % (
            index, entry.name, entry.access_rights, entry.data_type))

        subindex = 0
        text = self.prompt("Enter Sub-Index (decimal, 0xHEX, or 'skip'): ")
        if text.strip().lower() != "skip":
            subindex = self._number(text, 0xFF, "Invalid Sub-Index.")
            sub_object = entry.sub_objects.get(subindex)
            if sub_object is None:
                self.output("  Sub-index 0x%02X not found" % subindex)
            else:
                self.output(
                    "  Sub 0x%02X: Value='%s', Default='%s' (type=%s, access=%s)" % (
                        subindex, sub_object.value, sub_object.default_value,
                        sub_object.data_type, sub_object.access))

        text = self.prompt("SDO Request Type (upload/download): ")
        try:
            request_type = SdoRequestType(text.strip().lower())
        except ValueError:
            self.output("Invalid type. Use 'upload' or 'download'.")
            raise _Restart() from None

        text = self.prompt(
            "Enter Message Data (HEX string, e.g., 0x01020304): ").strip()
        if text.startswith("0x"):
            text = text[2:]
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, ValueError):
            self.output("Invalid hex.")
            raise _Restart() from None

        try:
            validate_sdo_message(entry, request_type, data)
        except SdoValidationError as exc:
            self.output("Invalid SDO: %s" % exc)
            return
        self.output("Valid SDO %s for 0x%04X (%d bytes)" % (
            request_type.value, index, len(data)))
        message = build_request(self.node_id, index, subindex, request_type,
                                data)
        self.output("  Request: 0x%03X [%s]" % (
            message.arbitration_id, message.data.hex(" ")))

    def _number(self, text: str, maximum: int, error: str) -> int:
        try:
            return parse_user_number(text, 0, maximum)
        except ValueError:
            self.output(error)
            raise _Restart() from None


def main(argv: Optional[List[str]] = None) -> int:
    args = cli(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose > 1 else
        logging.INFO if args.verbose else logging.WARNING)

    try:
        node_id = parse_user_number(args.node_id, 1, 127)
    except ValueError as exc:
        print("Invalid Node ID %s: %s" % (args.node_id, exc), file=sys.stderr)
        return 2

    try:
        od = import_eds(args.eds_file)
    except (OSError, ObjectDictionaryError) as exc:
        print("Failed to load EDS file: %s" % exc, file=sys.stderr)
        return 1

    logger.info("Requests are checked for node %d on %s",
                node_id, args.can_device)
    print("Loaded EDS: Device Type=0x%08X, Vendor ID=0x%08X" % (
        od.device_type, od.vendor_id))
    Session(od, node_id).run()
    return 0
