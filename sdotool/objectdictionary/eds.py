import re
import logging
import configparser
from configparser import RawConfigParser
from typing import Dict, NamedTuple, Optional, Union

from sdotool import objectdictionary
from sdotool.objectdictionary import ObjectEntry, SubObjectEntry
from sdotool.objectdictionary.exceptions import (
    EdsParseError,
    MissingDeviceTypeError,
    MissingIdentityError,
)
from sdotool.utils import parse_hex_or_dec, pretty_index

logger = logging.getLogger(__name__)

# Sections describing the file rather than objects
SKIPPED_SECTIONS = frozenset([
    "FileInfo",
    "DeviceInfo",
    "DummyUsage",
    "Comments",
    "MandatoryObjects",
    "OptionalObjects",
    "ManufacturerObjects",
    "Dummy",
])

DEVICE_TYPE_SECTION = "1000"
IDENTITY_SECTION = "1018"

_HEX_DIGITS = re.compile(r"^[0-9A-Fa-f]+$")
_DEC_DIGITS = re.compile(r"^[0-9]+$")
# [2001sub1], [2001Sub0x1A]
_SUB_SUFFIX = re.compile(r"^(?P<index>\S+?)[Ss]ub(?P<subindex>\S+)$")
# [2001 Sub 1]
_SUB_SEPARATOR = " Sub "


class TopLevel(NamedTuple):
    index: int


class SubLevel(NamedTuple):
    index: int
    subindex: str


class Skip(NamedTuple):
    reason: str


TSection = Union[TopLevel, SubLevel, Skip]


def classify_section(section: str) -> TSection:
    """Work out which object a section name refers to.

    :param section: Section name as found in the EDS.

    :return:
        :class:`TopLevel` for an object, :class:`SubLevel` for a sub-object
        (with the sub-index token still unparsed) or :class:`Skip`.
    """
    if not section or section in SKIPPED_SECTIONS:
        return Skip("not an object")

    match = _SUB_SUFFIX.match(section)
    if match is not None:
        index_text, subindex = match.group("index"), match.group("subindex")
    elif _SUB_SEPARATOR in section:
        index_text, _, subindex = section.partition(_SUB_SEPARATOR)
    else:
        index_text, subindex = section, None

    index = _parse_index(index_text)
    if index is None:
        return Skip("invalid index %r" % index_text)
    if subindex is None:
        return TopLevel(index)
    return SubLevel(index, subindex)


def parse_subindex(token: str) -> int:
    """Parse a sub-index token, ``0x`` prefixed hexadecimal or else decimal.

    :raises ValueError: If the token is not an 8-bit unsigned number.
    """
    if token.startswith("0x"):
        digits, pattern, base = token[2:], _HEX_DIGITS, 16
    else:
        digits, pattern, base = token, _DEC_DIGITS, 10
    if not pattern.match(digits):
        raise ValueError("invalid sub-index %r" % token)
    subindex = int(digits, base)
    if subindex > 0xFF:
        raise ValueError("sub-index %r out of range" % token)
    return subindex


def _parse_index(text: str) -> Optional[int]:
    if not _HEX_DIGITS.match(text):
        return None
    index = int(text, 16)
    if index > 0xFFFF:
        return None
    return index


def import_eds(source) -> objectdictionary.ObjectDictionary:
    """Build an object dictionary from an EDS file.

    :param source:
        Path to the EDS file or a file like object.

    :raises OSError: If the file could not be opened.
    :raises EdsParseError: If the file is not a valid INI document.
    :raises MissingDeviceTypeError: If object 0x1000 is not defined.
    :raises MissingIdentityError: If object 0x1018 is not defined.
    """
    eds = RawConfigParser(strict=False)
    eds.optionxform = str
    if hasattr(source, "read"):
        fp = source
    else:
        fp = open(source, encoding="utf-8-sig")
    try:
        eds.read_file(fp)
    except configparser.Error as exc:
        raise EdsParseError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise EdsParseError(str(exc)) from exc
    finally:
        fp.close()

    device_type = _read_device_type(eds)
    vendor_id = _read_vendor_id(eds)

    objects: Dict[int, ObjectEntry] = {}
    for section in eds.sections():
        kind = classify_section(section)
        if isinstance(kind, Skip):
            logger.debug("Skipping section [%s]: %s", section, kind.reason)
        elif isinstance(kind, TopLevel):
            _build_object(eds, section, objects, kind.index)
        else:
            try:
                subindex = parse_subindex(kind.subindex)
            except ValueError as exc:
                logger.debug("Skipping section [%s]: %s", section, exc)
                continue
            _build_sub_object(eds, section, objects, kind.index, subindex)

    od = objectdictionary.ObjectDictionary(device_type, vendor_id, objects)
    logger.info("Loaded %d objects (Device Type=0x%08X, Vendor ID=0x%08X)",
                len(od), device_type, vendor_id)
    return od


def _read_device_type(eds: RawConfigParser) -> int:
    if not eds.has_option(DEVICE_TYPE_SECTION, "DefaultValue"):
        raise MissingDeviceTypeError()
    value = eds.get(DEVICE_TYPE_SECTION, "DefaultValue")
    try:
        return parse_hex_or_dec(value)
    except ValueError as exc:
        raise EdsParseError(str(exc)) from exc


def _read_vendor_id(eds: RawConfigParser) -> int:
    if not eds.has_section(IDENTITY_SECTION):
        raise MissingIdentityError()
    value = eds.get(IDENTITY_SECTION, "Sub1",
                    fallback=eds.get(IDENTITY_SECTION, "1", fallback=None))
    if value is None:
        logger.warning("No Vendor-ID in [%s], using 0", IDENTITY_SECTION)
        return 0
    try:
        return parse_hex_or_dec(value)
    except ValueError:
        logger.warning("Invalid Vendor-ID %r in [%s], using 0",
                       value, IDENTITY_SECTION)
        return 0


def _build_object(eds, section, objects, index):
    name = eds.get(section, "ParameterName", fallback="Unnamed")
    data_type = eds.get(section, "DataType", fallback="0x0005")
    access_rights = eds.get(section, "AccessType", fallback="ro")
    entry = objects.get(index)
    if entry is None:
        objects[index] = ObjectEntry(index, name, data_type, access_rights)
    else:
        # Keep sub-objects collected before the top-level section
        entry.name = name
        entry.data_type = data_type
        entry.access_rights = access_rights


def _build_sub_object(eds, section, objects, index, subindex):
    entry = objects.get(index)
    if entry is None:
        entry = ObjectEntry(index, "Unnamed", "UNKNOWN", "rw")
        objects[index] = entry
    sub_object = SubObjectEntry(
        index,
        subindex,
        value=eds.get(section, "Value", fallback=None),
        default_value=eds.get(section, "DefaultValue", fallback=None),
        data_type=eds.get(section, "DataType", fallback="0x0005"),
        access=eds.get(section, "AccessType", fallback="rw"),
    )
    if subindex in entry:
        logger.debug("Overwriting %s", pretty_index(index, subindex))
    entry._add_member(sub_object)
