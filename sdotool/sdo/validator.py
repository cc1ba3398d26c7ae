import enum
import logging
import re
from typing import Union

from sdotool.objectdictionary import ObjectEntry
from sdotool.objectdictionary.datatypes import *
from sdotool.sdo.exceptions import (
    AccessDeniedError,
    InvalidDataTypeFormatError,
    LengthMismatchError,
    UnsupportedDataTypeError,
)
from sdotool.utils import pretty_index

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"^[0-9A-Fa-f]+$")


class SdoRequestType(enum.Enum):
    """Direction of an SDO request, seen from the client."""

    #: Read the object from the server
    UPLOAD = "upload"
    #: Write the object to the server
    DOWNLOAD = "download"


#: Expected payload size in bytes for each supported data type.
#: The string types have a variable length on a real device, they are
#: checked against a fixed size of 8 bytes.
DATA_TYPE_SIZES = {
    BOOLEAN: 1,
    INTEGER8: 1,
    INTEGER16: 2,
    INTEGER32: 4,
    UNSIGNED8: 1,
    UNSIGNED16: 2,
    UNSIGNED32: 4,
    REAL32: 4,
    VISIBLE_STRING: 8,
    OCTET_STRING: 8,
    UNICODE_STRING: 8,
    TIME_OF_DAY: 8,
    TIME_DIFFERENCE: 8,
    REAL64: 8,
}


def decode_data_type(data_type: str) -> int:
    """Convert a data type as written in an EDS (e.g. "0x0007") to its code.

    :raises InvalidDataTypeFormatError: If the text is not a 16-bit hex code.
    """
    digits = data_type[2:] if data_type.startswith("0x") else data_type
    if not _HEX_DIGITS.match(digits):
        raise InvalidDataTypeFormatError(data_type)
    code = int(digits, 16)
    if code > 0xFFFF:
        raise InvalidDataTypeFormatError(data_type)
    return code


def expected_size(code: int) -> int:
    """Number of payload bytes for a data type code.

    :raises UnsupportedDataTypeError: If the data type is not supported.
    """
    try:
        return DATA_TYPE_SIZES[code]
    except KeyError:
        raise UnsupportedDataTypeError(code) from None


def validate_sdo_message(
    entry: ObjectEntry,
    request_type: Union[SdoRequestType, str],
    data: bytes,
) -> None:
    """Check that an SDO request would be legal for an object.

    The checks run in order and the first failing one is raised: the data
    type must be decodable, the payload must have the size of the data type
    and the access rights must permit the direction.

    :param entry:
        Object to address.
    :param request_type:
        :attr:`SdoRequestType.UPLOAD` or :attr:`SdoRequestType.DOWNLOAD`
        (or their string values).
    :param data:
        Payload of the request.

    :raises sdotool.sdo.SdoValidationError:
        One of :class:`InvalidDataTypeFormatError`,
        :class:`UnsupportedDataTypeError`, :class:`LengthMismatchError` or
        :class:`AccessDeniedError`.
    """
    request_type = SdoRequestType(request_type)
    code = decode_data_type(entry.data_type)
    size = expected_size(code)
    if len(data) != size:
        raise LengthMismatchError(size, len(data), code)

    if request_type is SdoRequestType.UPLOAD:
        if not entry.readable:
            raise AccessDeniedError("Read access denied")
    elif not entry.writable:
        raise AccessDeniedError("Write access denied")

    logger.debug("Valid SDO %s for %s (%d bytes)", request_type.value,
                 pretty_index(getattr(entry, "index", None)), len(data))
