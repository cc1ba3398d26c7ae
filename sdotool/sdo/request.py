import logging
from typing import Union

import can

from sdotool.sdo.constants import *
from sdotool.sdo.validator import SdoRequestType

logger = logging.getLogger(__name__)


def build_request(
    node_id: int,
    index: int,
    subindex: int,
    request_type: Union[SdoRequestType, str],
    data: bytes = b"",
) -> can.Message:
    """Create the initiate request a client would send for a transfer.

    Nothing is transmitted, the message is only built.

    :param node_id:
        Node ID of the server (1-127).
    :param index:
        Index of the object.
    :param subindex:
        Sub-index of the object.
    :param request_type:
        Upload or download.
    :param data:
        Data to download, ignored for uploads. One to 4 bytes are sent
        expedited, empty or larger data initiates a segmented download.

    :return: The request message.
    """
    if not 1 <= node_id <= 127:
        raise ValueError("Node ID %d is out of range [1, 127]" % node_id)
    request_type = SdoRequestType(request_type)

    if request_type is SdoRequestType.UPLOAD:
        request = SDO_STRUCT.pack(REQUEST_UPLOAD, index, subindex)
        request += b"\x00\x00\x00\x00"
    elif 0 < len(data) <= EXPEDITED_MAX_SIZE:
        command = REQUEST_DOWNLOAD | EXPEDITED | SIZE_SPECIFIED
        command |= (EXPEDITED_MAX_SIZE - len(data)) << 2
        request = SDO_STRUCT.pack(command, index, subindex)
        request += bytes(data).ljust(EXPEDITED_MAX_SIZE, b"\x00")
    else:
        command = REQUEST_DOWNLOAD | SIZE_SPECIFIED
        request = SDO_STRUCT.pack(command, index, subindex)
        request += SDO_SIZE_STRUCT.pack(len(data))

    logger.debug("Built %s request for 0x%X:%d to node %d",
                 request_type.value, index, subindex, node_id)
    return can.Message(arbitration_id=SDO_REQUEST_COBID + node_id,
                       data=request,
                       is_extended_id=False)
