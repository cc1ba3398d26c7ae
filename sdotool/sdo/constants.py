import struct

# Command, index, subindex
SDO_STRUCT = struct.Struct("<BHB")
# Size indicated in a segmented initiate request
SDO_SIZE_STRUCT = struct.Struct("<L")

# Client COB-ID base, the node ID is added
SDO_REQUEST_COBID = 0x600

# Command[5-7]
REQUEST_DOWNLOAD = 1 << 5
REQUEST_UPLOAD = 2 << 5

EXPEDITED = 0x2             # Expedited and segmented
SIZE_SPECIFIED = 0x1        # All transfers

# Payload bytes available in an expedited transfer
EXPEDITED_MAX_SIZE = 4
