from sdotool.sdo.exceptions import (
    AccessDeniedError,
    InvalidDataTypeFormatError,
    LengthMismatchError,
    SdoError,
    SdoValidationError,
    UnsupportedDataTypeError,
)
from sdotool.sdo.request import build_request
from sdotool.sdo.validator import SdoRequestType, validate_sdo_message
