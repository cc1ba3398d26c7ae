from sdotool.objectdictionary import (
    ObjectDictionary,
    ObjectDictionaryError,
    ObjectEntry,
    SubObjectEntry,
    import_od,
)
from sdotool.objectdictionary.eds import import_eds
from sdotool.sdo import (
    SdoRequestType,
    SdoValidationError,
    build_request,
    validate_sdo_message,
)

__version__ = "0.3.0"

__all__ = [
    "ObjectDictionary",
    "ObjectDictionaryError",
    "ObjectEntry",
    "SubObjectEntry",
    "import_od",
    "import_eds",
    "SdoRequestType",
    "SdoValidationError",
    "build_request",
    "validate_sdo_message",
]

load_eds = import_eds
