class SdoError(Exception):
    pass


class SdoValidationError(SdoError):
    """A request would not be legal for the addressed object."""


class InvalidDataTypeFormatError(SdoValidationError):
    """The object's data type is not a hexadecimal type code."""

    def __init__(self, data_type: str):
        #: The data type text as found in the object dictionary
        self.data_type = data_type

    def __str__(self):
        return "Invalid DataType format: %s" % self.data_type


class UnsupportedDataTypeError(SdoValidationError):
    """The data type code has no known size."""

    def __init__(self, data_type: int):
        #: Data type code
        self.data_type = data_type

    def __str__(self):
        return "Unsupported DataType: 0x%04X" % self.data_type


class LengthMismatchError(SdoValidationError):
    """The payload size does not match the size of the data type."""

    def __init__(self, expected: int, actual: int, data_type: int):
        self.expected = expected
        self.actual = actual
        self.data_type = data_type

    def __str__(self):
        unit = "byte" if self.expected == 1 else "bytes"
        return "Message length mismatch: expected %d %s for DataType 0x%04X, got %d" % (
            self.expected, unit, self.data_type, self.actual)


class AccessDeniedError(SdoValidationError):
    """The object's access rights do not permit the request direction."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return "Access denied: %s" % self.message
