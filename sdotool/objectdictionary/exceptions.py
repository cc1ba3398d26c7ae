class ObjectDictionaryError(Exception):
    pass


class EdsParseError(ObjectDictionaryError):
    """Raised if the EDS file is not a well formed INI document"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return "EDS parse error: %s" % self.message


class MissingDeviceTypeError(ObjectDictionaryError):
    """Raised if the mandatory Device Type object (0x1000) is missing"""

    def __str__(self):
        return "Missing mandatory object 0x1000"


class MissingIdentityError(ObjectDictionaryError):
    """Raised if the mandatory Identity object (0x1018) is missing"""

    def __str__(self):
        return "Missing Identity object 0x1018"
