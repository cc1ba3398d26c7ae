"""Additional utility functions for sdotool."""
from typing import Optional, Union


def parse_hex_or_dec(text: str, minimum: int = 0,
                     maximum: int = 0xFFFFFFFF) -> int:
    """Parse a numeric literal as found in EDS files.

    A ``0x`` prefix forces base 16. Without a prefix the text is tried as
    base 16 first and then as base 10.

    :param text: Text to parse, surrounding whitespace is ignored.
    :param minimum: Lowest accepted value (inclusive).
    :param maximum: Highest accepted value (inclusive).

    :raises ValueError: If the text is not a number or out of range.
    """
    value = text.strip()
    if value.startswith("0x"):
        result = _parse_digits(value[2:], 16)
    else:
        try:
            result = _parse_digits(value, 16)
        except ValueError:
            result = _parse_digits(value, 10)
    if not minimum <= result <= maximum:
        raise ValueError("%d is out of range [%d, %d]" % (
            result, minimum, maximum))
    return result


def parse_user_number(text: str, minimum: int = 0,
                      maximum: int = 0xFFFFFFFF) -> int:
    """Parse a number typed by a user, ``0x`` for hexadecimal else decimal."""
    value = text.strip().lower()
    if value.startswith("0x"):
        result = _parse_digits(value[2:], 16)
    else:
        result = _parse_digits(value, 10)
    if not minimum <= result <= maximum:
        raise ValueError("Out of range")
    return result


def _parse_digits(digits: str, base: int) -> int:
    # int() would also accept signs, underscores and inner whitespace
    valid = "0123456789abcdefABCDEF" if base == 16 else "0123456789"
    if not digits or any(c not in valid for c in digits):
        raise ValueError("invalid digit found in %r" % digits)
    return int(digits, base)


def pretty_index(index: Optional[int],
                 sub: Union[int, str, None] = None) -> str:
    """Format an index and sub-index pair for log and user messages."""
    index_str = "" if index is None else "0x%04X" % index
    if isinstance(sub, int):
        sub_str = "%02X" % sub
        if not index_str:
            return "0x" + sub_str
        return "%s:%s" % (index_str, sub_str)
    return index_str
