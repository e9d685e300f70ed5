"""
Incremental numeric validation for text-entry fields.

The checks in this module decide whether a string could still become a valid
integer or decimal number while the user is typing it. They are pure functions
over ``str`` and never raise.
"""

from __future__ import annotations

import re

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

DIGITS = frozenset("0123456789")
SIGNS = frozenset("+-")
DECIMAL_SEPARATOR = "."

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_COMPLETE_DOUBLE_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def is_int32(text: str) -> bool:
    """
    Check whether text is a complete base-10 signed 32-bit integer.

    Args:
        text: Candidate string

    Returns:
        True if text is an optional sign followed by ASCII digits and the
        value fits in 32 bits
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return False
    return INT32_MIN <= int(text) <= INT32_MAX


def is_valid_integer(text: str) -> bool:
    """
    Check whether text is acceptable content for an integer field.

    The empty string is accepted: it is what the field holds after the user
    deletes everything.
    """
    return text == "" or is_int32(text)


def is_valid_double(text: str) -> bool:
    """
    Check whether text is acceptable content for a decimal field.

    Accepts every prefix of a dot-decimal number, so "-", "+", "." and "1."
    are valid while the user keeps typing. The separator is always ".",
    independent of the host locale.

    Args:
        text: Candidate string (the field's full prospective text)

    Returns:
        True if text is empty or an optional leading sign followed by digits
        and at most one dot
    """
    seen_separator = False

    for index, char in enumerate(text):
        if char in DIGITS:
            continue
        if char in SIGNS:
            # Sign is only allowed in leading position
            if index != 0:
                return False
        elif char == DECIMAL_SEPARATOR:
            if seen_separator:
                return False
            seen_separator = True
        else:
            return False

    return True


def is_complete_double(text: str) -> bool:
    """
    Check whether text is a finished dot-decimal number.

    Unlike :func:`is_valid_double` this rejects incomplete forms such as
    "", "-", "." and "+.".
    """
    return _COMPLETE_DOUBLE_PATTERN.fullmatch(text) is not None
