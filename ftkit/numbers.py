"""Decimal length of integers of the usual fixed widths."""

from operator import index

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
ULONG_MAX = 2**64 - 1


def check_range(number, low, high, kind):
    """Return ``number`` as an int, raising OverflowError if it leaves [low, high]."""
    value = index(number)
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {kind}")
    return value


def _decimal_len(number):
    # Zero and every negative number count as a single position.
    if number <= 0:
        return 1
    return len(str(number))


def int_len(number):
    """Number of decimal digits of a 32-bit signed integer."""
    return _decimal_len(check_range(number, INT_MIN, INT_MAX, "int"))


def long_len(number):
    """Number of decimal digits of a 64-bit signed integer."""
    return _decimal_len(check_range(number, LONG_MIN, LONG_MAX, "long"))


def signed_number_len(number):
    """Number of decimal digits of a 64-bit signed integer."""
    return _decimal_len(check_range(number, LONG_MIN, LONG_MAX, "long long"))


def unsigned_number_len(number):
    """Number of decimal digits of a 64-bit unsigned integer."""
    return _decimal_len(check_range(number, 0, ULONG_MAX, "unsigned long long"))