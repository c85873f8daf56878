"""String helpers with C-library semantics."""

import re
from itertools import zip_longest

from ftkit.numbers import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    ULONG_MAX,
    check_range,
)


def _check_char(char):
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def strlen(text):
    """Length of ``text``; ``None`` counts as empty."""
    return 0 if text is None else len(text)


def strchr(text, char):
    """Return the tail of ``text`` starting at the first ``char``, or None."""
    _check_char(char)
    position = text.find(char)
    return None if position < 0 else text[position:]


def to_lower(char):
    """Lower-case an ASCII capital letter; any other character is unchanged."""
    _check_char(char)
    if "A" <= char <= "Z":
        return chr(ord(char) + 32)
    return char


def _compare(s1, s2, fold):
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        a, b = fold(a), fold(b)
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1, s2):
    """Difference of the first differing character codes, 0 when equal."""
    return _compare(s1, s2, lambda c: c)


def strcmp_lowercase(s1, s2):
    """Like :func:`strcmp`, ignoring ASCII case."""
    return _compare(s1, s2, to_lower)


def itoa(number):
    """Decimal text of a 32-bit signed integer."""
    return str(check_range(number, INT_MIN, INT_MAX, "int"))


def signed_num_to_str(number):
    """Decimal text of a 64-bit signed integer."""
    return str(check_range(number, LONG_MIN, LONG_MAX, "long long"))


def unsigned_num_to_str(number):
    """Decimal text of a 64-bit unsigned integer."""
    return str(check_range(number, 0, ULONG_MAX, "unsigned long long"))


def substr(text, start, end):
    """Characters from ``start`` to ``end`` inclusive, clamped to the text.

    Returns None for a missing text or when ``start`` is past ``end``.
    """
    if text is None or start > end:
        return None
    if start < 0:
        raise ValueError("start must not be negative")
    return text[start : end + 1]


def strjoin(s1, s2):
    """Concatenate two strings, either of which may be None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def split(text, char):
    """Split ``text`` on runs of ``char``."""
    _check_char(char)
    return re.split(f"{re.escape(char)}+", text)


def index_of(text, char):
    """Index of the first ``char`` in ``text``, or -1."""
    _check_char(char)
    return text.find(char)


def last_index_of(text, char):
    """Index of the last ``char`` in ``text``, or -1."""
    _check_char(char)
    return text.rfind(char)


def trim(text, charset):
    """Strip characters of ``charset`` from both ends of ``text``.

    When every character belongs to the set, the first one is kept.
    """
    if text is None or charset is None:
        return None
    stripped = text.strip(charset)
    if not stripped and text:
        return text[0]
    return stripped


def is_in_set(char, charset):
    """Whether ``char`` is one of the characters of ``charset``."""
    _check_char(char)
    return char in charset


def has_set(text, charset):
    """Tail of ``text`` from its first character found in ``charset``, or None."""
    return next(
        (text[i:] for i, c in enumerate(text) if c in charset),
        None,
    )


def strncpy(src, size):
    """``src`` cut or padded with NUL characters to exactly ``size`` characters."""
    if size < 0:
        raise ValueError("size must not be negative")
    return src[:size].ljust(size, "\0")


def memcpy(dest, src, n):
    """Copy ``n`` bytes of ``src`` into the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    if n < 0 or n > len(dest) or n > len(src):
        raise ValueError(f"cannot copy {n} bytes")
    dest[:n] = bytes(memoryview(src)[:n])
    return dest