"""Writing characters, strings and numbers to file descriptors."""

import os

from ftkit.numbers import INT_MAX, INT_MIN, check_range


def putchar(fd, char):
    """Write one byte: the low byte of a code point or integer."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        char = ord(char)
    os.write(fd, bytes([char & 0xFF]))


def putstr(fd, text):
    """Write ``text`` encoded as UTF-8; None writes nothing."""
    if text:
        os.write(fd, text.encode("utf-8"))


def putendl(fd, text):
    """Write ``text`` followed by a newline."""
    putstr(fd, text)
    putchar(fd, "\n")


def putnbr(fd, number):
    """Write the decimal text of a 32-bit signed integer."""
    putstr(fd, str(check_range(number, INT_MIN, INT_MAX, "int")))