"""Operations on NUL-terminated character strings.

Strings are ordinary Python ``str`` values. As with C strings, a string ends
at its first NUL character; anything after it is ignored. Functions that
locate characters return an index into the string, or ``None`` when nothing
is found. The bounded copy and concatenation functions return the resulting
string together with the length they tried to create.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"
_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _terminated(s: str) -> str:
    """Return s up to, but not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference between the character codes at the first position
    where the strings differ or either one ends, or 0 if the first n
    characters are equal.
    """
    _check_count(n, "n")
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0 or y == 0:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle within the first length characters of haystack.

    Returns the index where needle starts, or None. An empty needle is found
    at index 0.
    """
    _check_count(length, "length")
    hay = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = hay.find(pattern, 0, length)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, including the terminator.

    Returns the resulting string and the length of src. With a size of 0
    the destination is returned unchanged.
    """
    _check_count(size, "size")
    source = _terminated(src)
    if size == 0:
        return dst, len(source)
    return source[: size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst in a buffer of size characters, including the terminator.

    Returns the resulting string and the length the full concatenation would
    have. When dst already fills the buffer it is returned unchanged and the
    length reported is ``size + strlen(src)``.
    """
    _check_count(size, "size")
    dest = _terminated(dst)
    source = _terminated(src)
    dst_len = min(len(dest), size)
    if size <= dst_len:
        return dst, size + len(source)
    room = size - 1 - dst_len
    return dest + source[:room], dst_len + len(source)


def strdup(s: str) -> str:
    """Return a copy of the string up to its first NUL."""
    return _terminated(s)


def atoi(s: str) -> int:
    """Convert the leading decimal integer of s.

    Leading blanks (space and tab through carriage return) are skipped, then
    an optional sign and a run of ASCII digits are read. Returns 0 when no
    digits follow.
    """
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value