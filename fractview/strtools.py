"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

from itertools import takewhile

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _code(text: str, pos: int) -> int:
    """Character code at ``pos``, or 0 past the end of ``text``."""
    return ord(text[pos]) if pos < len(text) else 0


def atoi(text: str) -> int:
    """Parse a leading integer, saturating to the 32-bit range.

    Leading whitespace and one sign are accepted. Runs of more than 17
    digits (positive) or 18 digits (negative) give -1 and 0 respectively.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, body))
    if sign < 0 and len(digits) > 18:
        return 0
    if sign > 0 and len(digits) > 17:
        return -1
    number = 0
    for ch in digits:
        digit = int(ch)
        if number > (INT_MAX - digit) // 10:
            return INT_MAX if sign > 0 else INT_MIN
        number = number * 10 + digit
    return number * sign


def itoa(number: int) -> str:
    """Decimal text of an integer."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split on a single character, dropping empty words."""
    if separator in ("", "\0"):
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, or None.
    """
    if length == 0 or not needle:
        return haystack
    found = haystack.find(needle, 0, length)
    return None if found < 0 else haystack[found:]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the order."""
    if count == 0:
        return 0
    pos = 0
    while (
        (_code(first, pos) != 0 or _code(second, pos) != 0)
        and pos + 1 < count
        and _code(first, pos) == _code(second, pos)
    ):
        pos += 1
    return _code(first, pos) - _code(second, pos)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``."""
    if start > len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: str) -> str | None:
    """Rest of ``text`` from the first ``char``, or None.

    A NUL character matches the end of the text.
    """
    if char in ("", "\0"):
        return ""
    found = text.find(char)
    return None if found < 0 else text[found:]


def strrchr(text: str, char: str) -> str | None:
    """Rest of ``text`` from the last ``char``, or None.

    A NUL character matches the end of the text.
    """
    if char in ("", "\0"):
        return ""
    found = text.rfind(char)
    return None if found < 0 else text[found:]


def strlcpy(source: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` characters including the terminator.

    Returns the copy and the full length of ``source``.
    """
    copied = source[:size - 1] if size > 0 else ""
    return copied, len(source)


def strlcat(destination: str, source: str, size: int) -> tuple[str, int]:
    """Append ``source`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    """
    kept = min(len(destination), size)
    if size <= kept:
        return destination, size + len(source)
    room = size - 1 - kept
    return destination + source[:room], kept + len(source)