"""Parsing and validation of numeric command-line arguments."""

from __future__ import annotations

UNREASONABLE_NUMBER_MESSAGE = "Choose Something Reasonable and Correct like 0.5 or 3."

_DIGITS = "0123456789"


def sign_of(char: str) -> int:
    """1 for '+', -1 for '-', 0 for anything else."""
    if char == "+":
        return 1
    if char == "-":
        return -1
    return 0


def parse_float(text: str) -> float:
    """Parse a decimal number with an optional sign and fraction.

    A negative result that equals zero is returned as plain 0.0.
    """
    body = text[1:] if sign_of(text[:1]) else text
    whole, _, fraction = body.partition(".")
    integral = 0.0
    for ch in whole:
        integral = integral * 10.0 + (ord(ch) - ord("0"))
    fractional = 0.0
    for power, ch in enumerate(fraction, start=1):
        if ch != ".":
            fractional += (ord(ch) - ord("0")) * pow(0.1, power)
    value = integral + fractional
    if sign_of(text[:1]) == -1 and value != 0.0:
        return -value
    return value


def is_valid_number(text: str) -> bool:
    """Check that ``text`` is a short decimal with at most one dot.

    A well-formed but unreasonable number prints a hint to stdout.
    """
    body = text[1:] if text[:1] in ("-", "+") else text
    if any(ch not in _DIGITS and ch != "." for ch in body):
        return False
    if body.count(".") < 2 and len(text) < 64:
        return True
    print(UNREASONABLE_NUMBER_MESSAGE)
    return False