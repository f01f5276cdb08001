"""Digit conversion helpers for the base-36 Punycode alphabet.

Digits 0-25 are the letters a-z (either case when decoding) and digits
26-35 are the decimal characters 0-9. Encoding always emits lowercase.
"""

from __future__ import annotations

from .constants import BASE, TMAX, TMIN

DIGIT_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


def basic_to_digit(char: str) -> int | None:
    """Convert a basic character to its digit value.

    Args:
        char: Single character from an extended segment

    Returns:
        Digit value 0-35, or None if the character is not in the alphabet

    Example:
        >>> basic_to_digit("a"), basic_to_digit("Z"), basic_to_digit("0")
        (0, 25, 26)
    """
    code_point = ord(char)
    if 0x30 <= code_point <= 0x39:  # 0-9
        return code_point - 22
    if 0x41 <= code_point <= 0x5A:  # A-Z
        return code_point - 0x41
    if 0x61 <= code_point <= 0x7A:  # a-z
        return code_point - 0x61
    return None


def digit_to_basic(digit: int) -> str:
    """Convert a digit value to its lowercase basic character.

    Args:
        digit: Digit value 0-35

    Returns:
        Single ASCII character

    Raises:
        ValueError: If digit is outside 0-35
    """
    if not 0 <= digit < BASE:
        raise ValueError(f"Digit must be 0-{BASE - 1}, got {digit}")
    return DIGIT_ALPHABET[digit]


def threshold(k: int, bias: int) -> int:
    """Return the digit threshold t for position k under the given bias.

    This is ``k - bias`` clamped to ``[TMIN, TMAX]``.
    """
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias
