"""Punycode decoder.

This module provides the decode() function that converts a Punycode string
back to Unicode text (RFC 3492 section 6.2).
"""

from __future__ import annotations

from typing import Union

from ..exceptions import MalformedInputError, PunycodeOverflowError
from .bias import adapt
from .constants import BASE, BASIC_LIMIT, DELIMITER, INITIAL_BIAS, INITIAL_N, MAX_CODE_POINT
from .digits import basic_to_digit, threshold

PunycodeInput = Union[str, bytes, bytearray, memoryview]


def decode(text: PunycodeInput) -> str:
    """Decode a Punycode string to Unicode text.

    Args:
        text: Punycode string (without any ``xn--`` prefix). Bytes-like input
            is read one byte per character.

    Returns:
        Decoded Unicode text

    Raises:
        MalformedInputError: If a digit group is truncated, a character in the
            extended segment is not a base-36 digit, or the basic segment
            contains a non-ASCII character
        PunycodeOverflowError: If a decoded code point would exceed U+10FFFF

    Examples:
        ```python
        from punycoder import decode

        decode("bcher-kva")     # 'bücher'
        decode("fiqs8s")        # '中国'
        decode("abc-")          # 'abc'
        decode("")              # ''
        ```
    """
    return "".join(map(chr, decode_to_code_points(text)))


def decode_to_code_points(text: PunycodeInput) -> list[int]:
    """Decode a Punycode string to a list of integer code points.

    This is the same algorithm as decode() without building a string, for
    callers that want the raw values.

    Args:
        text: Punycode string

    Returns:
        Decoded code points

    Raises:
        MalformedInputError: If the input is not well formed
        PunycodeOverflowError: If a decoded code point would exceed U+10FFFF
    """
    if not isinstance(text, str):
        text = bytes(text).decode("latin-1")

    # Everything before the last delimiter is the basic segment
    delimiter_pos = text.rfind(DELIMITER)
    if delimiter_pos < 0:
        basic, extended = "", text
    else:
        basic, extended = text[:delimiter_pos], text[delimiter_pos + 1 :]

    output: list[int] = []
    for position, char in enumerate(basic):
        if ord(char) >= BASIC_LIMIT:
            raise MalformedInputError(
                f"Non-basic character {char!r} at position {position} in basic segment"
            )
        output.append(ord(char))

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    position = 0
    offset = len(text) - len(extended)

    while position < len(extended):
        old_i = i
        group_start = position
        weight = 1
        slots = len(output) + 1

        # i at or above this bound always pushes n past MAX_CODE_POINT
        limit = (MAX_CODE_POINT - n + 1) * slots

        k = BASE
        while True:
            if position >= len(extended):
                raise MalformedInputError(
                    f"Truncated digit group starting at position {offset + group_start}"
                )
            digit = basic_to_digit(extended[position])
            if digit is None:
                raise MalformedInputError(
                    f"Invalid digit {extended[position]!r} at position {offset + position}"
                )
            position += 1

            i += digit * weight
            if i >= limit:
                raise PunycodeOverflowError(
                    f"Decoded code point exceeds {MAX_CODE_POINT:#x} "
                    f"(at position {offset + position - 1})"
                )

            t = threshold(k, bias)
            if digit < t:
                break
            weight *= BASE - t
            k += BASE

        bias = adapt(i - old_i, slots, old_i == 0)
        n += i // slots
        i %= slots

        output.insert(i, n)
        i += 1

    return output
