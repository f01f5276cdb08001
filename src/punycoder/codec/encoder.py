"""Punycode encoder.

This module provides the encode() function that converts a sequence of Unicode
code points to its Punycode representation (RFC 3492 section 6.3).
"""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import EncodeError
from .bias import adapt
from .constants import BASE, BASIC_LIMIT, DELIMITER, INITIAL_BIAS, INITIAL_N, MAX_CODE_POINT
from .digits import digit_to_basic, threshold


def encode(text: str | Sequence[int]) -> str:
    """Encode Unicode text to Punycode.

    Basic (ASCII) code points are copied to the front of the output in their
    original order, followed by the delimiter if there were any. Each
    non-basic code point is then written as a variable-length base-36 delta
    that records both its value and its insertion position. Code points with
    the same value are emitted left to right.

    Args:
        text: A string, or a sequence of integer code points

    Returns:
        The Punycode string (ASCII only, lowercase digits)

    Raises:
        EncodeError: If a code point is outside 0..0x10FFFF or an element is
            not a code point

    Examples:
        ```python
        from punycoder import encode

        encode("bücher")             # 'bcher-kva'
        encode("中国")                # 'fiqs8s'
        encode([0x62, 0xFC, 0x63, 0x68, 0x65, 0x72])  # 'bcher-kva'
        encode("")                   # ''
        ```
    """
    code_points = _to_code_points(text)

    output = [chr(c) for c in code_points if c < BASIC_LIMIT]
    basic_count = len(output)
    if basic_count:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    handled = basic_count

    # Distinct non-basic values in ascending order; each pass handles one value
    for m in sorted({c for c in code_points if c >= BASIC_LIMIT}):
        delta += (m - n) * (handled + 1)
        n = m

        for c in code_points:
            if c < n:
                delta += 1
            elif c == n:
                output.append(_encode_integer(delta, bias))
                bias = adapt(delta, handled + 1, handled == basic_count)
                delta = 0
                handled += 1

        delta += 1
        n += 1

    return "".join(output)


def _encode_integer(q: int, bias: int) -> str:
    """Write q as a generalized variable-length integer.

    Args:
        q: Non-negative value to write
        bias: Current bias

    Returns:
        The digit group, least significant digit first
    """
    digits: list[str] = []
    k = BASE
    while True:
        t = threshold(k, bias)
        if q < t:
            break
        digits.append(digit_to_basic(t + (q - t) % (BASE - t)))
        q = (q - t) // (BASE - t)
        k += BASE

    digits.append(digit_to_basic(q))
    return "".join(digits)


def _to_code_points(text: str | Sequence[int]) -> list[int]:
    """Normalize encoder input to a list of integer code points.

    Raises:
        EncodeError: If an element is not a valid code point
    """
    if isinstance(text, str):
        return [ord(char) for char in text]

    code_points: list[int] = []
    for position, item in enumerate(text):
        if isinstance(item, str) and len(item) == 1:
            code_points.append(ord(item))
            continue

        if isinstance(item, bool) or not isinstance(item, int):
            raise EncodeError(
                f"Element {position}: expected code point, got {type(item).__name__}"
            )

        if not 0 <= item <= MAX_CODE_POINT:
            raise EncodeError(
                f"Element {position}: code point {item:#x} out of range [0x0, {MAX_CODE_POINT:#x}]"
            )

        code_points.append(item)

    return code_points
