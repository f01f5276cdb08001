"""Bias adaptation (RFC 3492 section 6.1)."""

from __future__ import annotations

from .constants import BASE, DAMP, SKEW, TMAX, TMIN


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Compute the bias to use after encoding or decoding one delta.

    The first delta is scaled down by DAMP because it is usually much larger
    than the rest; later deltas are halved. The result moves the digit
    thresholds so that the next delta is likely to take few digits.

    Args:
        delta: The delta just encoded or decoded
        num_points: Number of code points handled so far, including this one
        first_time: True for the first delta of the string

    Returns:
        New bias value

    Example:
        >>> adapt(868, 7, True)
        0
    """
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points

    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE

    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)
