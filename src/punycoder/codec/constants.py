"""Punycode parameters (RFC 3492 section 5).

These values are normative. Changing any of them produces a Bootstring
variant that no other Punycode implementation can read.
"""

from __future__ import annotations

from typing import Final

BASE: Final = 36
TMIN: Final = 1
TMAX: Final = 26
SKEW: Final = 38
DAMP: Final = 700
INITIAL_BIAS: Final = 72
INITIAL_N: Final = 0x80
DELIMITER: Final = "-"

# Code points below this value are basic (ASCII) and copied verbatim
BASIC_LIMIT: Final = 0x80

# Largest Unicode scalar value
MAX_CODE_POINT: Final = 0x10FFFF
