"""Bootstring codec with the Punycode parameters.

This module provides encoding and decoding between Unicode text and the
ASCII-compatible Punycode form defined by RFC 3492.
"""

from __future__ import annotations

from .bias import adapt
from .decoder import decode, decode_to_code_points
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "decode_to_code_points",
    "adapt",
]
