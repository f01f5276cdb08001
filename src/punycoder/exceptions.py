"""Exception hierarchy for punycoder.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PunycodeError for easy catching of any punycoder-specific error.
"""

from __future__ import annotations


class PunycodeError(Exception):
    """Base exception for all punycoder errors."""

    pass


class EncodeError(PunycodeError):
    """Raised when encoding a code point sequence fails.

    Examples:
        - Code point above U+10FFFF or negative
        - Sequence element that is not a code point
    """

    pass


class DecodeError(PunycodeError):
    """Raised when decoding a Punycode string fails."""

    pass


class MalformedInputError(DecodeError):
    """Raised when a Punycode string is not well formed.

    Examples:
        - Extended segment ends in the middle of a digit group
        - Character outside the base-36 digit alphabet in the extended segment
        - Non-ASCII character in the basic segment
    """

    pass


# Short name used in RFC-oriented code
MalformedInput = MalformedInputError


class PunycodeOverflowError(DecodeError):
    """Raised when a decoded value would leave the Unicode code point range.

    Arbitrary-precision integers never wrap, so this is the point where an
    over-long or adversarial digit group is rejected.
    """

    pass


class ConfigError(PunycodeError):
    """Raised when converter configuration is invalid.

    Examples:
        - Empty ACE prefix
        - Non-ASCII ACE prefix
        - Unknown configuration option
    """

    pass
