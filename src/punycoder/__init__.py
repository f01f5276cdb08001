"""punycoder: Punycode and IDNA Label Codec

A Python library implementing the Bootstring algorithm with the Punycode
parameters (RFC 3492), plus the ``xn--`` label convention used by
internationalized domain names.

Key Features:
- Exact RFC 3492 encoder, decoder and bias adaptation
- Explicit errors for malformed or overflowing input
- Label-by-label domain name conversion
- Pure Python implementation

Quick Start:
    >>> from punycoder import encode, decode, unicode_to_punycode
    >>>
    >>> encode("bücher")
    'bcher-kva'
    >>> decode("bcher-kva")
    'bücher'
    >>> unicode_to_punycode("münchen.de")
    'xn--mnchen-3ya.de'
"""

from __future__ import annotations

from .codec import adapt, decode, decode_to_code_points, encode
from .domain import (
    ConverterConfig,
    DomainLabelConverter,
    punycode_to_unicode,
    unicode_to_punycode,
)
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    MalformedInput,
    MalformedInputError,
    PunycodeError,
    PunycodeOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_to_code_points",
    "adapt",
    # Domain names
    "unicode_to_punycode",
    "punycode_to_unicode",
    "DomainLabelConverter",
    "ConverterConfig",
    # Exceptions
    "PunycodeError",
    "EncodeError",
    "DecodeError",
    "MalformedInputError",
    "MalformedInput",
    "PunycodeOverflowError",
    "ConfigError",
    # Version
    "__version__",
]
