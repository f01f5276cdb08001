"""Domain name wrapping for punycoder.

This module converts whole domain names between Unicode and ACE (``xn--``)
form by applying the codec to individual labels.
"""

from __future__ import annotations

from .config import ConverterConfig
from .labels import DomainLabelConverter, punycode_to_unicode, unicode_to_punycode

__all__ = [
    "ConverterConfig",
    "DomainLabelConverter",
    "unicode_to_punycode",
    "punycode_to_unicode",
]
