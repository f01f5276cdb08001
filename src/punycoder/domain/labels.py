"""Domain name conversion between Unicode and ACE (``xn--``) form.

Each dot-separated label is converted on its own: labels with non-ASCII
content are Punycode-encoded behind the ACE prefix, and prefixed labels are
decoded back. No length, repertoire or case checks are made; those belong to
the caller.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from ..codec import decode, encode
from ..exceptions import ConfigError, DecodeError
from .config import LABEL_SEPARATOR, ConverterConfig

_LOGGER = logging.getLogger(__name__)


class DomainLabelConverter:
    """Converts whole domain names label by label.

    Example:
        >>> converter = DomainLabelConverter()
        >>> converter.to_ascii("münchen.de")
        'xn--mnchen-3ya.de'
        >>> converter.to_unicode("xn--mnchen-3ya.de")
        'münchen.de'
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        """Initialize the converter.

        Args:
            config: Conversion options (defaults to ConverterConfig())
        """
        self.config = config if config is not None else ConverterConfig()
        separators = self.config.separators()
        if separators == (LABEL_SEPARATOR,):
            self._split_pattern: Optional[re.Pattern[str]] = None
        else:
            self._split_pattern = re.compile("[" + "".join(map(re.escape, separators)) + "]")

    @classmethod
    def from_options(cls, **options: Any) -> DomainLabelConverter:
        """Build a converter from ConverterConfig keyword options.

        Raises:
            ConfigError: If an option is unknown or has an invalid value

        Example:
            >>> converter = DomainLabelConverter.from_options(ideographic_separators=True)
        """
        try:
            config = ConverterConfig(**options)
        except ValidationError as e:
            raise ConfigError(f"Invalid converter configuration: {e}") from e
        return cls(config)

    def split(self, domain: str) -> list[str]:
        """Split a domain name into labels using the configured separators."""
        if self._split_pattern is None:
            return domain.split(LABEL_SEPARATOR)
        return self._split_pattern.split(domain)

    def label_to_ascii(self, label: str) -> str:
        """Encode one label if it has non-ASCII content.

        Args:
            label: A single label (no separators)

        Returns:
            ``prefix + encode(label)`` for labels with a code point >= 128,
            otherwise the label unchanged
        """
        if label.isascii():
            return label

        converted = self.config.prefix + encode(label)
        _LOGGER.debug("Encoded label %r as %r", label, converted)
        return converted

    def label_to_unicode(self, label: str) -> str:
        """Decode one label if it carries the ACE prefix.

        Args:
            label: A single label (no separators)

        Returns:
            The decoded label for prefixed labels, otherwise the label unchanged

        Raises:
            MalformedInputError: If the text after the prefix is not valid Punycode
            PunycodeOverflowError: If it decodes past U+10FFFF
        """
        prefix = self.config.prefix
        if not label.startswith(prefix):
            return label

        try:
            converted = decode(label[len(prefix) :])
        except DecodeError as e:
            _LOGGER.debug("Failed to decode label %r: %s", label, e)
            raise type(e)(f"Label {label!r}: {e}") from e

        _LOGGER.debug("Decoded label %r as %r", label, converted)
        return converted

    def to_ascii(self, domain: str) -> str:
        """Convert a Unicode domain name to its ACE form.

        Args:
            domain: Domain name, possibly containing non-ASCII labels

        Returns:
            Domain name with every non-ASCII label Punycode-encoded
        """
        return LABEL_SEPARATOR.join(self.label_to_ascii(label) for label in self.split(domain))

    def to_unicode(self, domain: str) -> str:
        """Convert an ACE domain name back to Unicode.

        Args:
            domain: Domain name, possibly containing prefixed labels

        Returns:
            Domain name with every prefixed label decoded

        Raises:
            MalformedInputError: If a prefixed label is not valid Punycode
            PunycodeOverflowError: If a prefixed label decodes past U+10FFFF
        """
        return LABEL_SEPARATOR.join(self.label_to_unicode(label) for label in self.split(domain))


_DEFAULT_CONVERTER = DomainLabelConverter()


def unicode_to_punycode(domain: str) -> str:
    """Convert a Unicode domain name to ACE form with the default settings.

    Example:
        >>> unicode_to_punycode("münchen.de")
        'xn--mnchen-3ya.de'
    """
    return _DEFAULT_CONVERTER.to_ascii(domain)


def punycode_to_unicode(domain: str) -> str:
    """Convert an ACE domain name to Unicode with the default settings.

    Example:
        >>> punycode_to_unicode("xn--mnchen-3ya.de")
        'münchen.de'
    """
    return _DEFAULT_CONVERTER.to_unicode(domain)
