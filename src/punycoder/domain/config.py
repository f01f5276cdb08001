"""Configuration for domain label conversion.

This module provides the ConverterConfig model used by DomainLabelConverter.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Full stop variants that RFC 3490 section 3.1 treats as label separators
IDEOGRAPHIC_SEPARATORS = ("\u3002", "\uff0e", "\uff61")

LABEL_SEPARATOR = "."


class ConverterConfig(BaseModel):
    """Options for converting domain names between Unicode and ACE form.

    Attributes:
        prefix: ACE prefix marking an encoded label (default ``xn--``).
            Matched literally, so ``XN--`` labels pass through unchanged.
        ideographic_separators: Also split labels on U+3002, U+FF0E and
            U+FF61 when reading input (default False). Output always uses ``.``.

    Examples:
        ```python
        from punycoder import ConverterConfig, DomainLabelConverter

        config = ConverterConfig(ideographic_separators=True)
        converter = DomainLabelConverter(config)
        converter.to_ascii("例え。テスト")  # 'xn--r8jz45g.xn--zckzah'
        ```
    """

    model_config = ConfigDict(
        # Shared between threads, never mutated
        frozen=True,
        extra="forbid",
        strict=True,
    )

    prefix: str = Field(default="xn--", description="ACE prefix")
    ideographic_separators: bool = Field(
        default=False, description="Treat ideographic full stops as separators"
    )

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix must not be empty")
        if not value.isascii():
            raise ValueError(f"prefix must be ASCII, got {value!r}")
        if LABEL_SEPARATOR in value:
            raise ValueError(f"prefix must not contain {LABEL_SEPARATOR!r}")
        return value

    def separators(self) -> tuple[str, ...]:
        """Return every character that ends a label on input."""
        if self.ideographic_separators:
            return (LABEL_SEPARATOR, *IDEOGRAPHIC_SEPARATORS)
        return (LABEL_SEPARATOR,)
