"""Unit tests for the Punycode decoder."""

from __future__ import annotations

import pytest

from punycoder import (
    DecodeError,
    MalformedInput,
    MalformedInputError,
    PunycodeError,
    PunycodeOverflowError,
    decode,
    decode_to_code_points,
)


class TestDecode:
    """Test decode() behavior."""

    def test_empty(self) -> None:
        """Test empty input gives empty output."""
        assert decode("") == ""

    def test_trailing_delimiter(self) -> None:
        """Test a trailing delimiter leaves the basic segment unchanged."""
        assert decode("abc-") == "abc"
        assert decode("-> $1.00 <--") == "-> $1.00 <-"

    def test_lone_delimiter(self) -> None:
        """Test a single delimiter decodes to nothing."""
        assert decode("-") == ""

    def test_last_delimiter_splits(self) -> None:
        """Test only the last delimiter separates the segments."""
        assert decode("a-b-c-") == "a-b-c"

    def test_leading_delimiter(self) -> None:
        """Test a delimiter at position 0 gives an empty basic segment."""
        assert decode("-fiqs8s") == decode("fiqs8s") == "中国"

    def test_bytes_input(self) -> None:
        """Test bytes-like input is accepted."""
        assert decode(b"bcher-kva") == "bücher"
        assert decode(bytearray(b"fiqs8s")) == "中国"
        assert decode(memoryview(b"mnchen-3ya")) == "münchen"

    def test_mixed_case_extended_segment(self) -> None:
        """Test extended digits are read in either case."""
        assert decode("bcher-KvA") == "bücher"

    def test_basic_segment_case_preserved(self) -> None:
        """Test the basic segment is copied verbatim."""
        assert decode("BCHER-kva") == "BüCHER"

    def test_decode_to_code_points(self) -> None:
        """Test raw code point output."""
        assert decode_to_code_points("mnchen-3ya") == [0x6D, 0xFC, 0x6E, 0x63, 0x68, 0x65, 0x6E]
        assert decode_to_code_points("") == []


class TestDecodeErrors:
    """Test decode() error handling."""

    def test_invalid_digit(self) -> None:
        """Test a character outside the alphabet is rejected."""
        with pytest.raises(MalformedInputError, match="Invalid digit"):
            decode("\x01")

    def test_invalid_digit_after_delimiter(self) -> None:
        """Test invalid characters after the delimiter are rejected."""
        with pytest.raises(MalformedInputError, match="Invalid digit '!' at position 4"):
            decode("abc-!")

    def test_prefixed_garbage(self) -> None:
        """Test the raw codec does not strip the ACE prefix."""
        with pytest.raises(MalformedInputError):
            decode("xn--\x01")

    def test_truncated_group(self) -> None:
        """Test a digit group that never terminates is rejected."""
        with pytest.raises(MalformedInputError, match="Truncated digit group"):
            decode("bcher-kv")

        with pytest.raises(MalformedInputError, match="Truncated digit group"):
            decode("9")

    def test_non_ascii_basic_segment(self) -> None:
        """Test non-basic characters before the delimiter are rejected."""
        with pytest.raises(MalformedInputError, match="basic segment"):
            decode("ü-kva")

    def test_non_ascii_bytes(self) -> None:
        """Test non-ASCII bytes are rejected."""
        with pytest.raises(MalformedInputError):
            decode(b"\xff")

    def test_overflow(self) -> None:
        """Test digit groups that push past U+10FFFF are rejected."""
        with pytest.raises(PunycodeOverflowError, match="exceeds 0x10ffff"):
            decode("99999")

    def test_overflow_stops_early(self) -> None:
        """Test an adversarially long group fails without reading it all."""
        with pytest.raises(PunycodeOverflowError):
            decode("9" * 100_000)

    def test_error_hierarchy(self) -> None:
        """Test decode errors share a common base."""
        assert MalformedInput is MalformedInputError
        assert issubclass(MalformedInputError, DecodeError)
        assert issubclass(PunycodeOverflowError, DecodeError)
        assert issubclass(DecodeError, PunycodeError)
