#!/usr/bin/env python3
"""Basic usage example for punycoder.

This example demonstrates:
1. Encoding Unicode labels to Punycode
2. Decoding Punycode back to Unicode
3. Converting whole domain names
4. Handling malformed input
"""

from __future__ import annotations

from punycoder import (
    MalformedInputError,
    decode,
    encode,
    punycode_to_unicode,
    unicode_to_punycode,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("punycoder Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding labels...")
    for label in ["bücher", "münchen", "中国", "3年B組金八先生"]:
        print(f"   {label!r:>20} -> {encode(label)!r}")
    print()

    print("2. Decoding labels...")
    for punycode in ["bcher-kva", "fiqs8s", "3B-ww4c5e180e575a65lsy2b"]:
        print(f"   {punycode!r:>28} -> {decode(punycode)!r}")
    print()

    print("3. Converting domain names...")
    domain = "www.münchen.de"
    ace = unicode_to_punycode(domain)
    print(f"   {domain} -> {ace}")
    print(f"   {ace} -> {punycode_to_unicode(ace)}")
    print()

    print("4. Handling malformed input...")
    try:
        punycode_to_unicode("xn--bcher-kv.de")
    except MalformedInputError as e:
        print(f"   ✗ {e}")
    print()


if __name__ == "__main__":
    main()
