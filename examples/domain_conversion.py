#!/usr/bin/env python3
"""Domain conversion example for punycoder.

Shows a configured DomainLabelConverter, including ideographic full stops
as label separators and debug logging of each converted label.
"""

from __future__ import annotations

import logging

from punycoder import ConverterConfig, DomainLabelConverter


def main() -> None:
    """Run the domain conversion example."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    converter = DomainLabelConverter(ConverterConfig(ideographic_separators=True))

    domains = [
        "例え。テスト",
        "bücher．example",
        "plain.example.com",
    ]

    for domain in domains:
        ace = converter.to_ascii(domain)
        print(f"{domain:<24} -> {ace:<32} -> {converter.to_unicode(ace)}")


if __name__ == "__main__":
    main()
