"""Conversion commands for the CLI."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable

from ..codec import decode, encode
from ..domain import DomainLabelConverter
from ..exceptions import PunycodeError

_LOGGER = logging.getLogger(__name__)

COMMANDS = ("encode", "decode", "to-ascii", "to-unicode")


def get_converter(command: str, converter: DomainLabelConverter) -> Callable[[str], str]:
    """Return the conversion function for a command name.

    Args:
        command: One of COMMANDS
        converter: Converter used by the domain commands
    """
    return {
        "encode": encode,
        "decode": decode,
        "to-ascii": converter.to_ascii,
        "to-unicode": converter.to_unicode,
    }[command]


def read_values(values: list[str]) -> Iterable[str]:
    """Yield command-line values, or stdin lines when none were given."""
    if values:
        yield from values
        return

    for line in sys.stdin:
        line = line.rstrip("\r\n")
        if line:
            yield line


def run_command(command: str, values: list[str], converter: DomainLabelConverter) -> int:
    """Convert each value and print the result on its own line.

    A value that fails to convert is reported on stderr and the remaining
    values are still processed.

    Args:
        command: One of COMMANDS
        values: Values from the command line (empty to read stdin)
        converter: Converter used by the domain commands

    Returns:
        Exit code (0 if every value converted, 1 otherwise)
    """
    convert = get_converter(command, converter)
    exit_code = 0

    for value in read_values(values):
        try:
            result = convert(value)
        except PunycodeError as e:
            print(f"Error: {value!r}: {e}", file=sys.stderr)
            exit_code = 1
            continue

        _LOGGER.debug("%s %r -> %r", command, value, result)
        print(result)

    return exit_code
