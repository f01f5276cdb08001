"""Main CLI entry point for punycoder."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..cli.commands import COMMANDS, run_command
from ..domain import DomainLabelConverter
from ..exceptions import ConfigError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the punycoder CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="punycoder",
        description="punycoder: Punycode and IDNA Label Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  punycoder encode bücher                  Raw Punycode (bcher-kva)
  punycoder decode bcher-kva               Decode raw Punycode
  punycoder to-ascii münchen.de            ACE domain (xn--mnchen-3ya.de)
  punycoder to-unicode xn--mnchen-3ya.de   Unicode domain
  punycoder decode -- -with-SUPER-MONKEYS-pc58ag80a8qai00g7n9n
                                           Values starting with "-" go after --
  cat domains.txt | punycoder to-ascii     Convert one value per stdin line
        """,
    )

    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        help="Conversion to perform",
    )

    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Values to convert (read from stdin if omitted)",
    )

    parser.add_argument(
        "--ideographic-separators",
        action="store_true",
        help="Also split domain labels on U+3002, U+FF0E and U+FF61",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"punycoder {__version__}",
    )

    # Options may appear between the command and its values
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        converter = DomainLabelConverter.from_options(
            ideographic_separators=args.ideographic_separators
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return run_command(args.command, args.values, converter)


if __name__ == "__main__":
    sys.exit(main())
