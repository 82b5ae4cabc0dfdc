"""
┌──────────────────────────────────────────────────────┐
│ Take a screenshot from a LAN connected instrument    │
└──────────────────────────────────────────────────────┘

 October 2026
"""

import argparse
import logging
import sys

from pathlib import Path

from ..dispatch import Screenshot_Dispatcher, DEFAULT_TIMEOUT
from ..errors   import Screenshot_Error
from ..plugins  import registry_default


def dir_file(path):
    p = Path(path)
    if p.is_dir():
        raise argparse.ArgumentTypeError(f"{str(path)} is a folder")
    return p


def parser_get():
    parser = argparse.ArgumentParser(description="Capture a screenshot from an instrument")
    parser.add_argument("address", nargs="?", default="",
                        help="instrument IP address, host name or VISA resource string")
    parser.add_argument("-p", "--plugin",  default="",
                        help="screenshot plugin name (autodetected if not given)")
    parser.add_argument("-o", "--output",  type=dir_file, default=None,
                        help="output file path (automatic name if not given)")
    parser.add_argument("-t", "--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"timeout in seconds (default: {DEFAULT_TIMEOUT})")
    parser.add_argument("-l", "--list",    action="store_true",
                        help="list available screenshot plugins")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show instrument traffic")

    return parser


def main(argv=None, registry=None):
    args = parser_get().parse_args(argv)

    logging.basicConfig(
        level  = logging.DEBUG if args.verbose else logging.INFO,
        format = "%(message)s" if not args.verbose else "%(name)s: %(message)s",
    )

    if registry is None:
        registry = registry_default()

    if args.list:
        print(registry.plugin_table())
        return 0

    dispatcher = Screenshot_Dispatcher(registry)

    try:
        dispatcher.run(args.address, args.plugin, args.output, args.timeout)
    except Screenshot_Error as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
