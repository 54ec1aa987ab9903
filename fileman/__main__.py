import argparse
import asyncio
import logging
import os
import sys

from .core import FileManager
from .ui import ConsoleUI


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="fileman", description="Interactive file manager shell")
    parser.add_argument("--dir", default=os.path.expanduser("~"), help="Starting directory (default: home)")
    parser.add_argument("--username", default="Anonymous", help="Name used in the greeting")
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    if not os.path.isdir(args.dir):
        print(f"Starting directory {args.dir} does not exist", file=sys.stderr)
        return 1

    fm = FileManager(args.dir, ui=ConsoleUI(), username=args.username)
    try:
        asyncio.run(fm.main())
    except KeyboardInterrupt:
        fm.ui.show_farewell(fm.username)
    return 0


if __name__ == "__main__":
    sys.exit(main())
