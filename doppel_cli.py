"""
doppel CLI

Entry point: argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

import sys

from dotenv import load_dotenv

from cli.wiring import build_parser, dispatch_command
from doppel import __version__


def main(argv=None) -> int:
    load_dotenv()
    parser = build_parser(version=__version__)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
