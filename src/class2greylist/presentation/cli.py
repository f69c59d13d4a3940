"""Command line entry point.

Usage:
    class2greylist [-p FILE] [-g [N:]FILE]... [-d] path/to/classes.jar [classes2.jar ...]

Exit status: 0 if no error was reported, 1 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from rich.console import Console

from class2greylist.application.services import Class2Greylist
from class2greylist.application.status import Status
from class2greylist.domain.exceptions import Class2GreylistError, UsageError
from class2greylist.domain.model.configuration import Configuration

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser raising UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the class2greylist argument parser."""
    parser = _ArgumentParser(
        prog="class2greylist",
        usage="class2greylist path/to/classes.jar [classes2.jar ...]",
        description="Extracts greylist entries from classes jar files given",
        add_help=False,
    )
    parser.add_argument(
        "-p",
        "--public-api-list",
        type=Path,
        metavar="FILE",
        help="Public API list file. Used to de-dupe bridge methods.",
    )
    parser.add_argument(
        "-g",
        "--write-greylist",
        action="append",
        metavar="[N:]FILE",
        help=(
            "Specify file to write greylist to. Can be specified multiple times. "
            'Format is either just a filename, or "int:filename". If an integer is '
            "given, members with a matching maxTargetSdk are written to the file; if "
            "no integer is given, members with no maxTargetSdk are written. "
            "Negative integers need the attached form: --write-greylist=-1:FILE."
        ),
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help")
    parser.add_argument("jar_files", nargs="*", type=Path, metavar="JAR")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run class2greylist.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    parser = build_parser()
    stderr = Console(stderr=True, highlight=False)

    try:
        args = parser.parse_intermixed_args(argv)
    except UsageError as e:
        stderr.print(e.reason, markup=False)
        return _help(parser)

    if args.help:
        return _help(parser)

    status = Status(args.debug)
    try:
        config = Configuration(
            archives=tuple(args.jar_files or ()),
            public_api_list=args.public_api_list,
            write_greylist=args.write_greylist,
            debug=args.debug,
        )
    except Class2GreylistError as e:
        status.error(str(e))
        return _help(parser)

    try:
        Class2Greylist(status, config).run()
    except Class2GreylistError as e:
        status.error(e)

    return EXIT_OK if status.ok else EXIT_FAILURE


def _help(parser: argparse.ArgumentParser) -> int:
    """Print help to stderr. Help always means failure."""
    parser.print_help(sys.stderr)
    return EXIT_FAILURE
