"""Command-line interface for TEC.

Usage:
    tec now
    tec convert "2024-01-15 14:30"
    tec from-hms 12 0 0
    tec epoch
    tec duration 300s
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from tec import __version__
from tec.core.datetime import DateTime
from tec.core.duration import Duration
from tec.core.time import Time
from tec.errors import TecError

logger = logging.getLogger(__name__)


def create_argparser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.
    Returns configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="tec",
        description="Triangular Earth Calendar dates and times",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("now", help="Print the current TEC date and time")

    convert = sub.add_parser(
        "convert",
        help="Convert TEC notation or Gregorian text to a TEC date and time",
    )
    convert.add_argument("date_str", help="e.g. '83.A.5:83402', '83.A.5@420', '2024-01-15 14:30'")

    from_hms = sub.add_parser("from-hms", help="Make a TEC time from hour, minute and second")
    from_hms.add_argument("hour", type=int)
    from_hms.add_argument("minute", type=int)
    from_hms.add_argument("second", type=int)

    sub.add_parser("epoch", help="Print the TEC epoch")

    duration = sub.add_parser("duration", help="Convert a duration to fracs and seconds")
    duration.add_argument("duration_str", help="e.g. '300s', '500f', '500'")

    return parser


def configure_logging(verbosity: int) -> None:
    """Set up root logging for the command line."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return the text to print."""
    if args.command == "now":
        return str(DateTime.now())
    if args.command == "convert":
        return str(DateTime.from_text(args.date_str))
    if args.command == "from-hms":
        time = Time.from_hms(args.hour, args.minute, args.second)
        return f"Current time is :{time}"
    if args.command == "epoch":
        return str(DateTime.epoch())
    if args.command == "duration":
        duration = Duration.from_text(args.duration_str)
        return f"{duration}F ({duration.to_secs()}s)"
    raise TecError(f"unknown command {args.command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the tec command."""
    args = create_argparser().parse_args(argv)
    configure_logging(args.verbose)
    logger.info("running %s", args.command)

    try:
        output = run(args)
    except TecError as e:
        logger.debug("command failed", exc_info=True)
        print(f"tec: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


__all__ = ["create_argparser", "configure_logging", "run", "main"]
