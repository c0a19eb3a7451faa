"""Command-line interface for pblaunch."""

import argparse
import logging
import sys

from pblaunch import __version__
from pblaunch.binary import missing_binary_help
from pblaunch.config import load_config
from pblaunch.constants import DEFAULT_MODE, MODES
from pblaunch.launcher import build_launch_plan
from pblaunch.supervisor import Supervisor

log = logging.getLogger("pblaunch")


def build_parser() -> argparse.ArgumentParser:
    """Build parser for `launch <mode> [extra ...]`."""
    parser = argparse.ArgumentParser(
        prog="launch",
        description="Run the PocketBase binary for this project",
        epilog="Arguments after the mode are passed to `pocketbase serve` unchanged.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=DEFAULT_MODE,
        type=str.lower,
        choices=MODES,
        help="dev (default) or start; start binds to $HOST:$PORT",
    )
    parser.add_argument(
        "extra",
        nargs=argparse.REMAINDER,
        metavar="...",
        help="Extra PocketBase flags, e.g. --dir pb_data",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    log.debug("mode=%s extra=%r", args.mode, args.extra)

    config = load_config()
    plan = build_launch_plan(args.mode, args.extra, config)
    if plan is None:
        print(missing_binary_help(), file=sys.stderr)
        return 1

    return Supervisor(plan).run()


def entrypoint() -> None:
    raise SystemExit(main())
