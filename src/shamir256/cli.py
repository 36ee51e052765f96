"""Command line front end: split a secret into shares and combine them again.

Secrets get a checksum appended before splitting, so `combine` can report
when too few (or bad) shares were given instead of printing garbage.
"""

from __future__ import annotations

import argparse
import logging
import sys

from shamir256.checksum import combine_checked, split_checked
from shamir256.errors import ShamirError
from shamir256.models import DEFAULT_PAD_LENGTH
from shamir256.wire import parse_share

logger = logging.getLogger(__name__)

MIN_SHARES = 2


def positive_int(string: str) -> int:
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {string!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return value


def cmd_split(args: argparse.Namespace) -> int:
    hex_secret = args.secret if args.hex else args.secret.encode("utf8").hex()
    for share in split_checked(hex_secret, args.shares, args.threshold, args.pad_length):
        print(share)
    return 0


def cmd_combine(args: argparse.Namespace) -> int:
    distinct = {parse_share(share).id for share in args.shares}
    if len(distinct) < MIN_SHARES:
        print(
            f"error: need at least {MIN_SHARES} distinct shares, got {len(distinct)}",
            file=sys.stderr,
        )
        return 1

    hex_secret = combine_checked(args.shares)
    if args.hex or len(hex_secret) % 2:
        print(hex_secret)
    else:
        print(bytes.fromhex(hex_secret).decode("utf8", errors="replace"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("shamir256")
    parser.add_argument("--debug", action="store_true", help="debug output")

    sub = parser.add_subparsers(required=True, dest="cmd")

    sp = sub.add_parser("split", help="split a secret into shares")
    sp.add_argument("secret", help="secret text (hex with --hex)")
    sp.add_argument("shares", type=positive_int, help="number of shares to create")
    sp.add_argument("threshold", type=positive_int, help="shares needed to combine")
    sp.add_argument(
        "-p",
        "--pad-length",
        type=int,
        default=DEFAULT_PAD_LENGTH,
        help=f"pad the secret to a multiple of this many bits (default {DEFAULT_PAD_LENGTH})",
    )
    sp.add_argument("--hex", action="store_true", help="secret is already hex")
    sp.set_defaults(func=cmd_split)

    sp = sub.add_parser("combine", help="combine shares into the secret")
    sp.add_argument("shares", nargs="+", help="share strings")
    sp.add_argument("--hex", action="store_true", help="print the secret as hex")
    sp.set_defaults(func=cmd_combine)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        return args.func(args)
    except ShamirError as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
