"""Unified command-line interface for the planarik toolkit.

The parser definitions are delegated to the individual CLI modules under
``planarik.cli`` so the entry point stays lightweight.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from planarik.cli import check, fk, jacobian, track


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="planarik", description="planar chain pseudo-inverse IK")
    parser.add_argument("-v", "--verbose", action="store_true", help="log solver diagnostics")
    sub = parser.add_subparsers(dest="command", required=True)

    fk.register_subparsers(sub)
    jacobian.register_subparsers(sub)
    check.register_subparsers(sub)
    track.register_subparsers(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
