"""CLI wiring for forward-kinematics utilities."""

from __future__ import annotations

import argparse
from math import degrees

from planarik.cli.utils import add_chain_arguments, resolve_chain
from planarik.model.kinematics import cumulative_angles, joint_positions, tip_position


def cmd_fk(args: argparse.Namespace) -> int:
    lengths, angles = resolve_chain(args)
    x, y = tip_position(lengths, angles)

    print("lengths:", lengths)
    print("q (rad):", [round(v, 6) for v in angles])
    print("q (deg):", [round(degrees(v), 3) for v in angles])
    if args.steps:
        theta = cumulative_angles(angles)
        for i, (p, th) in enumerate(zip(joint_positions(lengths, angles)[1:], theta), 1):
            print(f"  link {i}: end=({p[0]:.4f}, {p[1]:.4f})  Θ={degrees(float(th)):.3f} deg")
    print(f"tip: ({x:.6f}, {y:.6f})  reach={sum(lengths):g}")
    return 0


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    fk = subparsers.add_parser("fk", help="tip position for a joint configuration")
    add_chain_arguments(fk)
    fk.add_argument("--steps", action="store_true", help="print every link end point")
    fk.set_defaults(func=cmd_fk)
