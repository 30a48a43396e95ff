"""CLI wiring for the headless tracking loop."""

from __future__ import annotations

import argparse

from planarik.cli.utils import add_chain_arguments, preset_or_exit, resolve_chain
from planarik.control.tracker import IKTracker, TrackerConfig, TrackerState
from planarik.model.chain import Chain


def _build_tracker(args: argparse.Namespace) -> IKTracker:
    lengths, angles = resolve_chain(args)
    defaults = TrackerConfig()
    try:
        config = TrackerConfig(
            step_size=float(args.step_size),
            epsilon=float(args.epsilon),
            r_min=float(args.r_min),
            r_margin=float(args.r_margin),
            singular_epsilon=defaults.singular_epsilon,
            seed=args.seed,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from None

    target = args.target
    if target is None and not args.random_target and not args.lengths:
        target = preset_or_exit(args.preset).target
    try:
        return IKTracker(Chain.from_lengths(lengths, angles), config, target=target)
    except ValueError as exc:
        raise SystemExit(str(exc)) from None


def cmd_track(args: argparse.Namespace) -> int:
    tracker = _build_tracker(args)
    tx, ty = tracker.target_position()
    print(f"Tracking target ({tx:.3f}, {ty:.3f}) for up to {args.steps} steps ...")

    for i in range(1, args.steps + 1):
        outcome = tracker.step()
        if outcome.state is TrackerState.CONVERGED:
            nx, ny = tracker.target_position()
            print(f"[{i}] reached target (d={outcome.distance:.4f}); next target ({nx:.3f}, {ny:.3f})")
            if args.stop_on_converge:
                break
        elif args.trace and i % args.trace == 0:
            x, y = tracker.tip_position()
            flag = " singular" if outcome.singular else ""
            print(f"[{i}] tip=({x:.4f}, {y:.4f}) d={outcome.distance:.4f}{flag}")

    print(
        f"Done: {tracker.step_count} steps, {tracker.convergence_count} targets reached, "
        f"{tracker.singular_count} singular ticks, distance {tracker.distance_to_target():.4f}"
    )
    print("q (rad):", [round(v, 6) for v in tracker.joint_angles()])
    return 0


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    track = subparsers.add_parser("track", help="run the tracking loop without a renderer")
    add_chain_arguments(track)
    defaults = TrackerConfig()
    track.add_argument("--target", nargs=2, type=float, metavar=("x", "y"), help="initial target")
    track.add_argument("--random-target", action="store_true", help="ignore the preset target")
    track.add_argument("--steps", type=int, default=10000)
    track.add_argument("--seed", type=int, default=0)
    track.add_argument("--step-size", type=float, default=defaults.step_size, help="tip displacement per tick")
    track.add_argument("--epsilon", type=float, default=defaults.epsilon, help="convergence threshold")
    track.add_argument("--r-min", type=float, default=defaults.r_min, help="min radius of new targets")
    track.add_argument("--r-margin", type=float, default=defaults.r_margin, help="gap kept from full reach")
    track.add_argument("--trace", type=int, default=0, help="print the tip every N steps")
    track.add_argument("--stop-on-converge", action="store_true", help="stop at the first reached target")
    track.set_defaults(func=cmd_track)
