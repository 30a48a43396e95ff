"""Shared helpers for CLI modules."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from math import radians

import sympy as sp

from planarik.model.presets import DEFAULT_PRESET, PRESETS, ChainPreset, get_preset

# Bend applied per joint when --lengths is given without --q; the straight
# pose is singular and would never leave it from a cold start.
DEFAULT_BEND_RAD = 0.1


def pprint_matrix(matrix: sp.Matrix) -> None:
    sp.pprint(matrix, use_unicode=True)  # type: ignore[operator]


def add_chain_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--preset", choices=sorted(PRESETS), default=DEFAULT_PRESET, help="chain preset")
    parser.add_argument("--lengths", nargs="+", type=float, help="override link lengths")
    parser.add_argument("--q", nargs="+", type=float, help="joint angles (rad unless --deg)")
    parser.add_argument("--deg", action="store_true", help="interpret --q in degrees")


def preset_or_exit(name: str) -> ChainPreset:
    try:
        return get_preset(name)
    except KeyError as exc:
        raise SystemExit(exc.args[0]) from None


def resolve_chain(args: argparse.Namespace) -> tuple[list[float], list[float]]:
    """Return (lengths, angles in rad) from --preset/--lengths/--q."""
    preset = preset_or_exit(args.preset)
    lengths = list(args.lengths) if args.lengths else list(preset.lengths)
    if args.q:
        angles: Sequence[float] = [radians(v) for v in args.q] if args.deg else list(args.q)
    elif args.lengths:
        angles = [DEFAULT_BEND_RAD] * len(lengths)
    else:
        angles = preset.angles_rad
    if len(angles) != len(lengths):
        raise SystemExit(f"--q expects {len(lengths)} values, got {len(angles)}")
    return lengths, list(angles)
