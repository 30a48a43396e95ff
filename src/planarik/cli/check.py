"""CLI wiring for randomized Jacobian checks."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from itertools import islice

from planarik.cli.utils import add_chain_arguments, resolve_chain
from planarik.solvers.numerical_checker import JacobianCheckResult, check_jacobian_once, random_angles


def _generate_checks(
    lengths: Sequence[float], rng: random.Random, symbolic: bool
) -> Iterator[JacobianCheckResult]:
    while True:
        q = random_angles(len(lengths), rng)
        yield check_jacobian_once(lengths, q, symbolic=symbolic)


def cmd_check(args: argparse.Namespace) -> int:
    lengths, _ = resolve_chain(args)
    rng = random.Random(args.seed)

    worst = 0.0
    for i, result in enumerate(islice(_generate_checks(lengths, rng, args.symbolic), args.count), 1):
        line = f"Sample {i}: |J - J_fd|_inf = {result.fd_err:.3e}"
        if result.sym_err is not None:
            line += f"  |J - J_sym|_inf = {result.sym_err:.3e}"
        if result.identity_err is not None:
            line += f"  |J P - I|_inf = {result.identity_err:.3e}"
        else:
            line += "  (singular)"
        if args.verbose_samples:
            print(line)
        worst = max(worst, result.fd_err, result.sym_err or 0.0, result.identity_err or 0.0)

    print(f"{args.count} samples, worst error {worst:.3e} (tol {args.tol:g})")
    return 0 if worst <= args.tol else 1


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    check = subparsers.add_parser("check", help="compare the analytic Jacobian with numeric references")
    add_chain_arguments(check)
    check.add_argument("--count", type=int, default=100)
    check.add_argument("--seed", type=int, default=0)
    check.add_argument("--tol", type=float, default=1e-4)
    check.add_argument("--symbolic", action="store_true", help="also compare against SymPy")
    check.add_argument("--print", dest="verbose_samples", action="store_true", help="print every sample")
    check.set_defaults(func=cmd_check)
