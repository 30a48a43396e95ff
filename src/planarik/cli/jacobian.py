"""CLI wiring for Jacobian helpers."""

from __future__ import annotations

import argparse
from math import radians

import numpy as np
import sympy as sp

from planarik.cli.utils import add_chain_arguments, pprint_matrix, resolve_chain
from planarik.model.kinematics import planar_jacobian
from planarik.model.symbolic import symbolic_planar_jacobian
from planarik.solvers.pinv_solver import SingularJacobianError, det_2x2, gram_matrix, pseudo_inverse


def cmd_jacobian_symbolic(args: argparse.Namespace) -> int:
    J, chain = symbolic_planar_jacobian(int(args.joints))
    if args.q is not None:
        if len(args.q) != args.joints:
            raise SystemExit(f"--q expects {args.joints} values")
        q_vals = [radians(v) for v in args.q] if args.deg else list(args.q)
        subs = {sym: val for sym, val in zip(chain.angles, q_vals)}
        J = sp.N(J.subs(subs), int(args.digits))  # type: ignore[no-untyped-call]
    print(f"Planar Jacobian ({args.joints} joints)" + (" (substituted)" if args.q is not None else ""))
    pprint_matrix(J)
    return 0


def cmd_jacobian_numeric(args: argparse.Namespace) -> int:
    lengths, angles = resolve_chain(args)
    J = planar_jacobian(lengths, angles)
    np.set_printoptions(precision=int(args.digits), suppress=not args.scientific)
    print("J")
    print(J)
    print(f"det(J Jᵀ) = {det_2x2(gram_matrix(J)):.6e}")
    if args.pinv:
        try:
            P = pseudo_inverse(J)
        except SingularJacobianError as exc:
            print(f"pseudo-inverse unavailable: {exc}")
            return 1
        print("P = Jᵀ (J Jᵀ)⁻¹")
        print(P)
        print("J P")
        print(J @ P)
    return 0


def register_subparsers(subparsers: argparse._SubParsersAction) -> None:
    jacobian = subparsers.add_parser("jacobian", help="planar Jacobian helpers")
    jac_sub = jacobian.add_subparsers(dest="jacobian_command", required=True)

    jac_symbolic = jac_sub.add_parser("symbolic", help="print the symbolic Jacobian")
    jac_symbolic.add_argument("--joints", type=int, default=3, help="number of joints")
    jac_symbolic.add_argument("--q", nargs="+", type=float, help="optionally substitute a1..aN (rad unless --deg)")
    jac_symbolic.add_argument("--deg", action="store_true", help="interpret --q in degrees")
    jac_symbolic.add_argument("--digits", type=int, default=6, help="digits for numeric eval")
    jac_symbolic.set_defaults(func=cmd_jacobian_symbolic)

    jac_numeric = jac_sub.add_parser("numeric", help="evaluate the Jacobian at q")
    add_chain_arguments(jac_numeric)
    jac_numeric.add_argument("--pinv", action="store_true", help="also print the pseudo-inverse")
    jac_numeric.add_argument("--digits", type=int, default=5, help="print precision")
    jac_numeric.add_argument(
        "--scientific",
        action="store_true",
        help="use scientific notation for numeric output",
    )
    jac_numeric.set_defaults(func=cmd_jacobian_numeric)
