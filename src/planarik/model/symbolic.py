"""Symbolic tip position and Jacobian for an N-link planar chain."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, cast

import numpy as np
import sympy as sp
from numpy.typing import NDArray


class PlanarChainSymbolic(NamedTuple):
    """Container for the symbolic tip expressions of a planar chain."""

    x: sp.Expr
    y: sp.Expr
    lengths: tuple[sp.Symbol, ...]
    angles: tuple[sp.Symbol, ...]

    @property
    def position(self) -> sp.Matrix:
        return sp.Matrix([self.x, self.y])


def symbolic_planar_chain(n_joints: int) -> PlanarChainSymbolic:
    """Return x(a), y(a) for a chain of ``n_joints`` links ``l1..lN``."""
    if n_joints < 1:
        raise ValueError("a chain needs at least one joint")
    lengths = tuple(sp.symbols(f"l1:{n_joints + 1}", positive=True))
    angles = tuple(sp.symbols(f"a1:{n_joints + 1}", real=True))

    x: sp.Expr = sp.Integer(0)
    y: sp.Expr = sp.Integer(0)
    theta: sp.Expr = sp.Integer(0)
    for li, ai in zip(lengths, angles):
        theta = cast(sp.Expr, theta + ai)
        x = cast(sp.Expr, x + li * sp.cos(theta))
        y = cast(sp.Expr, y + li * sp.sin(theta))
    return PlanarChainSymbolic(x=x, y=y, lengths=lengths, angles=angles)


def symbolic_planar_jacobian(n_joints: int) -> tuple[sp.Matrix, PlanarChainSymbolic]:
    """Differentiate the tip position with respect to every joint angle."""
    chain = symbolic_planar_chain(n_joints)
    J = cast(sp.Matrix, chain.position.jacobian(sp.Matrix(chain.angles)))
    return J, chain


def evaluate_symbolic_jacobian(
    lengths: Sequence[float],
    angles: Sequence[float],
) -> NDArray[np.float64]:
    """Substitute numbers into the symbolic Jacobian and return a float array."""
    if len(lengths) != len(angles):
        raise ValueError(f"Expected {len(lengths)} joint angles, received {len(angles)}")
    J, chain = symbolic_planar_jacobian(len(lengths))
    subs = {sym: float(v) for sym, v in zip(chain.lengths, lengths)}
    subs.update({sym: float(v) for sym, v in zip(chain.angles, angles)})
    J_num = sp.N(J.subs(subs), 15)  # type: ignore[no-untyped-call]
    return np.array(J_num.tolist(), dtype=np.float64)


__all__ = [
    "PlanarChainSymbolic",
    "symbolic_planar_chain",
    "symbolic_planar_jacobian",
    "evaluate_symbolic_jacobian",
]
