"""
Pseudo-inverse step for a planar chain with more joints than task DoF.

Design goals
------------
- Pure numeric helpers (gram matrix, 2x2 inverse, pseudo-inverse) with no state
- One small stateful wrapper that remembers the last good increment

Notes
-----
``J Jᵀ`` is a 2x2 Gram matrix, so its determinant is never negative in exact
arithmetic. When it drops to ``singular_epsilon`` or below the inverse is not
trusted and :class:`SingularJacobianError` is raised. The solver catches it
and replays the previous increment so the chain keeps moving along its last
known direction.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

Vector = NDArray[np.float64]
Matrix = NDArray[np.float64]

DEFAULT_SINGULAR_EPSILON = 2e-5


class SingularJacobianError(np.linalg.LinAlgError):
    """``J Jᵀ`` is (numerically) rank deficient."""

    def __init__(self, det: float):
        super().__init__(f"det(J Jᵀ) = {det:.3e}: Jacobian is singular")
        self.det = det


class SolveResult(NamedTuple):
    increment: Vector
    singular: bool
    det: float


def gram_matrix(J: Matrix) -> Matrix:
    """Return ``M = J Jᵀ`` for a 2xN Jacobian."""
    if J.ndim != 2 or J.shape[0] != 2:
        raise ValueError(f"J must be 2xN, got shape {J.shape}")
    return J @ J.T


def det_2x2(M: Matrix) -> float:
    return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])


def inverse_2x2(M: Matrix, singular_epsilon: float = DEFAULT_SINGULAR_EPSILON) -> Matrix:
    """Adjugate/determinant inverse of a 2x2 matrix."""
    det = det_2x2(M)
    if abs(det) <= singular_epsilon:
        raise SingularJacobianError(det)
    adj = np.array([[M[1, 1], -M[0, 1]], [-M[1, 0], M[0, 0]]], dtype=float)
    return adj / det


def pseudo_inverse(J: Matrix, singular_epsilon: float = DEFAULT_SINGULAR_EPSILON) -> Matrix:
    """Right pseudo-inverse ``P = Jᵀ (J Jᵀ)⁻¹`` (Nx2), so that ``J P = I₂``."""
    M = gram_matrix(J)
    return J.T @ inverse_2x2(M, singular_epsilon)


class PseudoInverseSolver:
    """Map a small tip displacement to joint increments, with singular fallback."""

    def __init__(self, n_joints: int, singular_epsilon: float = DEFAULT_SINGULAR_EPSILON):
        if n_joints < 1:
            raise ValueError("n_joints must be positive")
        self.n_joints = n_joints
        self.singular_epsilon = singular_epsilon
        self._last_increment = np.zeros(n_joints, dtype=float)

    @property
    def last_increment(self) -> Vector:
        return self._last_increment.copy()

    def reset(self) -> None:
        self._last_increment = np.zeros(self.n_joints, dtype=float)

    def solve(self, J: Matrix, delta: Sequence[float] | Vector) -> SolveResult:
        """Return ``Δa = P (Δx, Δy)``; on a singular ``J`` replay the last ``Δa``."""
        if J.shape != (2, self.n_joints):
            raise ValueError(f"J must be 2x{self.n_joints}, got shape {J.shape}")
        d = np.asarray(delta, dtype=float)
        if d.shape != (2,):
            raise ValueError("delta must have length 2")

        M = gram_matrix(J)
        try:
            M_inv = inverse_2x2(M, self.singular_epsilon)
        except SingularJacobianError as exc:
            logger.warning("%s; reusing previous increment", exc)
            return SolveResult(self._last_increment.copy(), True, exc.det)

        P = J.T @ M_inv
        dq = P @ d
        self._last_increment = dq
        return SolveResult(dq.copy(), False, det_2x2(M))


__all__ = [
    "DEFAULT_SINGULAR_EPSILON",
    "SingularJacobianError",
    "SolveResult",
    "gram_matrix",
    "det_2x2",
    "inverse_2x2",
    "pseudo_inverse",
    "PseudoInverseSolver",
]
