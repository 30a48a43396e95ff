from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from planarik.model.kinematics import finite_difference_jacobian, planar_jacobian
from planarik.model.symbolic import evaluate_symbolic_jacobian
from planarik.solvers.pinv_solver import SingularJacobianError, pseudo_inverse


@dataclass
class JacobianCheckResult:
    angles: tuple[float, ...]
    fd_err: float
    sym_err: float | None
    identity_err: float | None


def check_jacobian_once(
    lengths: Sequence[float],
    angles: Sequence[float],
    *,
    symbolic: bool = False,
    epsilon: float = 1e-6,
) -> JacobianCheckResult:
    """Compare the analytic Jacobian against finite differences (and SymPy)."""
    J = planar_jacobian(lengths, angles)
    fd_err = float(np.max(np.abs(J - finite_difference_jacobian(lengths, angles, epsilon))))

    sym_err = None
    if symbolic:
        sym_err = float(np.max(np.abs(J - evaluate_symbolic_jacobian(lengths, angles))))

    # J P = I only exists away from singular poses
    identity_err = None
    try:
        P = pseudo_inverse(J)
    except SingularJacobianError:
        pass
    else:
        identity_err = float(np.max(np.abs(J @ P - np.eye(2))))

    return JacobianCheckResult(tuple(float(v) for v in angles), fd_err, sym_err, identity_err)


def random_angles(n_joints: int, rng: random.Random) -> NDArray[np.float64]:
    return np.array([rng.uniform(-math.pi, math.pi) for _ in range(n_joints)], dtype=float)


__all__ = ["JacobianCheckResult", "check_jacobian_once", "random_angles"]
