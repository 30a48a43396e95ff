"""Numeric forward kinematics and Jacobian for planar serial chains."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.float64]
Matrix2xN = NDArray[np.float64]


def _as_arrays(lengths: Sequence[float] | Vector, angles: Sequence[float] | Vector) -> tuple[Vector, Vector]:
    lengths_arr = np.asarray(lengths, dtype=float)
    angles_arr = np.asarray(angles, dtype=float)
    if lengths_arr.ndim != 1 or lengths_arr.shape != angles_arr.shape:
        msg = f"lengths {lengths_arr.shape} and angles {angles_arr.shape} must be matching 1-D arrays"
        raise ValueError(msg)
    return lengths_arr, angles_arr


def cumulative_angles(angles: Sequence[float] | Vector) -> Vector:
    """Absolute link orientations Θ_k = a_1 + ... + a_k."""
    return np.cumsum(np.asarray(angles, dtype=float))


def joint_positions(lengths: Sequence[float] | Vector, angles: Sequence[float] | Vector) -> NDArray[np.float64]:
    """Return the (N+1)x2 array of link origins; row 0 is the base, row N the tip."""
    lengths_arr, angles_arr = _as_arrays(lengths, angles)
    theta = cumulative_angles(angles_arr)
    steps = np.column_stack((lengths_arr * np.cos(theta), lengths_arr * np.sin(theta)))
    return np.vstack((np.zeros((1, 2)), np.cumsum(steps, axis=0)))


def tip_position(lengths: Sequence[float] | Vector, angles: Sequence[float] | Vector) -> tuple[float, float]:
    """Tip of the chain: x = Σ l_k cos Θ_k, y = Σ l_k sin Θ_k."""
    lengths_arr, angles_arr = _as_arrays(lengths, angles)
    theta = cumulative_angles(angles_arr)
    x = float(np.sum(lengths_arr * np.cos(theta)))
    y = float(np.sum(lengths_arr * np.sin(theta)))
    return x, y


def planar_jacobian(lengths: Sequence[float] | Vector, angles: Sequence[float] | Vector) -> Matrix2xN:
    """2xN Jacobian of the tip position with respect to the joint angles.

    Joint i moves every link k >= i, so the columns are accumulated from the
    tip joint back to the base:

        dx/da_i = dx/da_{i+1} - l_i sin Θ_i
        dy/da_i = dy/da_{i+1} + l_i cos Θ_i
    """
    lengths_arr, angles_arr = _as_arrays(lengths, angles)
    theta = cumulative_angles(angles_arr)
    n = lengths_arr.shape[0]

    J = np.zeros((2, n), dtype=float)
    dx = 0.0
    dy = 0.0
    for i in range(n - 1, -1, -1):
        dx -= lengths_arr[i] * np.sin(theta[i])
        dy += lengths_arr[i] * np.cos(theta[i])
        J[0, i] = dx
        J[1, i] = dy
    return J


def finite_difference_jacobian(
    lengths: Sequence[float] | Vector,
    angles: Sequence[float] | Vector,
    epsilon: float = 1e-6,
) -> Matrix2xN:
    """Central-difference approximation of :func:`planar_jacobian`."""
    lengths_arr, angles_arr = _as_arrays(lengths, angles)
    n = lengths_arr.shape[0]
    J = np.zeros((2, n), dtype=float)
    for i in range(n):
        q_plus = angles_arr.copy()
        q_minus = angles_arr.copy()
        q_plus[i] += epsilon
        q_minus[i] -= epsilon
        p_plus = np.array(tip_position(lengths_arr, q_plus))
        p_minus = np.array(tip_position(lengths_arr, q_minus))
        J[:, i] = (p_plus - p_minus) / (2.0 * epsilon)
    return J


__all__ = [
    "cumulative_angles",
    "joint_positions",
    "tip_position",
    "planar_jacobian",
    "finite_difference_jacobian",
]
