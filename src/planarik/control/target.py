"""Target bookkeeping: error vector, convergence test and re-targeting."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Vector2 = NDArray[np.float64]

DEFAULT_EPSILON = 0.1
DEFAULT_R_MIN = 2.0
DEFAULT_R_MARGIN = 3.0


class TargetController:
    """Owns the current target point and draws new ones inside the workspace.

    New targets are sampled uniformly in angle over ``[0, 2π)`` and uniformly
    in radius over ``[r_min, reach - r_margin]``, which keeps them clear of
    both the base and the fully stretched arm.
    """

    def __init__(
        self,
        target: Sequence[float] = (0.0, 0.0),
        *,
        epsilon: float = DEFAULT_EPSILON,
        r_min: float = DEFAULT_R_MIN,
        r_margin: float = DEFAULT_R_MARGIN,
        rng: random.Random | None = None,
    ):
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if r_min < 0 or r_margin < 0:
            raise ValueError("r_min and r_margin must be non-negative")
        self.epsilon = epsilon
        self.r_min = r_min
        self.r_margin = r_margin
        self.rng = rng if rng is not None else random.Random()
        self._target = np.zeros(2, dtype=float)
        self.set_target(*target)

    @property
    def target(self) -> tuple[float, float]:
        return float(self._target[0]), float(self._target[1])

    def set_target(self, x: float, y: float) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError("target coordinates must be finite")
        self._target = np.array([x, y], dtype=float)

    def current_error(self, tip: Sequence[float]) -> Vector2:
        """Return ``target - tip``."""
        return self._target - np.asarray(tip, dtype=float)

    def distance(self, tip: Sequence[float]) -> float:
        return float(np.linalg.norm(self.current_error(tip)))

    def has_converged(self, tip: Sequence[float]) -> bool:
        return self.distance(tip) < self.epsilon

    def radius_bounds(self, reach: float) -> tuple[float, float]:
        r_max = reach - self.r_margin
        if r_max < self.r_min:
            raise ValueError(
                f"no reachable annulus: reach {reach:g} - margin {self.r_margin:g} < r_min {self.r_min:g}"
            )
        return self.r_min, r_max

    def regenerate(self, reach: float) -> tuple[float, float]:
        """Pick a fresh target for a chain of total length ``reach``."""
        r_lo, r_hi = self.radius_bounds(reach)
        phi = self.rng.uniform(0.0, 2.0 * math.pi)
        r = self.rng.uniform(r_lo, r_hi)
        self.set_target(r * math.cos(phi), r * math.sin(phi))
        return self.target


__all__ = ["TargetController", "DEFAULT_EPSILON", "DEFAULT_R_MIN", "DEFAULT_R_MARGIN"]
