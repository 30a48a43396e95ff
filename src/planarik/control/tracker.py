"""Per-frame target tracking for a planar chain.

The tracker is the only object a renderer needs: it owns the chain, the
target and the solver memory, advances one tick per :meth:`IKTracker.step`
and exposes read-only snapshots of the state for drawing.
"""

from __future__ import annotations

import enum
import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from planarik.control.target import (
    DEFAULT_EPSILON,
    DEFAULT_R_MARGIN,
    DEFAULT_R_MIN,
    TargetController,
)
from planarik.model.chain import Chain
from planarik.model.kinematics import joint_positions, planar_jacobian, tip_position
from planarik.solvers.pinv_solver import DEFAULT_SINGULAR_EPSILON, PseudoInverseSolver

logger = logging.getLogger(__name__)

Vector = NDArray[np.float64]


@dataclass(frozen=True)
class TrackerConfig:
    step_size: float = 0.01  # tip displacement per tick (workspace units)
    epsilon: float = DEFAULT_EPSILON
    r_min: float = DEFAULT_R_MIN
    r_margin: float = DEFAULT_R_MARGIN
    singular_epsilon: float = DEFAULT_SINGULAR_EPSILON
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.step_size <= 0:
            raise ValueError("step_size must be positive")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if self.singular_epsilon < 0:
            raise ValueError("singular_epsilon must be non-negative")
        if self.r_min < 0 or self.r_margin < 0:
            raise ValueError("r_min and r_margin must be non-negative")


class TrackerState(enum.Enum):
    SEEKING = "seeking"
    CONVERGED = "converged"


class StepOutcome(NamedTuple):
    state: TrackerState
    singular: bool
    distance: float
    increment: Vector


class TrackingReport(NamedTuple):
    steps: int
    convergences: int
    singular_ticks: int
    final_distance: float


class IKTracker:
    """Drive the tip of ``chain`` toward a target with pseudo-inverse steps."""

    def __init__(
        self,
        chain: Chain,
        config: TrackerConfig | None = None,
        *,
        target: Sequence[float] | None = None,
        rng: random.Random | None = None,
        on_singularity: Callable[[IKTracker], None] | None = None,
    ):
        self.chain = chain
        self.config = config if config is not None else TrackerConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.targets = TargetController(
            epsilon=self.config.epsilon,
            r_min=self.config.r_min,
            r_margin=self.config.r_margin,
            rng=rng,
        )
        # no target annulus: fail here rather than at the first convergence
        self.targets.radius_bounds(self.chain.reach)
        if target is None:
            self.targets.regenerate(self.chain.reach)
        else:
            self.targets.set_target(float(target[0]), float(target[1]))
        self.solver = PseudoInverseSolver(len(chain), self.config.singular_epsilon)
        self.on_singularity = on_singularity

        self.state = TrackerState.SEEKING
        self.singularity_occurred = False
        self.step_count = 0
        self.convergence_count = 0
        self.singular_count = 0

    # ---- state queries for the renderer ----

    def joint_angles(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self.chain.angles())

    def joint_lengths(self) -> tuple[float, ...]:
        return tuple(float(v) for v in self.chain.lengths())

    def target_position(self) -> tuple[float, float]:
        return self.targets.target

    def tip_position(self) -> tuple[float, float]:
        return tip_position(self.chain.lengths(), self.chain.angles())

    def joint_positions(self) -> NDArray[np.float64]:
        return joint_positions(self.chain.lengths(), self.chain.angles())

    def distance_to_target(self) -> float:
        return self.targets.distance(self.tip_position())

    # ---- control ----

    def step(self, dt: float | None = None) -> StepOutcome:
        """Advance one tick. ``dt`` is accepted for frame callbacks and ignored."""
        self.step_count += 1
        lengths = self.chain.lengths()
        angles = self.chain.angles()
        tip = tip_position(lengths, angles)

        if self.targets.has_converged(tip):
            distance = self.targets.distance(tip)
            self.convergence_count += 1
            new_target = self.targets.regenerate(self.chain.reach)
            logger.info(
                "converged at tip (%.3f, %.3f) after %d steps; new target (%.3f, %.3f)",
                tip[0], tip[1], self.step_count, new_target[0], new_target[1],
            )
            self.singularity_occurred = False
            self.state = TrackerState.SEEKING
            return StepOutcome(TrackerState.CONVERGED, False, distance, np.zeros(len(self.chain)))

        error = self.targets.current_error(tip)
        distance = float(np.linalg.norm(error))
        delta = self.config.step_size * error / distance

        J = planar_jacobian(lengths, angles)
        result = self.solver.solve(J, delta)
        self.chain.apply_increments(result.increment)

        self.singularity_occurred = result.singular
        if result.singular:
            self.singular_count += 1
            if self.on_singularity is not None:
                self.on_singularity(self)
        self.state = TrackerState.SEEKING
        return StepOutcome(TrackerState.SEEKING, result.singular, distance, result.increment)

    def run(self, max_steps: int, *, stop_on_converge: bool = False) -> TrackingReport:
        """Step up to ``max_steps`` times, optionally stopping at the first convergence."""
        steps = 0
        convergences = 0
        singular_ticks = 0
        for _ in range(max_steps):
            outcome = self.step()
            steps += 1
            singular_ticks += int(outcome.singular)
            if outcome.state is TrackerState.CONVERGED:
                convergences += 1
                if stop_on_converge:
                    # distance to the target that was reached, not the fresh one
                    return TrackingReport(steps, convergences, singular_ticks, outcome.distance)
        return TrackingReport(steps, convergences, singular_ticks, self.distance_to_target())


__all__ = ["TrackerConfig", "TrackerState", "StepOutcome", "TrackingReport", "IKTracker"]
