from __future__ import annotations

import math
import random

import numpy as np
import pytest

from planarik.control.tracker import IKTracker, TrackerConfig, TrackerState
from planarik.model.chain import Chain

LENGTHS = [25.0, 20.0, 15.0, 10.0]


def _tracker(angles, target=(15.0, 10.0), **kwargs) -> IKTracker:
    return IKTracker(Chain.from_lengths(LENGTHS, angles), TrackerConfig(seed=0), target=target, **kwargs)


def test_converges_to_fixed_target() -> None:
    tracker = _tracker([-math.pi / 4] * 4)
    distances = [tracker.distance_to_target()]
    converged = False
    for _ in range(10000):
        outcome = tracker.step()
        if outcome.state is TrackerState.CONVERGED:
            converged = True
            break
        assert not outcome.singular
        distances.append(tracker.distance_to_target())
        # constant-speed approach, oscillation bounded by the threshold
        assert distances[-1] < distances[-2] + tracker.config.epsilon

    assert converged
    assert distances[-1] < 0.1
    assert distances[-1] < distances[0]
    assert tracker.convergence_count == 1
    assert tracker.target_position() != (15.0, 10.0)


def test_step_moves_tip_by_step_size() -> None:
    tracker = _tracker([0.4, -0.3, 0.8, 0.2])
    before = np.array(tracker.tip_position())
    outcome = tracker.step()
    after = np.array(tracker.tip_position())

    assert outcome.state is TrackerState.SEEKING
    assert np.linalg.norm(after - before) == pytest.approx(0.01, rel=1e-2)
    direction = np.array(tracker.target_position()) - before
    assert np.dot(after - before, direction) > 0


def test_converged_tick_regenerates_without_moving() -> None:
    tracker = _tracker([0.4, -0.3, 0.8, 0.2])
    tracker.targets.set_target(*tracker.tip_position())
    angles = tracker.joint_angles()

    outcome = tracker.step()

    assert outcome.state is TrackerState.CONVERGED
    assert tracker.state is TrackerState.SEEKING
    assert tracker.joint_angles() == angles
    r = math.hypot(*tracker.target_position())
    assert 2.0 <= r <= sum(LENGTHS) - 3.0


def test_singular_pose_reuses_previous_increment() -> None:
    seen = []
    tracker = _tracker([0.4, -0.3, 0.8, 0.2], on_singularity=seen.append)
    first = tracker.step()
    assert not first.singular
    previous = tracker.solver.last_increment

    # all angles equal to zero: the chain is a straight line
    tracker.chain.set_angles([0.0] * 4)
    outcome = tracker.step()

    assert outcome.singular
    assert tracker.singularity_occurred
    assert seen == [tracker]
    assert np.allclose(tracker.chain.angles(), previous)
    assert np.array_equal(tracker.solver.last_increment, previous)
    assert tracker.singular_count == 1


def test_cold_start_singular_tick_keeps_angles() -> None:
    tracker = _tracker([0.0] * 4)
    outcome = tracker.step()
    assert outcome.singular
    assert tracker.joint_angles() == (0.0, 0.0, 0.0, 0.0)
    assert np.array_equal(outcome.increment, np.zeros(4))


def test_dt_is_ignored() -> None:
    a = _tracker([0.4, -0.3, 0.8, 0.2])
    b = _tracker([0.4, -0.3, 0.8, 0.2])
    for _ in range(20):
        a.step()
        b.step(1 / 60)
    assert np.allclose(a.joint_angles(), b.joint_angles())


def test_initial_target_is_seeded_and_reachable() -> None:
    chain_a = Chain.from_lengths(LENGTHS, [0.1] * 4)
    chain_b = Chain.from_lengths(LENGTHS, [0.1] * 4)
    a = IKTracker(chain_a, TrackerConfig(seed=7))
    b = IKTracker(chain_b, rng=random.Random(7))
    assert a.target_position() == b.target_position()
    assert 2.0 <= math.hypot(*a.target_position()) <= 67.0


def test_run_reports_first_convergence() -> None:
    tracker = _tracker([-math.pi / 4] * 4)
    report = tracker.run(10000, stop_on_converge=True)
    assert report.convergences == 1
    assert report.final_distance < 0.1
    assert report.steps < 10000
    assert report.singular_ticks == 0


def test_state_queries() -> None:
    tracker = _tracker([0.1, 0.2, 0.3, 0.4])
    assert tracker.joint_lengths() == tuple(LENGTHS)
    assert tracker.joint_angles() == pytest.approx((0.1, 0.2, 0.3, 0.4))
    assert tracker.target_position() == (15.0, 10.0)
    assert np.allclose(tracker.joint_positions()[-1], tracker.tip_position())
    assert tracker.state is TrackerState.SEEKING


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        TrackerConfig(step_size=0.0)
    with pytest.raises(ValueError):
        TrackerConfig(epsilon=-1.0)


def test_explicit_target_on_short_chain_rejected_at_construction() -> None:
    chain = Chain.from_lengths([1.0, 1.0, 1.0], [0.3] * 3)
    # reach 3 leaves no room between r_min 2 and reach - r_margin 0
    with pytest.raises(ValueError, match="annulus"):
        IKTracker(chain, TrackerConfig(seed=0), target=(0.0, 0.0))


def test_config_rejects_negative_radii() -> None:
    with pytest.raises(ValueError):
        TrackerConfig(r_min=-1.0)
    with pytest.raises(ValueError):
        TrackerConfig(r_margin=-0.5)
