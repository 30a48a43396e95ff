from __future__ import annotations

import math

import numpy as np
import pytest

from planarik.model.chain import Chain, Joint


def test_joint_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        Joint(0.0)
    with pytest.raises(ValueError):
        Joint(-1.0)
    with pytest.raises(ValueError):
        Joint(math.inf)


def test_joint_rejects_non_finite_angle() -> None:
    with pytest.raises(ValueError):
        Joint(1.0, math.nan)


def test_joint_length_is_immutable() -> None:
    joint = Joint(2.0, 0.5)
    with pytest.raises(AttributeError):
        joint.length = 3.0
    joint.angle = 1.0
    assert joint.angle == 1.0
    assert joint.length == 2.0


def test_empty_chain_rejected() -> None:
    with pytest.raises(ValueError):
        Chain([])


def test_from_lengths_checks_angle_count() -> None:
    with pytest.raises(ValueError):
        Chain.from_lengths([1.0, 2.0], [0.0])


def test_reach_and_snapshots() -> None:
    chain = Chain.from_lengths([25, 20, 15, 10], [0.1, 0.2, 0.3, 0.4])
    assert len(chain) == 4
    assert chain.reach == pytest.approx(70.0)

    angles = chain.angles()
    angles[0] = 99.0
    assert chain[0].angle == pytest.approx(0.1)
    assert np.allclose(chain.lengths(), [25, 20, 15, 10])


def test_apply_increment_is_unbounded() -> None:
    chain = Chain.from_lengths([1.0, 1.0])
    for _ in range(10):
        chain.apply_increment(1, 1.0)
    # no wrapping into [-pi, pi]
    assert chain[1].angle == pytest.approx(10.0)
    assert chain[0].angle == 0.0


def test_apply_increments_and_set_angles() -> None:
    chain = Chain.from_lengths([1.0, 1.0, 1.0])
    chain.apply_increments(np.array([0.1, -0.2, 0.3]))
    assert np.allclose(chain.angles(), [0.1, -0.2, 0.3])

    chain.set_angles([0.0, 0.0, 0.0])
    assert np.allclose(chain.angles(), 0.0)

    with pytest.raises(ValueError):
        chain.apply_increments([0.1])
    with pytest.raises(ValueError):
        chain.apply_increment(0, math.inf)
    with pytest.raises(ValueError):
        chain.set_angles([0.0, math.nan, 0.0])
