from __future__ import annotations

import math
import random

import numpy as np
import pytest

from planarik.control.target import TargetController


def test_error_and_convergence() -> None:
    targets = TargetController((15.0, 10.0))
    assert np.allclose(targets.current_error((10.0, 10.0)), [5.0, 0.0])
    assert targets.distance((12.0, 6.0)) == pytest.approx(5.0)
    assert targets.has_converged((15.05, 10.0))
    assert not targets.has_converged((15.2, 10.0))


def test_regenerated_targets_stay_in_annulus() -> None:
    targets = TargetController(rng=random.Random(42))
    reach = 70.0
    quadrants = set()
    for _ in range(1000):
        x, y = targets.regenerate(reach)
        r = math.hypot(x, y)
        assert 2.0 - 1e-9 <= r <= reach - 3.0 + 1e-9
        assert targets.target == (x, y)
        quadrants.add((x >= 0, y >= 0))
    assert len(quadrants) == 4


def test_regenerate_is_reproducible_with_seed() -> None:
    a = TargetController(rng=random.Random(5))
    b = TargetController(rng=random.Random(5))
    assert [a.regenerate(30.0) for _ in range(5)] == [b.regenerate(30.0) for _ in range(5)]


def test_regenerate_needs_an_annulus() -> None:
    targets = TargetController()
    with pytest.raises(ValueError):
        targets.regenerate(4.0)


def test_bad_parameters_rejected() -> None:
    with pytest.raises(ValueError):
        TargetController(epsilon=0.0)
    with pytest.raises(ValueError):
        TargetController((math.nan, 0.0))


def test_negative_radii_rejected() -> None:
    with pytest.raises(ValueError):
        TargetController(r_min=-2.0)
    with pytest.raises(ValueError):
        TargetController(r_margin=-3.0)
