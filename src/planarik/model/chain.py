"""Flat serial-chain model for the planar arm."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

Vector = NDArray[np.float64]


@dataclass
class Joint:
    """One revolute joint and the rigid link that follows it.

    ``angle`` is relative to the orientation accumulated by all preceding
    joints, in radians.
    """

    length: float
    angle: float = 0.0

    def __post_init__(self) -> None:
        length = float(self.length)
        if not math.isfinite(length) or length <= 0.0:
            raise ValueError(f"joint length must be finite and positive, got {self.length!r}")
        angle = float(self.angle)
        if not math.isfinite(angle):
            raise ValueError(f"joint angle must be finite, got {self.angle!r}")
        object.__setattr__(self, "length", length)
        self.angle = angle

    def __setattr__(self, name: str, value: object) -> None:
        if name == "length" and "length" in self.__dict__:
            raise AttributeError("joint length is immutable")
        super().__setattr__(name, value)


class Chain:
    """Open serial chain anchored at the origin, stored base-to-tip."""

    def __init__(self, joints: Iterable[Joint]):
        self._joints = list(joints)
        if not self._joints:
            raise ValueError("a chain needs at least one joint")

    @classmethod
    def from_lengths(cls, lengths: Sequence[float], angles: Sequence[float] | None = None) -> Chain:
        if angles is None:
            angles = [0.0] * len(lengths)
        if len(angles) != len(lengths):
            raise ValueError(f"Expected {len(lengths)} joint angles, received {len(angles)}")
        return cls(Joint(length, angle) for length, angle in zip(lengths, angles))

    def __len__(self) -> int:
        return len(self._joints)

    def __getitem__(self, index: int) -> Joint:
        return self._joints[index]

    @property
    def reach(self) -> float:
        return float(sum(j.length for j in self._joints))

    def lengths(self) -> Vector:
        return np.array([j.length for j in self._joints], dtype=float)

    def angles(self) -> Vector:
        """Snapshot of the joint angles; mutating it does not touch the chain."""
        return np.array([j.angle for j in self._joints], dtype=float)

    def set_angles(self, values: Sequence[float] | Vector) -> None:
        if len(values) != len(self._joints):
            raise ValueError(f"Expected {len(self._joints)} joint angles, received {len(values)}")
        checked = [float(v) for v in values]
        if not all(math.isfinite(v) for v in checked):
            raise ValueError("joint angles must be finite")
        for joint, value in zip(self._joints, checked):
            joint.angle = value

    def apply_increment(self, index: int, delta: float) -> None:
        """Add ``delta`` to joint ``index``. No wrapping or clamping."""
        delta = float(delta)
        if not math.isfinite(delta):
            raise ValueError(f"angle increment must be finite, got {delta!r}")
        self._joints[index].angle += delta

    def apply_increments(self, deltas: Sequence[float] | Vector) -> None:
        if len(deltas) != len(self._joints):
            raise ValueError(f"Expected {len(self._joints)} increments, received {len(deltas)}")
        for i, delta in enumerate(deltas):
            self.apply_increment(i, delta)

    def __repr__(self) -> str:
        return f"Chain(lengths={self.lengths().tolist()}, angles={self.angles().tolist()})"


__all__ = ["Joint", "Chain"]
