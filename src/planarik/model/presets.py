"""Chain presets shared by the CLI and tests."""

from __future__ import annotations

import math
from typing import NamedTuple


class ChainPreset(NamedTuple):
    lengths: tuple[float, ...]
    angles_deg: tuple[float, ...]
    target: tuple[float, float] | None = None

    @property
    def angles_rad(self) -> list[float]:
        return [math.radians(v) for v in self.angles_deg]


# Angles stored in degrees; convert with ``angles_rad`` where needed.
PRESETS: dict[str, ChainPreset] = {
    "four-link": ChainPreset((25.0, 20.0, 15.0, 10.0), (-45.0, -45.0, -45.0, -45.0), (15.0, 10.0)),
    # Upright arm bent slightly off the straight (singular) pose.
    "three-link": ChainPreset((10.0, 7.5, 5.0), (90.0, -20.0, -20.0), (-10.0, -15.0)),
    "snake": ChainPreset((6.0,) * 8, (10.0,) * 8),
}

DEFAULT_PRESET = "four-link"


def get_preset(name: str) -> ChainPreset:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"unknown preset {name!r}; choose from {', '.join(sorted(PRESETS))}") from None


__all__ = ["ChainPreset", "PRESETS", "DEFAULT_PRESET", "get_preset"]
