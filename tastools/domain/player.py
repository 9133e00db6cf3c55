"""Player state supplied by the executor for `check` comparisons."""

from __future__ import annotations

import math
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class Vector(NamedTuple):
    """A position in world units."""

    x: float
    y: float
    z: float

    def distance_to(self, other: Vector) -> float:
        """Euclidean distance to another position."""
        return math.dist(self, other)


class Angles(NamedTuple):
    """View angles in degrees."""

    pitch: float
    yaw: float

    def max_difference(self, other: Angles) -> float:
        """Largest per-axis angular difference, wrapped to [0, 180]."""
        return max(angle_difference(self.pitch, other.pitch), angle_difference(self.yaw, other.yaw))


def angle_difference(a: float, b: float) -> float:
    """Absolute difference between two angles, accounting for wraparound."""
    diff = (a - b) % 360.0
    return min(diff, 360.0 - diff)


class PlayerState(BaseModel):
    """Where the player is and where they are looking."""

    model_config = ConfigDict(frozen=True)

    position: Vector
    angles: Angles
