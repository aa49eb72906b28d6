"""
Particle Fields
===============
Point clouds sampled uniformly inside a sphere, plus the animated field that
owns one and spins it on accepted frame ticks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from folio.config import (
    FIELD_GROUP_ROTATION,
    FIELD_OPACITY,
    FIELD_SPIN_X_DIVISOR,
    FIELD_SPIN_Y_DIVISOR,
)
from folio.core.frame_gate import FrameGate

logger = logging.getLogger("folio.particles")


@dataclass
class RotationState:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def generate_point_cloud(
    count: int,
    radius: float,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Uniform sample of `count` points inside a sphere.

    Inverse-transform sampling: r = radius * cbrt(u1) gives uniform volume
    density, phi = arccos(2*u3 - 1) avoids clustering at the poles.

    Args:
        count: Number of points (0 → empty cloud)
        radius: Sphere radius
        rng: numpy Generator (seedable)

    Returns:
        Flat float32 array [x0, y0, z0, x1, ...] of length 3 * count, read-only
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    rng = rng if rng is not None else np.random.default_rng()

    u = rng.random((count, 3))
    r = radius * np.cbrt(u[:, 0])
    theta = 2 * np.pi * u[:, 1]
    phi = np.arccos(2 * u[:, 2] - 1)

    points = np.empty((count, 3), dtype=np.float32)
    points[:, 0] = r * np.sin(phi) * np.cos(theta)
    points[:, 1] = r * np.sin(phi) * np.sin(theta)
    points[:, 2] = r * np.cos(phi)

    cloud = points.reshape(-1)
    cloud.flags.writeable = False
    return cloud


class ParticleField:
    """One layer of points. Rotation is only written by update()."""

    def __init__(
        self,
        count: int,
        radius: float,
        size: float,
        color: str,
        frame_skip: int = 1,
        rng: np.random.Generator | None = None,
    ):
        self.count = count
        self.radius = radius
        self.size = size
        self.color = color
        self.opacity = FIELD_OPACITY
        self.group_rotation = FIELD_GROUP_ROTATION
        self.positions = generate_point_cloud(count, radius, rng)
        self.rotation = RotationState()
        self._gate = FrameGate(frame_skip)
        logger.debug("Field %s: %d points, r=%.2f", color, count, radius)

    @property
    def frames_seen(self) -> int:
        return self._gate.counter

    def update(self, elapsed: float, delta: float) -> bool:
        """Per-frame callback. Returns True when the rotation advanced."""
        if not self._gate.should_advance():
            return False
        self.rotation.x -= delta / FIELD_SPIN_X_DIVISOR
        self.rotation.y -= delta / FIELD_SPIN_Y_DIVISOR
        return True
