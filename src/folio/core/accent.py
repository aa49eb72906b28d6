"""
Accent Shape
============
The single wireframe icosahedron shown on full-quality devices, with an
optional bobbing float wrapper.
"""

from __future__ import annotations

import math

import numpy as np

from folio.config import (
    ACCENT_COLOR,
    ACCENT_DETAIL,
    ACCENT_EMISSIVE,
    ACCENT_EMISSIVE_INTENSITY,
    ACCENT_OPACITY,
    ACCENT_POSITION,
    ACCENT_RADIUS,
    ACCENT_SCALE,
    ACCENT_SPIN_X,
    ACCENT_SPIN_Y,
    FLOAT_INTENSITY,
    FLOAT_ROTATION_INTENSITY,
    FLOAT_SPEED,
)
from folio.core.frame_gate import FrameGate
from folio.core.particles import RotationState


class FloatMotion:
    """Gentle bob + wobble applied to a wrapped object every frame (not gated)."""

    def __init__(
        self,
        speed: float = FLOAT_SPEED,
        rotation_intensity: float = FLOAT_ROTATION_INTENSITY,
        float_intensity: float = FLOAT_INTENSITY,
        rng: np.random.Generator | None = None,
    ):
        rng = rng if rng is not None else np.random.default_rng()
        self.speed = speed
        self.rotation_intensity = rotation_intensity
        self.float_intensity = float_intensity
        self.offset = float(rng.random() * 10000)
        self.rotation = RotationState()
        self.y_offset = 0.0

    def update(self, elapsed: float) -> None:
        a = (self.offset + elapsed) / 4 * self.speed
        self.rotation.x = math.cos(a) / 8 * self.rotation_intensity
        self.rotation.y = math.sin(a) / 8 * self.rotation_intensity
        self.rotation.z = math.sin(a) / 20 * self.rotation_intensity
        self.y_offset = math.sin(a) / 10 * self.float_intensity


class AccentShape:
    def __init__(self, frame_skip: int = 1, float_motion: FloatMotion | None = None):
        self.position = ACCENT_POSITION
        self.scale = ACCENT_SCALE
        self.radius = ACCENT_RADIUS
        self.detail = ACCENT_DETAIL
        self.color = ACCENT_COLOR
        self.emissive = ACCENT_EMISSIVE
        self.emissive_intensity = ACCENT_EMISSIVE_INTENSITY
        self.opacity = ACCENT_OPACITY
        self.wireframe = True
        self.float_motion = float_motion
        self.rotation = RotationState()
        self._gate = FrameGate(frame_skip)

    def update(self, elapsed: float, delta: float) -> bool:
        if self.float_motion is not None:
            self.float_motion.update(elapsed)
        if not self._gate.should_advance():
            return False
        # absolute, not incremental
        self.rotation.x = elapsed * ACCENT_SPIN_X
        self.rotation.y = elapsed * ACCENT_SPIN_Y
        return True
