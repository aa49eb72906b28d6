"""
Folio Scene Composer
====================
Assembles the animated backdrop and drives its lifecycle:

  UNINITIALIZED → PROFILING → READY_HIDDEN → READY_VISIBLE

  1. mount(): static fallback, profiling scheduled on an idle slot (bounded)
  2. profile known: constrained devices keep the fallback for good
  3. full devices: scene mounted transparent, revealed after a short delay
  4. fade to opaque

unmount() releases every pending timer and the frame callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import numpy as np

from folio.config import (
    BACKGROUND_FIELD_COLOR,
    BACKGROUND_FIELD_RADIUS,
    CAMERA_FOV,
    CAMERA_POSITION,
    FADE_DURATION_MS,
    FOG_COLOR,
    FOG_FAR,
    FOG_NEAR,
    FOREGROUND_FIELD_COLOR,
    FOREGROUND_FIELD_RADIUS,
    FOREGROUND_SIZE_FACTOR,
    IDLE_TIMEOUT_MS,
    NO_IDLE_FALLBACK_MS,
    REVEAL_DELAY_MS,
)
from folio.core.accent import AccentShape, FloatMotion
from folio.core.device import SignalSource, classify, read_signals
from folio.core.particles import ParticleField
from folio.core.quality import QualityProfile, select_profile
from folio.scheduling import Handle, Scheduler, schedule_idle_or_deadline
from folio.surface import Surface

logger = logging.getLogger("folio.scene")


class ComposerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    PROFILING = "profiling"
    READY_HIDDEN = "ready-hidden"
    READY_VISIBLE = "ready-visible"


@dataclass(frozen=True)
class Light:
    kind: str  # "ambient" | "point"
    intensity: float
    position: tuple[float, float, float] | None = None
    color: str | None = None


@dataclass(frozen=True)
class Fog:
    color: str
    near: float
    far: float


@dataclass(frozen=True)
class Camera:
    position: tuple[float, float, float]
    fov: float


DYNAMIC_LIGHTS = (
    Light("ambient", 0.2),
    Light("point", 1.0, (10.0, 10.0, 10.0), "#10b981"),
    Light("point", 0.5, (-10.0, -10.0, -10.0), "#3b82f6"),
)
SIMPLE_LIGHTS = (Light("ambient", 0.4),)


@dataclass
class Scene:
    background: ParticleField
    foreground: ParticleField
    accent: AccentShape | None
    lights: tuple[Light, ...]
    fog: Fog | None
    camera: Camera
    pixel_ratio: float
    frames: int = 0

    def update(self, elapsed: float, delta: float) -> None:
        self.frames += 1
        self.background.update(elapsed, delta)
        self.foreground.update(elapsed, delta)
        if self.accent is not None:
            self.accent.update(elapsed, delta)


def build_scene(profile: QualityProfile, rng: np.random.Generator | None = None) -> Scene:
    """Two particle layers, optional accent shape, lighting and fog per profile."""
    rng = rng if rng is not None else np.random.default_rng()

    background = ParticleField(
        count=profile.particle_count,
        radius=BACKGROUND_FIELD_RADIUS,
        size=profile.particle_size,
        color=BACKGROUND_FIELD_COLOR,
        frame_skip=profile.frame_skip,
        rng=rng,
    )
    foreground = ParticleField(
        count=profile.foreground_particle_count,
        radius=FOREGROUND_FIELD_RADIUS,
        size=profile.particle_size * FOREGROUND_SIZE_FACTOR,
        color=FOREGROUND_FIELD_COLOR,
        frame_skip=profile.frame_skip,
        rng=rng,
    )

    accent = None
    if profile.enable_accent_shape:
        float_motion = FloatMotion(rng=rng) if profile.enable_float_motion else None
        accent = AccentShape(frame_skip=profile.frame_skip, float_motion=float_motion)

    return Scene(
        background=background,
        foreground=foreground,
        accent=accent,
        lights=DYNAMIC_LIGHTS if profile.enable_dynamic_lighting else SIMPLE_LIGHTS,
        fog=Fog(FOG_COLOR, FOG_NEAR, FOG_FAR) if profile.enable_fog else None,
        camera=Camera(CAMERA_POSITION, CAMERA_FOV),
        pixel_ratio=profile.pixel_ratio_cap,
    )


class SceneComposer:
    """Owns the backdrop lifecycle for one mounted view."""

    def __init__(
        self,
        scheduler: Scheduler,
        surface: Surface,
        signals: SignalSource,
        rng: np.random.Generator | None = None,
    ):
        self._scheduler = scheduler
        self._surface = surface
        self._signals = signals
        self._rng = rng
        self.state = ComposerState.UNINITIALIZED
        self.signals = None
        self.tier = None
        self.profile: QualityProfile | None = None
        self.scene: Scene | None = None
        self.fade_complete = False
        self._handles: list[Handle] = []
        self._frame_token: int | None = None
        self._torn_down = False
        self._listeners: list[Callable[[ComposerState, ComposerState], None]] = []

    def on_state_change(self, fn: Callable[[ComposerState, ComposerState], None]) -> None:
        """Register fn(old, new). Listener errors are logged, not raised."""
        self._listeners.append(fn)

    def _set_state(self, new: ComposerState) -> None:
        old, self.state = self.state, new
        logger.debug("State %s → %s", old.value, new.value)
        for fn in self._listeners:
            try:
                fn(old, new)
            except Exception as e:
                logger.error(f"State listener {getattr(fn, '__name__', fn)} failed: {e}")

    def mount(self) -> None:
        if self.state is not ComposerState.UNINITIALIZED or self._torn_down:
            raise RuntimeError(f"cannot mount composer in state {self.state.value}")
        self._surface.show_fallback()
        self._set_state(ComposerState.PROFILING)
        self._handles.append(
            schedule_idle_or_deadline(self._scheduler, self._run_profiling, IDLE_TIMEOUT_MS, NO_IDLE_FALLBACK_MS)
        )

    def _run_profiling(self) -> None:
        if self._torn_down:
            return
        self.signals = read_signals(self._signals)
        self.tier = classify(self.signals)
        self.profile = select_profile(self.tier, self.signals.device_pixel_ratio)
        self._set_state(ComposerState.READY_HIDDEN)

        if self.profile.is_constrained:
            logger.info("Constrained device: keeping static backdrop")
            return

        self.scene = build_scene(self.profile, self._rng)
        self._surface.mount_scene(self.scene, opacity=0.0)
        self._frame_token = self._surface.register_frame_callback(self._on_frame)
        self._handles.append(self._scheduler.call_later(REVEAL_DELAY_MS, self._reveal))
        logger.info(
            "Scene mounted: %d + %d particles, dpr=%.1f",
            self.profile.particle_count, self.profile.foreground_particle_count,
            self.profile.pixel_ratio_cap,
        )

    def _reveal(self) -> None:
        if self._torn_down:
            return
        self._set_state(ComposerState.READY_VISIBLE)
        self._surface.fade_to(1.0, FADE_DURATION_MS)
        self._handles.append(self._scheduler.call_later(FADE_DURATION_MS, self._finish_fade))

    def _finish_fade(self) -> None:
        if not self._torn_down:
            self.fade_complete = True

    def _on_frame(self, elapsed: float, delta: float) -> None:
        if self._torn_down or self.scene is None:
            return
        self.scene.update(elapsed, delta)

    def unmount(self) -> None:
        """Release timers and the frame callback. Safe to call more than once."""
        if self._torn_down:
            return
        self._torn_down = True
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        if self._frame_token is not None:
            self._surface.unregister_frame_callback(self._frame_token)
            self._frame_token = None
        logger.debug("Composer unmounted in state %s", self.state.value)

    @property
    def frame_callback_registered(self) -> bool:
        return self._frame_token is not None
