"""
Host rendering surface.

The composer only needs to show a static fallback, mount a scene at some
opacity, fade it, and hook a per-frame callback (elapsed, delta in seconds).
HeadlessSurface records all of it and drives frames from tick().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger("folio.surface")

FrameCallback = Callable[[float, float], None]


class Surface(Protocol):
    def show_fallback(self) -> None: ...

    def mount_scene(self, scene: Any, opacity: float) -> None: ...

    def fade_to(self, opacity: float, duration_ms: float) -> None: ...

    def register_frame_callback(self, callback: FrameCallback) -> int: ...

    def unregister_frame_callback(self, token: int) -> None: ...


@dataclass
class HeadlessSurface:
    fallback_shown: bool = False
    scene: Any = None
    opacity: float = 0.0
    fades: list[tuple[float, float]] = field(default_factory=list)
    elapsed: float = 0.0
    frames: int = 0
    _callbacks: dict[int, FrameCallback] = field(default_factory=dict)
    _next_token: int = 1

    def show_fallback(self) -> None:
        self.fallback_shown = True

    def mount_scene(self, scene: Any, opacity: float) -> None:
        self.scene = scene
        self.opacity = opacity
        self.fallback_shown = False

    def fade_to(self, opacity: float, duration_ms: float) -> None:
        self.fades.append((opacity, duration_ms))
        self.opacity = opacity

    def register_frame_callback(self, callback: FrameCallback) -> int:
        token = self._next_token
        self._next_token += 1
        self._callbacks[token] = callback
        return token

    def unregister_frame_callback(self, token: int) -> None:
        self._callbacks.pop(token, None)

    @property
    def callback_count(self) -> int:
        return len(self._callbacks)

    def tick(self, delta: float) -> None:
        """Render one frame: advance the clock by delta seconds and call every callback."""
        self.elapsed += delta
        self.frames += 1
        for callback in list(self._callbacks.values()):
            callback(self.elapsed, delta)
