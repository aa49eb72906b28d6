"""
Folio Scheduling
================
Host scheduling primitives used by the scene composer:

  call_later(delay_ms, cb)         — one-shot timer
  call_when_idle(cb, timeout_ms)   — run on the next idle period, or at the
                                     deadline if the host never goes idle

VirtualClock implements both deterministically on a single thread: nothing
runs until advance() or signal_idle() is called.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger("folio.scheduling")


class Handle:
    """A scheduled callback. Runs at most once; cancel() after that is a no-op."""

    def __init__(self, callback: Callable[[], None], label: str = ""):
        self._callback = callback
        self.label = label or getattr(callback, "__name__", "callback")
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        if self.active:
            self.cancelled = True

    def _run(self) -> None:
        if not self.active:
            return
        self.fired = True
        self._callback()


class Scheduler(Protocol):
    supports_idle: bool

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> Handle: ...

    def call_when_idle(self, callback: Callable[[], None], timeout_ms: float) -> Handle: ...


def schedule_idle_or_deadline(
    scheduler: Scheduler,
    callback: Callable[[], None],
    timeout_ms: float,
    fallback_ms: float,
) -> Handle:
    """Prefer an idle slot bounded by timeout_ms; plain timer on hosts without idle support."""
    if scheduler.supports_idle:
        return scheduler.call_when_idle(callback, timeout_ms)
    return scheduler.call_later(fallback_ms, callback)


class VirtualClock:
    """Deterministic scheduler for headless runs and tests."""

    def __init__(self, supports_idle: bool = True):
        self.supports_idle = supports_idle
        self.now_ms = 0.0
        self._timers: list[tuple[float, int, Handle]] = []
        self._idle: list[Handle] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> Handle:
        handle = Handle(callback)
        self._push(self.now_ms + max(delay_ms, 0.0), handle)
        return handle

    def call_when_idle(self, callback: Callable[[], None], timeout_ms: float) -> Handle:
        if not self.supports_idle:
            raise RuntimeError("host has no idle callbacks; use call_later")
        handle = Handle(callback)
        self._idle.append(handle)
        # same handle on the timer heap: whichever comes first runs it
        self._push(self.now_ms + max(timeout_ms, 0.0), handle)
        return handle

    def _push(self, when: float, handle: Handle) -> None:
        heapq.heappush(self._timers, (when, next(self._seq), handle))

    def signal_idle(self) -> int:
        """Host reports an idle period. Returns number of callbacks run."""
        waiting, self._idle = self._idle, []
        ran = 0
        for handle in waiting:
            if handle.active:
                handle._run()
                ran += 1
        return ran

    def advance(self, ms: float) -> int:
        """Move time forward, firing due timers in order. Returns number run."""
        target = self.now_ms + ms
        ran = 0
        while self._timers and self._timers[0][0] <= target:
            when, _, handle = heapq.heappop(self._timers)
            self.now_ms = when
            if handle.active:
                handle._run()
                ran += 1
        self.now_ms = target
        self._idle = [h for h in self._idle if h.active]
        return ran

    @property
    def pending(self) -> list[Handle]:
        """Active handles, in firing order."""
        seen = set()
        out = []
        for _, _, handle in sorted(self._timers):
            if handle.active and id(handle) not in seen:
                seen.add(id(handle))
                out.append(handle)
        return out
