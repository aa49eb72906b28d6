"""
Device Classification
=====================
Coarse capability tier from environment signals (user agent, cores, memory,
pixel density). Sensing goes through a SignalSource so tests and the preview
CLI can inject signals instead of reading the host.
"""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from folio.config import (
    DEVICE_PIXEL_RATIO,
    LOW_END_CORES,
    LOW_END_MEMORY_GB,
    MOBILE_KEYWORDS,
    USER_AGENT,
)

logger = logging.getLogger("folio.device")


class CapabilityTier(str, Enum):
    CONSTRAINED = "constrained"
    FULL = "full"


@dataclass(frozen=True)
class EnvironmentSignals:
    """One sample of the host environment. Optional fields may be unsupported."""

    user_agent: str = ""
    hardware_concurrency: int | None = None
    device_memory: float | None = None
    device_pixel_ratio: float | None = None
    viewport: tuple[int, int] | None = None


class SignalSource(Protocol):
    def read(self) -> EnvironmentSignals: ...


class StaticSignalSource:
    """Explicitly injected signals."""

    def __init__(self, signals: EnvironmentSignals):
        self._signals = signals

    def read(self) -> EnvironmentSignals:
        return self._signals


class HostSignalSource:
    """Samples the machine this process runs on."""

    def read(self) -> EnvironmentSignals:
        return EnvironmentSignals(
            user_agent=USER_AGENT or _platform_user_agent(),
            hardware_concurrency=os.cpu_count(),
            device_memory=_physical_memory_gb(),
            device_pixel_ratio=DEVICE_PIXEL_RATIO,
        )


def _platform_user_agent() -> str:
    return f"{platform.system()} {platform.release()} ({platform.machine()}) Python/{platform.python_version()}"


def _physical_memory_gb() -> float | None:
    """Physical memory in GiB, or None where the OS does not report it."""
    try:
        pages = os.sysconf("SC_PHYS_PAGES")
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError):
        return None
    if pages <= 0 or page_size <= 0:
        return None
    return round(pages * page_size / 1024 ** 3, 1)


def read_signals(source: SignalSource) -> EnvironmentSignals:
    """Sample the source once."""
    signals = source.read()
    logger.debug("Signals: %s", signals)
    return signals


def is_mobile_agent(user_agent: str | None) -> bool:
    ua = (user_agent or "").lower()
    return any(keyword in ua for keyword in MOBILE_KEYWORDS)


def is_low_end(hardware_concurrency: int | None, device_memory: float | None) -> bool:
    """Few cores or little memory. Unreported values never count as low-end."""
    if hardware_concurrency is not None and hardware_concurrency <= LOW_END_CORES:
        return True
    return device_memory is not None and device_memory <= LOW_END_MEMORY_GB


def classify(signals: EnvironmentSignals) -> CapabilityTier:
    if is_mobile_agent(signals.user_agent) or is_low_end(
        signals.hardware_concurrency, signals.device_memory
    ):
        return CapabilityTier.CONSTRAINED
    return CapabilityTier.FULL
