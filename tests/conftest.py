"""Shared test fixtures and factory functions for folio tests."""

import numpy as np
import pytest

from folio.core.device import EnvironmentSignals, StaticSignalSource
from folio.scheduling import VirtualClock
from folio.surface import HeadlessSurface


DESKTOP_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36"
IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148"
ANDROID_UA = "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile Safari/537.36"


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def surface():
    return HeadlessSurface()


# =============================================================================
# Factory functions — call directly in tests or fixtures
# =============================================================================


def make_signals(
    user_agent: str = DESKTOP_UA,
    cores: int | None = 8,
    memory: float | None = 8.0,
    dpr: float | None = 1.0,
) -> EnvironmentSignals:
    """Desktop-class signals unless overridden."""
    return EnvironmentSignals(
        user_agent=user_agent,
        hardware_concurrency=cores,
        device_memory=memory,
        device_pixel_ratio=dpr,
        viewport=(1920, 1080),
    )


def desktop_source(**kwargs) -> StaticSignalSource:
    return StaticSignalSource(make_signals(**kwargs))


def mobile_source(**kwargs) -> StaticSignalSource:
    kwargs.setdefault("user_agent", IPHONE_UA)
    return StaticSignalSource(make_signals(**kwargs))
