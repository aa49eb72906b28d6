"""
Quality Profiles
================
Maps a capability tier to the concrete rendering parameters for the session.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from folio.config import (
    CONSTRAINED_PIXEL_RATIO,
    CONSTRAINED_PROFILE,
    FULL_PROFILE,
    MAX_PIXEL_RATIO,
)
from folio.core.device import CapabilityTier, EnvironmentSignals, classify


@dataclass(frozen=True)
class QualityProfile:
    tier: CapabilityTier
    particle_count: int
    foreground_particle_count: int
    particle_size: float
    enable_accent_shape: bool
    enable_float_motion: bool
    enable_dynamic_lighting: bool
    enable_fog: bool
    frame_skip: int
    pixel_ratio_cap: float

    @property
    def is_constrained(self) -> bool:
        return self.tier is CapabilityTier.CONSTRAINED


def cap_pixel_ratio(reported: float | None) -> float:
    """Clamp the reported pixel ratio to MAX_PIXEL_RATIO. Missing/invalid → 1.0."""
    if reported is None or not math.isfinite(reported) or reported <= 0:
        reported = 1.0
    return min(float(reported), MAX_PIXEL_RATIO)


def select_profile(tier: CapabilityTier, device_pixel_ratio: float | None = None) -> QualityProfile:
    """Build the profile for a tier.

    Args:
        tier: Capability tier from classify()
        device_pixel_ratio: Reported pixel ratio (only used for the full tier)

    Returns:
        QualityProfile (immutable)
    """
    if tier is CapabilityTier.CONSTRAINED:
        return QualityProfile(tier=tier, pixel_ratio_cap=CONSTRAINED_PIXEL_RATIO, **CONSTRAINED_PROFILE)
    return QualityProfile(tier=tier, pixel_ratio_cap=cap_pixel_ratio(device_pixel_ratio), **FULL_PROFILE)


def profile_for(signals: EnvironmentSignals) -> QualityProfile:
    """Classify, then select."""
    return select_profile(classify(signals), signals.device_pixel_ratio)
