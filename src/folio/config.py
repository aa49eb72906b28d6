"""
Folio Configuration
===================
Centralized config for the portfolio backdrop and the content sync.
Quality tiers, scene layout, timings, sync output.
"""

from __future__ import annotations

import math
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

# =============================================================================
# DEVICE CLASSIFICATION
# =============================================================================

MOBILE_KEYWORDS = ("mobile", "android", "iphone", "ipad", "tablet")

LOW_END_CORES = 4        # hardware_concurrency <= this → constrained
LOW_END_MEMORY_GB = 4    # device_memory <= this (when reported) → constrained

USER_AGENT = os.environ.get("FOLIO_USER_AGENT", "")


def _env_float(name: str, default: float) -> float:
    """Float from env var. Unparseable or non-finite values fall back to default."""
    try:
        value = float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


DEVICE_PIXEL_RATIO = _env_float("FOLIO_DEVICE_PIXEL_RATIO", 1.0)

# =============================================================================
# QUALITY PROFILES
# =============================================================================

MAX_PIXEL_RATIO = 2.0

CONSTRAINED_PROFILE = {
    "particle_count": 300,
    "foreground_particle_count": 30,
    "particle_size": 0.004,
    "enable_accent_shape": False,
    "enable_float_motion": False,
    "enable_dynamic_lighting": False,
    "enable_fog": False,
    "frame_skip": 2,
}

FULL_PROFILE = {
    "particle_count": 1000,
    "foreground_particle_count": 80,
    "particle_size": 0.003,
    "enable_accent_shape": True,
    "enable_float_motion": True,
    "enable_dynamic_lighting": True,
    "enable_fog": True,
    "frame_skip": 1,
}

CONSTRAINED_PIXEL_RATIO = 1.0

# =============================================================================
# PARTICLE FIELDS
# =============================================================================

BACKGROUND_FIELD_RADIUS = 2.5
BACKGROUND_FIELD_COLOR = "#059669"

FOREGROUND_FIELD_RADIUS = 1.5
FOREGROUND_FIELD_COLOR = "#34d399"
FOREGROUND_SIZE_FACTOR = 2.5     # foreground points are 2.5x the base size

FIELD_GROUP_ROTATION = (0.0, 0.0, math.pi / 4)
FIELD_OPACITY = 0.6

# Rotation per accepted tick: angle -= delta / divisor
FIELD_SPIN_X_DIVISOR = 15.0
FIELD_SPIN_Y_DIVISOR = 20.0

# =============================================================================
# ACCENT SHAPE
# =============================================================================

ACCENT_POSITION = (1.0, 0.0, -0.5)
ACCENT_SCALE = 0.8
ACCENT_RADIUS = 1.0
ACCENT_DETAIL = 1
ACCENT_COLOR = "#059669"
ACCENT_EMISSIVE = "#064e3b"
ACCENT_EMISSIVE_INTENSITY = 2.0
ACCENT_OPACITY = 0.3

ACCENT_SPIN_X = 0.2   # rad per second of elapsed time
ACCENT_SPIN_Y = 0.3

FLOAT_SPEED = 4.0
FLOAT_ROTATION_INTENSITY = 1.0
FLOAT_INTENSITY = 2.0

# =============================================================================
# SCENE
# =============================================================================

CAMERA_POSITION = (0.0, 0.0, 2.5)
CAMERA_FOV = 75.0

FOG_COLOR = "#000000"
FOG_NEAR = 1.0
FOG_FAR = 5.0

# =============================================================================
# TIMINGS (ms)
# =============================================================================

IDLE_TIMEOUT_MS = int(os.environ.get("FOLIO_IDLE_TIMEOUT_MS", "500"))
NO_IDLE_FALLBACK_MS = 50   # host without idle callbacks
REVEAL_DELAY_MS = 200      # ready-hidden → ready-visible
FADE_DURATION_MS = 1000

# =============================================================================
# DATA SYNC
# =============================================================================

# JSON key → attribute name on the content module
SYNC_KEYS: dict[str, str] = {
    "skills": "skills",
    "skillCategories": "skill_categories",
    "experiences": "experiences",
    "projects": "projects",
    "aboutSkills": "about_skills",
    "services": "services",
}

DEFAULT_CONTENT_MODULE = "folio.content.data"
FALLBACK_ICON_LABEL = "Icon"

SYNC_OUTPUT = Path(
    os.environ.get(
        "PORTFOLIO_DATA_OUTPUT",
        str(Path(__file__).resolve().parents[2] / "public" / "portfolioData.json"),
    )
)
