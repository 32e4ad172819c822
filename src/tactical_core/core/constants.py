"""Application-wide constants for the tactical combat core.

Tunable gameplay values (ranges, speeds, initial player snapshot) live in
``tactical_core.core.config``. This module keeps the fixed rules that
external data is clamped against.
"""

from __future__ import annotations

# =============================================================================
# Weapon Validation Bounds
# =============================================================================

DAMAGE_BOUNDS = (1.0, 200.0)
"""Allowed damage per shot for externally supplied weapon configs."""

FIRE_RATE_BOUNDS = (0.1, 20.0)
"""Allowed shots per second."""

RECOIL_BOUNDS = (0.0, 1.0)
"""Allowed recoil factor."""

SPREAD_BOUNDS = (0.0, 1.0)
"""Allowed spread factor."""

MAGAZINE_SIZE_BOUNDS = (1, 100)
"""Allowed magazine size after flooring to an integer."""

RELOAD_TIME_BOUNDS_MS = (500.0, 5000.0)
"""Allowed reload duration in milliseconds."""

DEFAULT_WEAPON_NAME = "Unknown Weapon"
"""Name used when an external weapon config omits one."""

DEFAULT_WEAPON_CATEGORY = "rifle"
"""Category used when an external weapon config omits one."""

DEFAULT_GENERATED_STATS: dict[str, float] = {
    "damage": 30,
    "fire_rate": 5,
    "recoil": 0.3,
    "spread": 0.1,
    "magazine_size": 20,
    "reload_time": 2000,
}
"""Baseline stats that partial generated weapon stats are merged over."""

# =============================================================================
# Recoil Model
# =============================================================================

RECOIL_HORIZONTAL_SCALE = 10.0
"""Horizontal reticle kick per unit of recoil (symmetric left/right)."""

RECOIL_VERTICAL_SCALE = 15.0
"""Vertical reticle kick per unit of recoil (always upward)."""

# =============================================================================
# Missions
# =============================================================================

MIN_PLAYER_LEVEL = 1
"""Lowest player level accepted by the mission contract."""


__all__ = [
    "DAMAGE_BOUNDS",
    "FIRE_RATE_BOUNDS",
    "RECOIL_BOUNDS",
    "SPREAD_BOUNDS",
    "MAGAZINE_SIZE_BOUNDS",
    "RELOAD_TIME_BOUNDS_MS",
    "DEFAULT_WEAPON_NAME",
    "DEFAULT_WEAPON_CATEGORY",
    "DEFAULT_GENERATED_STATS",
    "RECOIL_HORIZONTAL_SCALE",
    "RECOIL_VERTICAL_SCALE",
    "MIN_PLAYER_LEVEL",
]
