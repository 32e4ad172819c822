"""Mission generation contract and local fallbacks.

Submodules:
    provider: ``MissionProvider`` protocol and ``MissionRequest`` payload.
    fallback: Fallback mission table and fallback weapon stats.
    generator: ``MissionGenerator`` with fallback substitution.
"""

from __future__ import annotations

from tactical_core.missions.fallback import (
    FALLBACK_MISSIONS,
    FallbackMissionTemplate,
    fallback_mission,
    fallback_weapon_stats,
    scale_reward,
)
from tactical_core.missions.generator import MissionGenerator
from tactical_core.missions.provider import MissionProvider, MissionRequest


__all__ = [
    "MissionProvider",
    "MissionRequest",
    "MissionGenerator",
    "FallbackMissionTemplate",
    "FALLBACK_MISSIONS",
    "fallback_mission",
    "fallback_weapon_stats",
    "scale_reward",
]
