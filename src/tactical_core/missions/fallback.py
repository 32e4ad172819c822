"""Locally defined missions and weapon stats used when generation fails."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from uuid import uuid4

from tactical_core.core.constants import MIN_PLAYER_LEVEL
from tactical_core.engine.numeric import round_half_up
from tactical_core.models.player import Mission


@dataclass(frozen=True)
class FallbackMissionTemplate:
    """A fallback mission before level scaling.

    Attributes:
        template_id: Stable id prefix of the template.
        title: Mission title.
        objective: Objective text.
        target_npc: Target name.
        base_reward: Reward at level 1.
    """

    template_id: str
    title: str
    objective: str
    target_npc: str
    base_reward: int


FALLBACK_MISSIONS: tuple[FallbackMissionTemplate, ...] = (
    FallbackMissionTemplate(
        template_id="fallback_1",
        title="Sector Sweep",
        objective=(
            "Clear all hostile forces from the designated sector and establish "
            "a safe perimeter."
        ),
        target_npc="Enemy Commander",
        base_reward=500,
    ),
    FallbackMissionTemplate(
        template_id="fallback_2",
        title="Intel Recovery",
        objective="Locate and retrieve the encrypted data drive from the abandoned outpost.",
        target_npc="Intel Officer",
        base_reward=750,
    ),
    FallbackMissionTemplate(
        template_id="fallback_3",
        title="High Value Target",
        objective=(
            "Track and eliminate the enemy lieutenant before they escape the combat zone."
        ),
        target_npc="Lieutenant Voss",
        base_reward=1000,
    ),
    FallbackMissionTemplate(
        template_id="fallback_4",
        title="Supply Line Disruption",
        objective="Intercept and destroy the enemy supply convoy approaching from the north.",
        target_npc="Convoy Leader",
        base_reward=600,
    ),
    FallbackMissionTemplate(
        template_id="fallback_5",
        title="Rescue Operation",
        objective="Extract the captured operative from the enemy stronghold before dawn.",
        target_npc="Prison Warden",
        base_reward=850,
    ),
)


def scale_reward(base_reward: int, player_level: int, *, level_step: float = 0.2) -> int:
    """Scale a level-1 reward to ``player_level``.

    Example:
        >>> scale_reward(500, 3)
        700
    """
    level = max(MIN_PLAYER_LEVEL, player_level)
    return round_half_up(base_reward * (1 + (level - 1) * level_step))


def fallback_mission(
    player_level: int,
    *,
    rng: random.Random | None = None,
    level_step: float = 0.2,
) -> Mission:
    """Pick a fallback mission scaled to the player's level.

    Every call yields a fresh unique id, even for the same template.
    """
    rng = rng or random.Random()
    template = rng.choice(FALLBACK_MISSIONS)
    return Mission(
        id=f"{template.template_id}_{uuid4().hex[:12]}",
        title=template.title,
        objective=template.objective,
        reward=scale_reward(template.base_reward, player_level, level_step=level_step),
        target_npc=template.target_npc,
    )


def fallback_weapon_stats(rng: random.Random | None = None) -> dict[str, float]:
    """Roll weapon stats for when weapon generation fails.

    The result is unclamped raw data meant for
    ``WeaponFactory.create_generated``.
    """
    rng = rng or random.Random()
    return {
        "damage": 25 + rng.random() * 50,
        "fire_rate": 2 + rng.random() * 8,
        "recoil": 0.1 + rng.random() * 0.5,
        "spread": 0.02 + rng.random() * 0.15,
        "magazine_size": math.floor(10 + rng.random() * 25),
        "reload_time": 1500 + rng.random() * 1500,
    }


__all__ = [
    "FallbackMissionTemplate",
    "FALLBACK_MISSIONS",
    "scale_reward",
    "fallback_mission",
    "fallback_weapon_stats",
]
