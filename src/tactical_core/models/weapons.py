"""Pydantic V2 schemas for weapons and the preset reference table.

The preset table is a compatibility contract: its values must stay
exactly as listed.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from tactical_core.models.enums import WeaponCategory


class WeaponStats(BaseModel):
    """Ballistic and handling stats of a weapon.

    Attributes:
        damage: Base damage per shot.
        fire_rate: Shots per second.
        recoil: Reticle kick factor in [0, 1].
        spread: Maximum fractional damage reduction in [0, 1].
        magazine_size: Rounds per magazine.
        reload_time: Reload duration in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    damage: float = Field(gt=0, description="Base damage per shot")
    fire_rate: float = Field(gt=0, description="Shots per second")
    recoil: float = Field(ge=0, le=1, description="Recoil factor")
    spread: float = Field(ge=0, le=1, description="Spread factor")
    magazine_size: int = Field(ge=1, description="Rounds per magazine")
    reload_time: float = Field(ge=500, description="Reload duration in ms")

    @property
    def fire_interval_ms(self) -> float:
        """Minimum time between successful shots."""
        return 1000.0 / self.fire_rate


class WeaponConfig(BaseModel):
    """A named weapon with its category and stats."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Display name")
    category: WeaponCategory = Field(description="Weapon category")
    stats: WeaponStats


PRESET_WEAPONS: Mapping[str, WeaponConfig] = MappingProxyType(
    {
        "pistol": WeaponConfig(
            name="M9 Pistol",
            category=WeaponCategory.PISTOL,
            stats=WeaponStats(
                damage=25,
                fire_rate=3,
                recoil=0.2,
                spread=0.05,
                magazine_size=15,
                reload_time=1500,
            ),
        ),
        "rifle": WeaponConfig(
            name="M4A1 Rifle",
            category=WeaponCategory.RIFLE,
            stats=WeaponStats(
                damage=35,
                fire_rate=8,
                recoil=0.4,
                spread=0.08,
                magazine_size=30,
                reload_time=2000,
            ),
        ),
        "shotgun": WeaponConfig(
            name="M870 Shotgun",
            category=WeaponCategory.SHOTGUN,
            stats=WeaponStats(
                damage=80,
                fire_rate=1,
                recoil=0.8,
                spread=0.3,
                magazine_size=8,
                reload_time=2500,
            ),
        ),
        "sniper": WeaponConfig(
            name="M24 Sniper",
            category=WeaponCategory.SNIPER,
            stats=WeaponStats(
                damage=120,
                fire_rate=0.5,
                recoil=0.9,
                spread=0.02,
                magazine_size=5,
                reload_time=3000,
            ),
        ),
    }
)
"""Reference presets keyed by preset id."""


__all__ = [
    "WeaponStats",
    "WeaponConfig",
    "PRESET_WEAPONS",
]
