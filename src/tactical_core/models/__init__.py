"""Pydantic V2 data models for the tactical combat core.

Submodules:
    enums: Behavior states, weapon categories and intent tags.
    geometry: Immutable plane positions.
    hostile: Hostile spawn config and per-actor record.
    weapons: Weapon stats, configs and the preset reference table.
    player: Player snapshot and missions.
    intents: Intents accepted by the player state store.
"""

from __future__ import annotations

from tactical_core.models.enums import BehaviorState, IntentType, WeaponCategory
from tactical_core.models.geometry import Position
from tactical_core.models.hostile import HostileActor, HostileConfig
from tactical_core.models.intents import (
    AddScore,
    CompleteMission,
    EquipWeapon,
    Heal,
    Intent,
    Move,
    PlayerIntent,
    Reload,
    Reset,
    SetMission,
    Shoot,
    TakeDamage,
    parse_intent,
)
from tactical_core.models.player import Mission, PlayerState
from tactical_core.models.weapons import PRESET_WEAPONS, WeaponConfig, WeaponStats


__all__ = [
    # Enums
    "BehaviorState",
    "IntentType",
    "WeaponCategory",
    # Geometry
    "Position",
    # Hostiles
    "HostileActor",
    "HostileConfig",
    # Weapons
    "WeaponStats",
    "WeaponConfig",
    "PRESET_WEAPONS",
    # Player
    "Mission",
    "PlayerState",
    # Intents
    "PlayerIntent",
    "Intent",
    "Shoot",
    "Reload",
    "TakeDamage",
    "Heal",
    "Move",
    "SetMission",
    "CompleteMission",
    "EquipWeapon",
    "AddScore",
    "Reset",
    "parse_intent",
]
