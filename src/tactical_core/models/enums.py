"""Enumerations shared by the tactical core models."""

from __future__ import annotations

from enum import StrEnum


class BehaviorState(StrEnum):
    """Behavior state of a hostile actor.

    Death is not a state: a hostile at zero health keeps whatever state
    it last had and is filtered out by health checks.
    """

    IDLE = "idle"
    """Standing still until the player comes within detection range."""

    PATROL = "patrol"
    """Walking a cyclic waypoint route."""

    AGGRESSIVE = "aggressive"
    """Chasing the player and able to attack once in range."""


class WeaponCategory(StrEnum):
    """Weapon categories with a preset in the reference table."""

    PISTOL = "pistol"
    RIFLE = "rifle"
    SHOTGUN = "shotgun"
    SNIPER = "sniper"


class IntentType(StrEnum):
    """Tags of the intents the player state store understands."""

    SHOOT = "SHOOT"
    RELOAD = "RELOAD"
    TAKE_DAMAGE = "TAKE_DAMAGE"
    HEAL = "HEAL"
    MOVE = "MOVE"
    SET_MISSION = "SET_MISSION"
    COMPLETE_MISSION = "COMPLETE_MISSION"
    EQUIP_WEAPON = "EQUIP_WEAPON"
    ADD_SCORE = "ADD_SCORE"
    RESET = "RESET"


__all__ = [
    "BehaviorState",
    "WeaponCategory",
    "IntentType",
]
