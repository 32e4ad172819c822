"""Player intents dispatched into the player state store.

Each intent is a frozen model tagged with its ``IntentType``. Glue code
that receives intents as plain dicts (for instance from a UI bridge) can
turn them into models with ``parse_intent``.

Example:
    >>> parse_intent({"type": "TAKE_DAMAGE", "amount": 10})
    TakeDamage(type=<IntentType.TAKE_DAMAGE: 'TAKE_DAMAGE'>, amount=10)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tactical_core.models.enums import IntentType
from tactical_core.models.player import Mission


class PlayerIntent(BaseModel):
    """Base class for all intents."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Shoot(PlayerIntent):
    """Spend one round."""

    type: Literal[IntentType.SHOOT] = IntentType.SHOOT


class Reload(PlayerIntent):
    """Refill ammo to capacity."""

    type: Literal[IntentType.RELOAD] = IntentType.RELOAD


class TakeDamage(PlayerIntent):
    """Lose health."""

    type: Literal[IntentType.TAKE_DAMAGE] = IntentType.TAKE_DAMAGE
    amount: int = Field(ge=0)


class Heal(PlayerIntent):
    """Recover health."""

    type: Literal[IntentType.HEAL] = IntentType.HEAL
    amount: int = Field(ge=0)


class Move(PlayerIntent):
    """Relative displacement of the player."""

    type: Literal[IntentType.MOVE] = IntentType.MOVE
    dx: float = 0.0
    dy: float = 0.0


class SetMission(PlayerIntent):
    """Replace the active mission."""

    type: Literal[IntentType.SET_MISSION] = IntentType.SET_MISSION
    mission: Mission


class CompleteMission(PlayerIntent):
    """Cash in the active mission's reward."""

    type: Literal[IntentType.COMPLETE_MISSION] = IntentType.COMPLETE_MISSION


class EquipWeapon(PlayerIntent):
    """Switch the equipped weapon."""

    type: Literal[IntentType.EQUIP_WEAPON] = IntentType.EQUIP_WEAPON
    weapon_id: str = Field(min_length=1)


class AddScore(PlayerIntent):
    """Award score outside of missions."""

    type: Literal[IntentType.ADD_SCORE] = IntentType.ADD_SCORE
    amount: int = Field(ge=0)


class Reset(PlayerIntent):
    """Restore the initial snapshot."""

    type: Literal[IntentType.RESET] = IntentType.RESET


Intent = Annotated[
    Union[
        Shoot,
        Reload,
        TakeDamage,
        Heal,
        Move,
        SetMission,
        CompleteMission,
        EquipWeapon,
        AddScore,
        Reset,
    ],
    Field(discriminator="type"),
]

_intent_adapter: TypeAdapter[Intent] = TypeAdapter(Intent)


def parse_intent(data: dict[str, Any]) -> PlayerIntent:
    """Validate a plain dict into the matching intent model.

    Raises:
        pydantic.ValidationError: If the tag is unknown or the payload is malformed.
    """
    return _intent_adapter.validate_python(data)


__all__ = [
    "PlayerIntent",
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
    "Intent",
    "parse_intent",
]
