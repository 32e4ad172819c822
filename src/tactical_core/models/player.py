"""Pydantic V2 schemas for the player snapshot and missions.

Both models are frozen: every state transition produces a new
``PlayerState`` and a ``Mission`` never changes once accepted.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from tactical_core.models.geometry import Position


class Mission(BaseModel):
    """A mission offered to the player.

    Attributes:
        id: Unique mission identifier.
        title: Short mission title.
        objective: Free-text objective description.
        reward: Score awarded on completion.
        target_npc: Name of the target, accepted as ``targetNPC`` from
            generator payloads.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1, description="Unique mission id")
    title: str = Field(description="Mission title")
    objective: str = Field(description="Objective text")
    reward: int = Field(ge=0, description="Score reward")
    target_npc: str = Field(
        validation_alias=AliasChoices("target_npc", "targetNPC"),
        description="Target name",
    )


class PlayerState(BaseModel):
    """Immutable snapshot of the player.

    Attributes:
        health: Current health in [0, max_health].
        max_health: Maximum health.
        ammo: Current ammo in [0, max_ammo].
        max_ammo: Ammo capacity.
        player_level: Player level, at least 1.
        position: Player position.
        current_mission: Active mission, if any.
        equipped_weapon_id: Id of the equipped weapon.
        score: Accumulated score.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    health: int = Field(ge=0)
    max_health: int = Field(ge=1)
    ammo: int = Field(ge=0)
    max_ammo: int = Field(ge=0)
    player_level: int = Field(default=1, ge=1)
    position: Position = Field(default_factory=Position)
    current_mission: Mission | None = None
    equipped_weapon_id: str = Field(min_length=1)
    score: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "PlayerState":
        """Ensure health and ammo stay under their maximums."""
        if self.health > self.max_health:
            raise ValueError(f"health ({self.health}) exceeds max_health ({self.max_health})")
        if self.ammo > self.max_ammo:
            raise ValueError(f"ammo ({self.ammo}) exceeds max_ammo ({self.max_ammo})")
        return self

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def has_mission(self) -> bool:
        return self.current_mission is not None


__all__ = [
    "Mission",
    "PlayerState",
]
