"""Pydantic V2 schemas for hostile actors.

``HostileConfig`` is what callers pass to a spawn; ``HostileActor`` is the
full per-actor record owned by a ``HostileBehavior`` and handed out only
as a deep copy.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tactical_core.models.enums import BehaviorState
from tactical_core.models.geometry import Position


PositiveFloat = Annotated[float, Field(gt=0)]


class HostileConfig(BaseModel):
    """Spawn configuration for a hostile actor.

    Any stat left as ``None`` is filled from ``HostileDefaults`` at spawn
    time. An empty patrol route is treated as no route at all.

    Attributes:
        name: Display name.
        health: Starting and maximum health.
        detection_range: Radius at which the player is noticed.
        attack_range: Radius at which the hostile can attack.
        speed: Units moved per nominal tick.
        patrol_points: Optional cyclic waypoint route.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, max_length=100, description="Display name")
    health: PositiveFloat | None = None
    detection_range: PositiveFloat | None = None
    attack_range: PositiveFloat | None = None
    speed: PositiveFloat | None = None
    patrol_points: tuple[Position, ...] | None = None

    @field_validator("patrol_points", mode="after")
    @classmethod
    def drop_empty_route(cls, value: tuple[Position, ...] | None) -> tuple[Position, ...] | None:
        """Normalize an empty route to ``None``."""
        if value is not None and len(value) == 0:
            return None
        return value


class HostileActor(BaseModel):
    """State of a single hostile actor.

    Attributes:
        id: Unique, immutable identifier.
        name: Display name.
        state: Current behavior state.
        position: Current position.
        health: Current health, never above ``max_health``.
        max_health: Maximum health.
        detection_range: Radius at which the player is noticed.
        attack_range: Radius at which the hostile can attack.
        speed: Units moved per nominal tick.
        patrol_points: Optional cyclic waypoint route.
        current_patrol_index: Index of the waypoint being walked to.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    id: str = Field(min_length=1, frozen=True, description="Unique actor id")
    name: str = Field(min_length=1, description="Display name")
    state: BehaviorState = Field(description="Behavior state")
    position: Position = Field(description="Current position")
    health: float = Field(ge=0, description="Current health")
    max_health: float = Field(gt=0, description="Maximum health")
    detection_range: PositiveFloat
    attack_range: PositiveFloat
    speed: PositiveFloat
    patrol_points: tuple[Position, ...] | None = None
    current_patrol_index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_invariants(self) -> "HostileActor":
        """Enforce the health ceiling and patrol route consistency."""
        if self.health > self.max_health:
            raise ValueError(
                f"health ({self.health}) must not exceed max_health ({self.max_health})"
            )
        if self.state == BehaviorState.PATROL and not self.patrol_points:
            raise ValueError("patrol state requires a non-empty patrol route")
        if self.patrol_points and self.current_patrol_index >= len(self.patrol_points):
            raise ValueError(
                f"current_patrol_index ({self.current_patrol_index}) is outside "
                f"the patrol route of length {len(self.patrol_points)}"
            )
        return self

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def has_patrol_route(self) -> bool:
        return bool(self.patrol_points)


__all__ = [
    "HostileConfig",
    "HostileActor",
]
